from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    # App config
    app_name: str = "Wellbeing API Gateway"
    debug: bool = False
    log_level: str = "INFO"
    port: int = 3000

    # JWT - tokens are issued by auth-service, verified locally
    jwt_secret: str
    jwt_algorithm: str = "HS256"

    # Upstream service URLs (docker-compose DNS)
    auth_service_url: str = "http://auth-service:8003"
    sentiment_service_url: str = "http://sentiment-analysis:8000"
    intent_service_url: str = "http://intent-recognition:8001"
    rag_service_url: str = "http://rag-service:8002"
    # Journal and emotion storage live in rag-service unless overridden
    journal_service_url: Optional[str] = None
    emotion_service_url: Optional[str] = None

    # Upstream timeouts (seconds)
    sentiment_timeout: float = 5.0
    intent_timeout: float = 5.0
    chat_timeout: float = 10.0
    retrieve_timeout: float = 10.0
    journal_timeout: float = 5.0
    journal_create_timeout: float = 10.0
    emotion_timeout: float = 10.0
    auth_timeout: float = 10.0

    # Chat pipeline policy
    chat_fallback_enabled: bool = True
    chat_fallback_message: str = "I'm here to listen and support you. How can I help you today?"
    rag_forward_analysis: bool = False

    # Emotion routes are public unless this is switched on
    emotions_require_auth: bool = False

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    @property
    def journal_base_url(self) -> str:
        return self.journal_service_url or self.rag_service_url

    @property
    def emotion_base_url(self) -> str:
        return self.emotion_service_url or self.rag_service_url


settings = Settings()

"""
Auth Service Client
HTTP client for user registration and login
"""

from typing import Any, Dict

import structlog

from app.utils.service_client import ServiceClient

logger = structlog.get_logger(__name__)


class AuthClient(ServiceClient):
    """Pass-through client for auth-service"""

    service_name = "auth-service"

    async def register(self, user_data: Dict[str, Any]) -> Any:
        """Register a new user"""
        logger.info("Registering user", email=user_data.get("email"))
        return await self._request(
            "POST", "/register", json=user_data, error_message="Failed to register user"
        )

    async def login(self, credentials: Dict[str, Any]) -> Any:
        """Login a user; returns the auth-service payload with the JWT"""
        logger.info("Logging in user", email=credentials.get("email"))
        return await self._request(
            "POST", "/login", json=credentials, error_message="Failed to login user"
        )

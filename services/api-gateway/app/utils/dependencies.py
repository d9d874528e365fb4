"""
FastAPI Dependencies
Upstream clients, chat orchestrator and authentication dependencies
"""

from typing import Annotated, Any, Dict, Optional

import structlog
from fastapi import Depends, Header, Request

from app.config import settings
from app.services.chat_service import ChatOrchestrator
from app.utils.clients import ServiceClients
from app.utils.errors import GatewayError, InternalError, UnauthorizedError
from app.utils.security import decode_access_token, extract_bearer_token, resolve_user_id

logger = structlog.get_logger(__name__)


def get_clients(request: Request) -> ServiceClients:
    """Shared upstream clients created in the app lifespan"""
    return request.app.state.clients


def get_chat_service(clients: ServiceClients = Depends(get_clients)) -> ChatOrchestrator:
    return ChatOrchestrator(clients.sentiment, clients.intent, clients.rag)


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Dict[str, Any]:
    """
    Verify the bearer token and attach its claims to the request

    Args:
        request: Incoming request; claims are stored on request.state.user
        authorization: Authorization header

    Returns:
        dict: Decoded token claims

    Raises:
        UnauthorizedError: If the header is missing or the token is invalid
            or carries no user identifier
        InternalError: If verification fails for any other reason
    """
    try:
        token = extract_bearer_token(authorization)
        claims = decode_access_token(token, settings.jwt_secret, settings.jwt_algorithm)
        if resolve_user_id(claims) is None:
            logger.warning("Token carries no user identifier")
            raise UnauthorizedError("Invalid token")
    except GatewayError:
        raise
    except Exception as e:
        logger.error("Auth middleware error", error=str(e), exc_info=True)
        raise InternalError()

    request.state.user = claims
    return claims


async def get_emotions_caller(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Optional[Dict[str, Any]]:
    """Emotion routes are public unless EMOTIONS_REQUIRE_AUTH is set"""
    if not settings.emotions_require_auth:
        return None
    return await get_current_user(request, authorization)


# Type aliases for cleaner dependency injection
Clients = Annotated[ServiceClients, Depends(get_clients)]
ChatService = Annotated[ChatOrchestrator, Depends(get_chat_service)]
CurrentUser = Annotated[dict, Depends(get_current_user)]
EmotionsCaller = Annotated[Optional[dict], Depends(get_emotions_caller)]

"""
Gateway error taxonomy

Every error raised by route handlers, dependencies and pass-through upstream
calls derives from GatewayError. The handlers registered in app.main render
them as JSON bodies of the form {"error": <message>}.
"""

from typing import Any, Optional


class GatewayError(Exception):
    """Base class for errors that map to an HTTP response"""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> dict:
        return {"error": self.message}


class MissingFieldError(GatewayError):
    """Required input is absent or empty"""

    status_code = 400


class UnauthorizedError(GatewayError):
    """Missing or invalid bearer credential"""

    status_code = 401


class NotFoundError(GatewayError):
    """Single-entity lookup miss"""

    status_code = 404


class InternalError(GatewayError):
    """Unexpected local fault"""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class UpstreamError(GatewayError):
    """
    A pass-through upstream call failed.

    When the upstream answered, its status code and body are kept so the
    response can be forwarded; otherwise the service is treated as
    unavailable and the gateway answers 502.
    """

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        upstream_status: Optional[int] = None,
        upstream_body: Any = None,
    ):
        super().__init__(message, status_code=upstream_status or 502)
        self.service = service
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body

    @property
    def unavailable(self) -> bool:
        return self.upstream_status is None

    def to_body(self) -> dict:
        if isinstance(self.upstream_body, dict) and self.upstream_body:
            return self.upstream_body
        return {"error": self.message}

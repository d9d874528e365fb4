"""
Upstream Service HTTP Client
Base class shared by every client the gateway uses to reach a backend service

Connection pooling follows the httpx recommendations:
- Single shared AsyncClient per upstream, initialized at app startup
- Limits to prevent connection exhaustion
- Per-call timeout so one slow upstream cannot hold a request open

Two failure policies are offered to subclasses:
- _request: pass-through call, failures raise UpstreamError
- _request_or_default: degrading call, failures return a default value
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx
import structlog

from app.utils.errors import UpstreamError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Lookup:
    """Outcome of a single-entity lookup: found (with data) or not found"""

    found: bool
    data: Any = None

    @classmethod
    def hit(cls, data: Any) -> "Lookup":
        return cls(found=True, data=data)

    @classmethod
    def miss(cls) -> "Lookup":
        return cls(found=False)


class ServiceClient:
    """
    HTTP client for one upstream capability.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not started, falls back to a per-request client
    """

    service_name = "upstream"

    # Connection pool settings (per worker)
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    KEEPALIVE_EXPIRY = 5.0

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _build_client(self) -> httpx.AsyncClient:
        limits = httpx.Limits(
            max_connections=self.MAX_CONNECTIONS,
            max_keepalive_connections=self.MAX_KEEPALIVE,
            keepalive_expiry=self.KEEPALIVE_EXPIRY
        )
        return httpx.AsyncClient(
            base_url=self.base_url,
            limits=limits,
            timeout=httpx.Timeout(self.timeout),
            headers={'Content-Type': 'application/json'},
            transport=self._transport,
        )

    async def start(self):
        """Initialize the shared HTTP client"""
        if self._client is not None:
            logger.warning("Client already started", service=self.service_name)
            return

        self._client = self._build_client()
        logger.info(
            "Client started",
            service=self.service_name,
            base_url=self.base_url,
            max_connections=self.MAX_CONNECTIONS,
        )

    async def stop(self):
        """Close the HTTP client and release resources"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Client stopped", service=self.service_name)

    async def _send(self, method: str, endpoint: str, timeout: Optional[float] = None, **kwargs) -> httpx.Response:
        timeout = timeout or self.timeout

        if self._client:
            return await self._client.request(method, endpoint, timeout=timeout, **kwargs)

        logger.warning("Client not started, using per-request client", service=self.service_name)
        async with self._build_client() as client:
            return await client.request(method, endpoint, timeout=timeout, **kwargs)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text or None

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        error_message: str,
        timeout: Optional[float] = None,
        **kwargs
    ) -> Any:
        """Pass-through call: return the upstream payload or raise UpstreamError"""
        try:
            response = await self._send(method, endpoint, timeout=timeout, **kwargs)
            response.raise_for_status()
            return self._decode(response)

        except httpx.HTTPStatusError as e:
            logger.error(
                "Upstream returned error status",
                service=self.service_name,
                endpoint=endpoint,
                status_code=e.response.status_code,
                body=e.response.text[:500],
            )
            raise UpstreamError(
                error_message,
                service=self.service_name,
                upstream_status=e.response.status_code,
                upstream_body=self._error_body(e.response),
            ) from e
        except httpx.TimeoutException as e:
            logger.error("Upstream call timed out", service=self.service_name, endpoint=endpoint, timeout=timeout or self.timeout)
            raise UpstreamError(error_message, service=self.service_name) from e
        except httpx.RequestError as e:
            logger.error("Failed to reach upstream", service=self.service_name, endpoint=endpoint, error=str(e))
            raise UpstreamError(error_message, service=self.service_name) from e
        except ValueError as e:
            logger.error("Upstream returned invalid JSON", service=self.service_name, endpoint=endpoint, error=str(e))
            raise UpstreamError(error_message, service=self.service_name) from e

    async def _lookup(self, method: str, endpoint: str, *, error_message: str, **kwargs) -> Lookup:
        """Single-entity call where an upstream 404 means "not found", not failure"""
        try:
            data = await self._request(method, endpoint, error_message=error_message, **kwargs)
        except UpstreamError as e:
            if e.upstream_status == 404:
                return Lookup.miss()
            raise
        return Lookup.hit(data)

    async def _request_or_default(
        self,
        method: str,
        endpoint: str,
        *,
        parse: Callable[[Any], Any],
        default: Callable[[], Any],
        timeout: Optional[float] = None,
        **kwargs
    ) -> Any:
        """
        Degrading call: never raises on upstream failure.

        Transport errors, timeouts, non-2xx answers and payloads that do not
        parse all yield default().
        """
        try:
            response = await self._send(method, endpoint, timeout=timeout, **kwargs)
            response.raise_for_status()
            return parse(response.json())

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Upstream returned error status, using default",
                service=self.service_name,
                endpoint=endpoint,
                status_code=e.response.status_code,
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Upstream call failed, using default",
                service=self.service_name,
                endpoint=endpoint,
                error_type=type(e).__name__,
                error=str(e),
            )
        except ValueError as e:
            logger.warning(
                "Upstream payload rejected, using default",
                service=self.service_name,
                endpoint=endpoint,
                error=str(e),
            )
        return default()

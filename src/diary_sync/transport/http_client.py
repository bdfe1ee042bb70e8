"""HTTP client for diary service communication."""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING, Any, Literal

import httpx

from diary_sync.domain.interfaces.http_client import IDiaryHttpClient
from diary_sync.error_codes import ErrorCode
from diary_sync.exceptions import TransportFailure
from diary_sync.utils.logging import get_logger

if TYPE_CHECKING:
    from diary_sync.config import Config

logger = get_logger(__name__)


class DiaryHttpClient(IDiaryHttpClient):
    """HTTP client for the diary service.

    Wraps a single long-lived ``httpx.AsyncClient`` configured with the base
    URL, standard headers and a pooled connection limit. Each call issues
    exactly one request; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        user_agent: str = "DiarySync/0.1",
        max_keepalive_connections: int = 10,
        max_connections: int = 20,
        keepalive_expiry: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Root of the diary API, e.g. ``https://host/api``
            timeout: Request timeout in seconds
            user_agent: Value of the User-Agent header
            max_keepalive_connections: Max idle connections to keep alive
            max_connections: Max total connections in pool
            keepalive_expiry: Seconds before idle connections expire
            transport: Optional custom transport (e.g. for tests)
        """
        self.base_url = base_url.rstrip("/")

        pool_limits = httpx.Limits(
            max_keepalive_connections=max_keepalive_connections,
            max_connections=max_connections,
            keepalive_expiry=keepalive_expiry,
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            limits=pool_limits,
            headers={"Accept": "application/json", "User-Agent": user_agent},
            transport=transport,
        )

        logger.debug(
            "diary_http_client_initialized",
            url=self.base_url,
            timeout=timeout,
            max_connections=max_connections,
            max_keepalive=max_keepalive_connections,
        )

    @classmethod
    def from_config(cls, config: Config) -> DiaryHttpClient:
        """Build a client from the settings model."""
        return cls(
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
            max_keepalive_connections=config.max_keepalive_connections,
            max_connections=config.max_connections,
            keepalive_expiry=config.keepalive_expiry,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        files: list[tuple[str, Any]] | None = None,
    ) -> httpx.Response:
        """Send one request and return whatever response arrived."""
        logger.debug("http_request_sent", method=method, path=path)

        try:
            response = await self._client.request(
                method, path, params=params, files=files
            )
        except httpx.TimeoutException as e:
            logger.warning(
                "http_request_timeout",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            msg = f"Network error: {str(e) or type(e).__name__}"
            raise TransportFailure(
                msg,
                error_code=ErrorCode.NET_TIMEOUT.value,
                context={"method": method, "path": path},
            ) from e
        except httpx.TransportError as e:
            logger.warning(
                "http_request_no_response",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            msg = f"Network error: {str(e) or type(e).__name__}"
            raise TransportFailure(
                msg,
                suggestion=f"Check that the diary service is reachable at {self.base_url}.",
                context={"method": method, "path": path},
            ) from e

        logger.debug(
            "http_response_received",
            method=method,
            path=path,
            status=response.status_code,
        )
        return response

    @property
    def async_client(self) -> httpx.AsyncClient:
        """Get the underlying httpx client."""
        return self._client

    async def aclose(self) -> None:
        """Close the connection pool."""
        await self._client.aclose()
        logger.debug("diary_http_client_closed", url=self.base_url)

    async def __aenter__(self) -> DiaryHttpClient:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        """Async context manager exit with cleanup."""
        await self.aclose()
        return False

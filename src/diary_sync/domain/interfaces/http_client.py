"""Interface for HTTP communication with the diary service."""

from abc import ABC, abstractmethod
from typing import Any

import httpx


class IDiaryHttpClient(ABC):
    """Interface for low-level HTTP dispatch to the diary service.

    Implementations own the connection pool, never retry, and report the
    absence of any response as ``TransportFailure``. Status codes are not
    interpreted here.
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        files: list[tuple[str, Any]] | None = None,
    ) -> httpx.Response:
        """Send one request and return whatever response arrived.

        Raises:
            TransportFailure: If no response was received
        """

    @abstractmethod
    async def aclose(self) -> None:
        """Close the connection pool."""

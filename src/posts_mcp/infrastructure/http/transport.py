"""HTTP Transport.

Thin capability that performs a request and yields status code plus raw
body bytes. Connection-level problems are raised as TransportFault; HTTP
status handling is left to the API client.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

import httpx

from posts_mcp.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Raw HTTP response.

    Attributes:
        status_code: HTTP status code
        body: Undecoded response body
    """

    status_code: int
    body: bytes


class TransportFaultKind(str, Enum):
    """Why a request produced no response."""

    UNREACHABLE_HOST = "unreachable_host"  # DNS or connect failure
    OTHER = "other"


class TransportFault(Exception):
    """Request could not be completed by the transport."""

    def __init__(self, kind: TransportFaultKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(f"{kind.value}: {message}")


@runtime_checkable
class ITransport(Protocol):
    """Anything able to perform a single HTTP request."""

    async def perform_request(
        self, method: str, url: str, body: bytes | None = None,
    ) -> TransportResponse: ...


class HttpxTransport:
    """httpx implementation of ITransport.

    Holds one AsyncClient for the lifetime of the transport; call
    ``aclose()`` (or use ``async with``) to release connections.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        user_agent: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds
            user_agent: Optional User-Agent header value
            client: Pre-built client (takes precedence over timeout/user_agent)
        """
        headers = {"Accept": "application/json"}
        if user_agent:
            headers["User-Agent"] = user_agent
        self._client = client or httpx.AsyncClient(timeout=timeout, headers=headers)

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client."""
        await self._client.aclose()

    async def perform_request(
        self, method: str, url: str, body: bytes | None = None,
    ) -> TransportResponse:
        """Perform one request.

        Args:
            method: HTTP method
            url: Absolute URL
            body: Optional JSON-encoded request body

        Returns:
            TransportResponse with status and raw body

        Raises:
            TransportFault: If no response could be obtained
        """
        headers = {"Content-Type": "application/json"} if body is not None else None

        try:
            response = await self._client.request(
                method, url, content=body, headers=headers,
            )
        except httpx.ConnectError as e:
            logger.debug("http_transport_unreachable", method=method, url=url, error=str(e))
            raise TransportFault(TransportFaultKind.UNREACHABLE_HOST, str(e)) from e
        except httpx.HTTPError as e:
            logger.debug("http_transport_failed", method=method, url=url, error=str(e))
            raise TransportFault(TransportFaultKind.OTHER, str(e)) from e

        return TransportResponse(status_code=response.status_code, body=response.content)

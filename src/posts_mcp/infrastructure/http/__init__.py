"""HTTP transport."""
from __future__ import annotations

from posts_mcp.infrastructure.http.transport import (
    HttpxTransport,
    ITransport,
    TransportFault,
    TransportFaultKind,
    TransportResponse,
)

__all__ = [
    "HttpxTransport",
    "ITransport",
    "TransportFault",
    "TransportFaultKind",
    "TransportResponse",
]

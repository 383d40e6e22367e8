"""Network Error Value Object.

Closed set of failure codes an API call can end with.
"""
from __future__ import annotations

from enum import Enum
from typing import Mapping


class NetworkError(str, Enum):
    """Domain classification of a failed remote operation.

    - UNAUTHORIZED: server answered 401
    - REQUEST_TIMEOUT: server answered 408
    - CONFLICT: server answered 409 (create only)
    - PAYLOAD_TOO_LARGE: server answered 413 (create only)
    - SERVER_ERROR: server answered 5xx
    - NO_INTERNET: remote host could not be resolved or reached
    - SERIALIZATION: 2xx response whose body is not the expected shape
    - UNKNOWN: anything else
    """

    UNAUTHORIZED = "UNAUTHORIZED"
    REQUEST_TIMEOUT = "REQUEST_TIMEOUT"
    CONFLICT = "CONFLICT"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    SERVER_ERROR = "SERVER_ERROR"
    NO_INTERNET = "NO_INTERNET"
    SERIALIZATION = "SERIALIZATION"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_status(
        cls,
        status_code: int,
        mapped: Mapping[int, NetworkError],
    ) -> NetworkError:
        """Classify a non-2xx HTTP status.

        Explicit codes are checked first, then the 5xx range.
        Everything else is UNKNOWN.

        Args:
            status_code: HTTP status code of the response
            mapped: Explicit status code table for the operation

        Returns:
            Matching NetworkError
        """
        if status_code in mapped:
            return mapped[status_code]
        if 500 <= status_code <= 599:
            return cls.SERVER_ERROR
        return cls.UNKNOWN

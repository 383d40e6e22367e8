"""Domain layer exceptions.

All domain-specific exceptions inherit from DomainError.
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, value: Any = None) -> None:
        full_message = f"Validation error for '{field}': {message}"
        details = {"field": field, "value": value}
        super().__init__(full_message, details)
        self.field = field
        self.value = value


class InvalidDraftFieldError(ValidationError):
    def __init__(self, field: str, value: str, reason: str) -> None:
        super().__init__(field=field, message=reason, value=value)

"""Custom exceptions for the headless wallet CLI."""

from __future__ import annotations

from typing import Any


class HeadlessError(Exception):
    """Base class for every error raised by this package."""

    def __init__(
        self,
        message: str,
        *,
        status: int = 0,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={str(self)!r})"


class HeadlessUrlError(HeadlessError):
    """Raised when the configured host or the requested path is not a valid URL."""


class HeadlessDecodeError(HeadlessError):
    """Raised when a response that must be parsed is not the expected JSON."""


class RequestValueError(HeadlessError, TypeError):
    """Raised when a value cannot be represented in a request body."""

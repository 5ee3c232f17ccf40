from __future__ import annotations


class NotfisError(Exception):
    """Base class for NOTFIS reader errors."""


class NotfisReadError(NotfisError):
    """The file could not be read or decoded; no partial result is produced."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotfisFormatError(NotfisError, ValueError):
    """A numeric field holds something other than digits (strict mode only)."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw

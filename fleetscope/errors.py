"""Error taxonomy for telemetry retrieval and ingestion."""

from __future__ import annotations


class TelemetryError(Exception):
    """Base exception for telemetry retrieval and ingestion errors."""


class TransportFailure(TelemetryError):
    """Raised when a retrieval call did not complete successfully.

    Covers network errors, timeouts, non-success status codes and bodies that
    could not be decoded.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.operation} failed (HTTP {self.status_code}): {self.message}"
        return f"{self.operation} failed: {self.message}"


class MalformedSnapshot(TelemetryError):
    """Raised when a payload violates the snapshot schema."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.field:
            return f"Malformed snapshot at '{self.field}': {self.message}"
        return f"Malformed snapshot: {self.message}"


__all__ = [
    "MalformedSnapshot",
    "TelemetryError",
    "TransportFailure",
]

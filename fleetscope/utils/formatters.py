"""Display formatting helpers.

All numeric formatters round half-up so a value sitting exactly on the
boundary (e.g. 1250 -> 1.3K) never rounds to even.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from fleetscope.constants.values import NOT_AVAILABLE, STATUS_NEVER

_ONE_DECIMAL = Decimal("0.1")
_WHOLE = Decimal("1")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(_WHOLE, rounding=ROUND_HALF_UP))


def _one_decimal(numerator: int, denominator: int) -> str:
    scaled = Decimal(numerator) / Decimal(denominator)
    return str(scaled.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def format_magnitude(value: int) -> str:
    """Format a count compactly: 999 -> "999", 1500 -> "1.5K", 2500000 -> "2.5M"."""
    if value >= 1_000_000:
        return f"{_one_decimal(value, 1_000_000)}M"
    if value >= 1_000:
        return f"{_one_decimal(value, 1_000)}K"
    return str(value)


def format_duration(ms: int) -> str:
    """Format milliseconds: 500 -> "500ms", 45000 -> "45.0s", 125000 -> "2.1m"."""
    if ms >= 60_000:
        return f"{_one_decimal(ms, 60_000)}m"
    if ms >= 1_000:
        return f"{_one_decimal(ms, 1_000)}s"
    return f"{ms}ms"


def format_rate(value: float | None) -> str:
    """Format a per-second rate with three decimals."""
    if value is None:
        return NOT_AVAILABLE
    scaled = Decimal(str(value)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    return f"{scaled:.3f}"


def format_timestamp(value: datetime) -> str:
    """Format a chart timestamp as HH:MM:SS."""
    return value.strftime("%H:%M:%S")


def format_last_run(value: datetime | None) -> str:
    """Format a job's last-run time, or "Never" when it has not run."""
    if value is None:
        return STATUS_NEVER
    return value.strftime("%Y-%m-%d %H:%M:%S")


__all__ = [
    "format_duration",
    "format_last_run",
    "format_magnitude",
    "format_rate",
    "format_timestamp",
    "round_half_up",
]

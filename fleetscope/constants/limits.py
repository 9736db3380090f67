"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_ROWS_DISPLAY: Final = 1000
TOP_SHARDS_LIMIT: Final = 10
QUEUE_CHART_POINTS: Final = 40
DASHBOARD_PREVIEW_LIMIT: Final = 5

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 5

# ============================================================================
# Error surfacing
# ============================================================================

# Consecutive failed polls before the transient error becomes a standing banner.
PERSISTENT_FAILURE_THRESHOLD: Final = 3

__all__ = [
    "DASHBOARD_PREVIEW_LIMIT",
    "MAX_ROWS_DISPLAY",
    "PERSISTENT_FAILURE_THRESHOLD",
    "QUEUE_CHART_POINTS",
    "REFRESH_INTERVAL_MIN",
    "TOP_SHARDS_LIMIT",
]

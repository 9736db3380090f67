"""Timeout constants for the TUI.

All timeout and delay values for API requests and follow-up refreshes.
"""

from typing import Final

# ============================================================================
# HTTP timeouts (float, in seconds)
# ============================================================================

HTTP_REQUEST_TIMEOUT: Final = 30.0
HTTP_CONNECT_TIMEOUT: Final = 5.0

# ============================================================================
# Follow-up delays (float, in seconds)
# ============================================================================

JOB_FOLLOWUP_REFRESH_DELAY: Final = 2.0

__all__ = [
    "HTTP_CONNECT_TIMEOUT",
    "HTTP_REQUEST_TIMEOUT",
    "JOB_FOLLOWUP_REFRESH_DELAY",
]

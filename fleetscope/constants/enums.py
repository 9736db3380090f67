"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Load Enums
# =============================================================================

class LoadLevel(Enum):
    """Bulk write-task load classification used for host and index rows."""

    IDLE = "idle"
    NORMAL = "normal"
    ELEVATED = "elevated"
    CRITICAL = "critical"


# =============================================================================
# Polling Enums
# =============================================================================

class PollState(Enum):
    """State of a single polling subscription."""

    IDLE = "idle"
    FETCHING = "fetching"
    ERRORED = "errored"


# =============================================================================
# View Enums
# =============================================================================

class BulkTab(Enum):
    """Tabs of the bulk write-tasks view."""

    HOSTS = "hosts"
    INDICES = "indices"


class JobRunStatus(Enum):
    """Last-run status values reported for background jobs."""

    SUCCESS = "success"
    FAILED = "failed"
    RUNNING = "running"
    UNKNOWN = "unknown"


__all__ = [
    "BulkTab",
    "JobRunStatus",
    "LoadLevel",
    "PollState",
]

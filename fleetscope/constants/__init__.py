"""Constants module for FleetScope TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in fleetscope.keyboard module.
"""

from fleetscope.constants.defaults import (
    API_BASE_URL_DEFAULT,
    BULK_TASKS_REFRESH_INTERVAL_DEFAULT,
    DASHBOARD_REFRESH_INTERVAL_DEFAULT,
    LOAD_ELEVATED_MAX_DEFAULT,
    LOAD_NORMAL_MAX_DEFAULT,
    QUEUE_REFRESH_INTERVAL_DEFAULT,
)
from fleetscope.constants.enums import (
    BulkTab,
    JobRunStatus,
    LoadLevel,
    PollState,
)
from fleetscope.constants.limits import (
    MAX_ROWS_DISPLAY,
    PERSISTENT_FAILURE_THRESHOLD,
    QUEUE_CHART_POINTS,
    REFRESH_INTERVAL_MIN,
    TOP_SHARDS_LIMIT,
)
from fleetscope.constants.timeouts import (
    HTTP_REQUEST_TIMEOUT,
    JOB_FOLLOWUP_REFRESH_DELAY,
)
from fleetscope.constants.values import (
    APP_TITLE,
    NO_DATA_MESSAGE,
    NOT_AVAILABLE,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "API_BASE_URL_DEFAULT",
    "BULK_TASKS_REFRESH_INTERVAL_DEFAULT",
    "DASHBOARD_REFRESH_INTERVAL_DEFAULT",
    # Timeouts
    "HTTP_REQUEST_TIMEOUT",
    "JOB_FOLLOWUP_REFRESH_DELAY",
    "LOAD_ELEVATED_MAX_DEFAULT",
    "LOAD_NORMAL_MAX_DEFAULT",
    # Limits
    "MAX_ROWS_DISPLAY",
    "NOT_AVAILABLE",
    "NO_DATA_MESSAGE",
    "PERSISTENT_FAILURE_THRESHOLD",
    "QUEUE_CHART_POINTS",
    "QUEUE_REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "TOP_SHARDS_LIMIT",
    # Enums
    "BulkTab",
    "JobRunStatus",
    "LoadLevel",
    "PollState",
]

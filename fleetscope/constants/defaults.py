"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Data source defaults
# ============================================================================

API_BASE_URL_DEFAULT: Final = "http://localhost:8080/api"
CONFIG_PATH_DEFAULT: Final = "~/.config/fleetscope/settings.yaml"

# ============================================================================
# Refresh cadence defaults (seconds, per view)
# ============================================================================

BULK_TASKS_REFRESH_INTERVAL_DEFAULT: Final = 15
DASHBOARD_REFRESH_INTERVAL_DEFAULT: Final = 30
JOBS_REFRESH_INTERVAL_DEFAULT: Final = 30
QUEUE_REFRESH_INTERVAL_DEFAULT: Final = 60
INDEXING_RATE_REFRESH_INTERVAL_DEFAULT: Final = 60
NODES_REFRESH_INTERVAL_DEFAULT: Final = 60

# ============================================================================
# Load classification defaults (bulk write tasks)
# ============================================================================

LOAD_NORMAL_MAX_DEFAULT: Final = 50
LOAD_ELEVATED_MAX_DEFAULT: Final = 100

# ============================================================================
# Logging defaults
# ============================================================================

LOG_FILE_DEFAULT: Final = "fleetscope.log"
LOG_LEVEL_DEFAULT: Final = "INFO"

__all__ = [
    "API_BASE_URL_DEFAULT",
    "BULK_TASKS_REFRESH_INTERVAL_DEFAULT",
    "CONFIG_PATH_DEFAULT",
    "DASHBOARD_REFRESH_INTERVAL_DEFAULT",
    "INDEXING_RATE_REFRESH_INTERVAL_DEFAULT",
    "JOBS_REFRESH_INTERVAL_DEFAULT",
    "LOAD_ELEVATED_MAX_DEFAULT",
    "LOAD_NORMAL_MAX_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "NODES_REFRESH_INTERVAL_DEFAULT",
    "QUEUE_REFRESH_INTERVAL_DEFAULT",
]

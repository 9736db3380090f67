"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fleetscope.constants.defaults import (
    API_BASE_URL_DEFAULT,
    BULK_TASKS_REFRESH_INTERVAL_DEFAULT,
    DASHBOARD_REFRESH_INTERVAL_DEFAULT,
    INDEXING_RATE_REFRESH_INTERVAL_DEFAULT,
    JOBS_REFRESH_INTERVAL_DEFAULT,
    LOAD_ELEVATED_MAX_DEFAULT,
    LOAD_NORMAL_MAX_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    NODES_REFRESH_INTERVAL_DEFAULT,
    QUEUE_REFRESH_INTERVAL_DEFAULT,
)
from fleetscope.constants.limits import QUEUE_CHART_POINTS, REFRESH_INTERVAL_MIN
from fleetscope.constants.timeouts import HTTP_REQUEST_TIMEOUT, JOB_FOLLOWUP_REFRESH_DELAY

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Data source
    api_base_url: str = API_BASE_URL_DEFAULT
    request_timeout_seconds: float = Field(default=HTTP_REQUEST_TIMEOUT, gt=0)
    verify_ssl: bool = True

    # Refresh cadence per view (seconds)
    bulk_tasks_refresh_interval: int = Field(
        default=BULK_TASKS_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    dashboard_refresh_interval: int = Field(
        default=DASHBOARD_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    jobs_refresh_interval: int = Field(
        default=JOBS_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    queue_refresh_interval: int = Field(
        default=QUEUE_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    indexing_rate_refresh_interval: int = Field(
        default=INDEXING_RATE_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    nodes_refresh_interval: int = Field(
        default=NODES_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )

    # Bulk task load bands
    load_normal_max: int = Field(default=LOAD_NORMAL_MAX_DEFAULT, ge=0)
    load_elevated_max: int = Field(default=LOAD_ELEVATED_MAX_DEFAULT, ge=0)

    # Jobs and charts
    job_followup_delay_seconds: float = Field(default=JOB_FOLLOWUP_REFRESH_DELAY, ge=0)
    queue_chart_points: int = Field(default=QUEUE_CHART_POINTS, ge=1)

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = LOG_FILE_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _load_bands_ordered(self) -> "AppSettings":
        if self.load_elevated_max < self.load_normal_max:
            raise ValueError("load_elevated_max must be >= load_normal_max")
        return self


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""

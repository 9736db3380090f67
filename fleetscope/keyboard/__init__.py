"""Keyboard bindings and navigation for FleetScope TUI."""

from fleetscope.keyboard.app import APP_BINDINGS
from fleetscope.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    BULK_TASKS_SCREEN_BINDINGS,
    HELP_TEXT,
    JOBS_SCREEN_BINDINGS,
    ScreenNavigator,
)

__all__ = [
    "APP_BINDINGS",
    "BASE_SCREEN_BINDINGS",
    "BULK_TASKS_SCREEN_BINDINGS",
    "HELP_TEXT",
    "JOBS_SCREEN_BINDINGS",
    "ScreenNavigator",
]

"""Controllers module for FleetScope TUI.

This module provides the controllers that retrieve fleet telemetry and the
polling subscriptions that keep each view's data fresh.
"""

from __future__ import annotations

# Base classes
from fleetscope.controllers.base import (
    AsyncControllerMixin,
    BaseController,
)

# Polling
from fleetscope.controllers.polling import SnapshotPoller

# Telemetry domain
from fleetscope.controllers.telemetry import TelemetryController

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    # Polling
    "SnapshotPoller",
    # Domain Controllers
    "TelemetryController",
]

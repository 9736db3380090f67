"""Widgets module for the FleetScope TUI.

- data: Data display widgets (StatusCard, TelemetryTable)
- display: Charts (QueueDepthChart)
- feedback: Error surfaces (StatusBanner)
"""

from fleetscope.widgets._base import STATUS_CLASSES, BaseWidget
from fleetscope.widgets.data import StatusCard, TelemetryTable
from fleetscope.widgets.display import QueueDepthChart
from fleetscope.widgets.feedback import StatusBanner

__all__ = [
    "STATUS_CLASSES",
    "BaseWidget",
    "QueueDepthChart",
    "StatusBanner",
    "StatusCard",
    "TelemetryTable",
]

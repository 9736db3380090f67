"""Data display widgets."""

from fleetscope.widgets.data.kpi import StatusCard
from fleetscope.widgets.data.tables import TelemetryTable

__all__ = ["StatusCard", "TelemetryTable"]

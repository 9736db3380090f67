"""Table widgets."""

from fleetscope.widgets.data.tables.telemetry_table import TelemetryTable

__all__ = ["TelemetryTable"]

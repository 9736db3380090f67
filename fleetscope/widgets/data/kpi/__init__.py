"""Summary card widgets."""

from fleetscope.widgets.data.kpi.status_card import StatusCard

__all__ = ["StatusCard"]

"""Dashboard view."""

from fleetscope.screens.dashboard.dashboard_screen import DashboardScreen
from fleetscope.screens.dashboard.presenter import DashboardPresenter

__all__ = ["DashboardPresenter", "DashboardScreen"]

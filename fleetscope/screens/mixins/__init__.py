"""Screen mixins package for FleetScope TUI."""

from fleetscope.screens.mixins.tabbed_view_mixin import TabbedViewMixin
from fleetscope.screens.mixins.worker_mixin import WorkerMixin

__all__ = [
    "TabbedViewMixin",
    "WorkerMixin",
]

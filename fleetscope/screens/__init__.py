"""Screens for the FleetScope TUI.

Each view is keyed by the name used on the command line and by the
navigation actions.
"""

from __future__ import annotations

from fleetscope.screens.base_screen import BaseScreen, ClusterScreen
from fleetscope.screens.bulk_tasks import BulkTasksScreen
from fleetscope.screens.dashboard import DashboardScreen
from fleetscope.screens.indexing_rate import IndexingRateScreen
from fleetscope.screens.jobs import JobsScreen
from fleetscope.screens.nodes import NodesScreen
from fleetscope.screens.queue import QueueScreen

DEFAULT_VIEW = "bulk-tasks"

SCREEN_FACTORIES: dict[str, type[BaseScreen]] = {
    "dashboard": DashboardScreen,
    "bulk-tasks": BulkTasksScreen,
    "queue": QueueScreen,
    "indexing-rate": IndexingRateScreen,
    "nodes": NodesScreen,
    "jobs": JobsScreen,
}

__all__ = [
    "DEFAULT_VIEW",
    "SCREEN_FACTORIES",
    "BaseScreen",
    "BulkTasksScreen",
    "ClusterScreen",
    "DashboardScreen",
    "IndexingRateScreen",
    "JobsScreen",
    "NodesScreen",
    "QueueScreen",
]

"""Bulk write-tasks view."""

from fleetscope.screens.bulk_tasks.bulk_tasks_screen import BulkTasksScreen
from fleetscope.screens.bulk_tasks.presenter import BulkTasksPresenter

__all__ = ["BulkTasksPresenter", "BulkTasksScreen"]

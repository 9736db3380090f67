"""Jobs view."""

from fleetscope.screens.jobs.jobs_screen import JobsScreen
from fleetscope.screens.jobs.presenter import JobsPresenter

__all__ = ["JobsPresenter", "JobsScreen"]

"""Write-queue view."""

from fleetscope.screens.queue.presenter import QueuePresenter
from fleetscope.screens.queue.queue_screen import QueueScreen

__all__ = ["QueuePresenter", "QueueScreen"]

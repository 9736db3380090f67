"""Display widgets."""

from fleetscope.widgets.display.queue_chart import QueueDepthChart

__all__ = ["QueueDepthChart"]

"""Polling subscriptions."""

from fleetscope.controllers.polling.poller import SnapshotPoller

__all__ = ["SnapshotPoller"]

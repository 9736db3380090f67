"""Feedback widgets."""

from fleetscope.widgets.feedback.status_banner import StatusBanner

__all__ = ["StatusBanner"]

"""Indexing-rate view."""

from fleetscope.screens.indexing_rate.indexing_rate_screen import IndexingRateScreen
from fleetscope.screens.indexing_rate.presenter import IndexingRatePresenter

__all__ = ["IndexingRatePresenter", "IndexingRateScreen"]

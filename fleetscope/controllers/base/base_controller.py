"""Base controller with async worker-friendly patterns for FleetScope TUI.

This module provides the foundation for background data loading using Textual
workers, keeping the UI responsive while requests to the telemetry service are
in flight.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class AsyncControllerMixin:
    """Mixin providing worker-friendly async patterns for controllers.

    Each load keeps its own start time, so concurrent requests report their
    own durations.
    """

    @staticmethod
    def _start_load_timer() -> float:
        return time.monotonic()

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        """Milliseconds since ``started``."""
        return (time.monotonic() - started) * 1000


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> Any:
        """Fetch the overview data from the source."""
        ...

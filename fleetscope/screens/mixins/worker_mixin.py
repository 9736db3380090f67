"""WorkerMixin - Worker lifecycle management for a view's polling subscription.

This module provides a mixin class that implements consistent patterns for:
- Background worker management using Textual Workers
- Worker duration tracking
- Error reporting through the screen's error banner

WorkerMixin uses Textual's built-in ``self.workers`` (WorkerManager) for
worker lifecycle management; no manual worker tracking is required.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.css.query import NoMatches, WrongType
from textual.worker import Worker, WorkerState

from fleetscope.widgets import StatusBanner

logger = logging.getLogger(__name__)


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    - ``start_worker()``: Standardized worker creation
    - ``cancel_workers()``: Cancel all running workers (uses ``self.workers``)
    - ``on_worker_state_changed()``: Logs durations and surfaces worker errors
    - ``show_error_state()``: Writes to the ``#error-banner`` StatusBanner

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def on_mount(self) -> None:
                self.start_worker(self._subscription, name="my-subscription")
        ```
    """

    def __init__(self) -> None:
        super().__init__()
        self._worker_started_at: dict[str, float] = {}

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        exclusive: bool = False,
        name: str | None = None,
        exit_on_error: bool = False,
    ) -> Worker[Any]:
        """Start an async worker.

        Args:
            worker_func: Async function to run in the worker.
            exclusive: If True, cancel previous workers in the same group first.
            name: Worker name used in logs.
            exit_on_error: If False, errors don't crash the app (default False).

        Returns:
            The Worker instance
        """
        worker_name = name or getattr(worker_func, "__name__", "worker")
        self._worker_started_at[worker_name] = time.monotonic()
        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            exclusive=exclusive,
            name=worker_name,
            exit_on_error=exit_on_error,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers using Textual's built-in WorkerManager."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker completion and surface worker errors."""
        if event.state not in (WorkerState.SUCCESS, WorkerState.CANCELLED, WorkerState.ERROR):
            return
        started = self._worker_started_at.pop(event.worker.name, None)
        duration_ms = 0.0 if started is None else (time.monotonic() - started) * 1000

        if event.state == WorkerState.CANCELLED:
            logger.debug(f"Worker '{event.worker.name}' was cancelled ({duration_ms:.2f}ms)")
        elif event.state == WorkerState.ERROR:
            logger.error(
                f"Worker '{event.worker.name}' error: {event.worker.error} ({duration_ms:.2f}ms)"
            )
            self.show_error_state(str(event.worker.error))
        else:
            logger.debug(
                f"Worker '{event.worker.name}' completed successfully ({duration_ms:.2f}ms)"
            )

    def show_error_state(self, message: str) -> None:
        """Show an error in the screen's banner, if it has one."""
        with suppress(NoMatches, WrongType):
            banner = self.query_one(  # type: ignore[attr-defined]
                "#error-banner", StatusBanner
            )
            banner.show_standing(message)


__all__ = ["WorkerMixin"]

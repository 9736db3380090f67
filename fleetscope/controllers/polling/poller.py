"""Polling subscription driving one view's periodic refresh.

A ``SnapshotPoller`` owns a fixed-interval timer and at most one in-flight
fetch. Ticks that arrive while a fetch is running are dropped, never queued.
Results are applied in completion order; a result whose fetch was detached
(by a selection change or by closing the poller) is discarded, so a slow
response for a previous cluster can never overwrite the current one.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from fleetscope.constants.enums import PollState

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchFn = Callable[[str], Awaitable[T]]
ResultCallback = Callable[[str, T], None]
ErrorCallback = Callable[[str, Exception], None]


class SnapshotPoller(Generic[T]):
    """Scoped polling subscription for a single view.

    State machine: ``IDLE -> FETCHING -> IDLE`` on success and
    ``IDLE -> FETCHING -> ERRORED`` on failure; ``ERRORED`` returns to
    ``IDLE`` on the next tick, which then starts a new fetch.

    Use as an async context manager so the timer is always released::

        async with SnapshotPoller(fetch, 15, on_result, on_error) as poller:
            poller.select("cluster-a")
            await poller.wait_closed()
    """

    def __init__(
        self,
        fetch: FetchFn[T],
        interval: float,
        on_result: ResultCallback[T],
        on_error: ErrorCallback,
        *,
        name: str = "poller",
        auto_refresh: bool = True,
        on_state_change: Callable[[PollState], None] | None = None,
    ) -> None:
        """Initialize the poller.

        Args:
            fetch: Coroutine function fetching the payload for a target.
            interval: Seconds between timer ticks.
            on_result: Called with (target, payload) for each accepted result.
            on_error: Called with (target, exception) for each accepted failure.
            name: Label used in logs.
            auto_refresh: Whether the timer runs once a target is selected.
            on_state_change: Optional observer of state transitions.
        """
        if interval <= 0:
            raise ValueError(f"poll interval must be positive, got {interval}")
        self._fetch = fetch
        self._interval = float(interval)
        self._on_result = on_result
        self._on_error = on_error
        self._on_state_change = on_state_change
        self.name = name

        self._state = PollState.IDLE
        self._target: str | None = None
        self._auto_refresh = auto_refresh
        self._timer: asyncio.Task[None] | None = None
        self._inflight: asyncio.Task[None] | None = None
        # Detached fetches keep running until they finish; hold references so
        # they are not collected mid-flight.
        self._detached: set[asyncio.Task[None]] = set()
        self._followups: list[asyncio.TimerHandle] = []
        self._closed = asyncio.Event()

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def target(self) -> str | None:
        return self._target

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def auto_refresh(self) -> bool:
        return self._auto_refresh

    @property
    def is_closed(self) -> bool:
        return self._closed.is_set()

    @property
    def timer_running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    @property
    def pending_followups(self) -> int:
        return len(self._followups)

    # ========================================================================
    # Commands
    # ========================================================================

    def select(self, target: str) -> None:
        """Switch to ``target`` and fetch it immediately.

        Any in-flight fetch is detached (its result will be ignored) and the
        timer restarts from zero.
        """
        if self.is_closed:
            logger.debug(f"{self.name}: select({target}) after close ignored")
            return
        logger.debug(f"{self.name}: selecting {target}")
        self._detach_inflight()
        self._target = target
        self._set_state(PollState.IDLE)
        if self._auto_refresh:
            self._restart_timer()
        self._start_fetch()

    def tick(self) -> bool:
        """Start a fetch unless one is already running.

        Returns:
            True if a fetch was started, False if the tick was dropped.
        """
        if self.is_closed or self._target is None:
            return False
        if self._state is PollState.FETCHING:
            logger.debug(f"{self.name}: tick dropped, fetch in flight")
            return False
        if self._state is PollState.ERRORED:
            self._set_state(PollState.IDLE)
        self._start_fetch()
        return True

    def refresh(self) -> bool:
        """Manual refresh; follows the same drop-if-fetching rule as ticks."""
        return self.tick()

    def set_auto_refresh(self, enabled: bool) -> None:
        """Stop or restart the timer; an in-flight fetch is left alone."""
        if self.is_closed or enabled == self._auto_refresh:
            return
        self._auto_refresh = enabled
        if enabled:
            self._restart_timer()
        else:
            self._cancel_timer()
        logger.debug(f"{self.name}: auto-refresh {'on' if enabled else 'off'}")

    def schedule_refresh(self, delay: float) -> None:
        """Request a single refresh ``delay`` seconds from now."""
        if self.is_closed:
            return
        loop = asyncio.get_running_loop()
        handle: asyncio.TimerHandle | None = None

        def fire() -> None:
            if handle in self._followups:
                self._followups.remove(handle)
            self.refresh()

        handle = loop.call_later(delay, fire)
        self._followups.append(handle)

    def close(self) -> None:
        """Cancel the timer and follow-ups and ignore any in-flight result."""
        if self.is_closed:
            return
        self._cancel_timer()
        for handle in self._followups:
            handle.cancel()
        self._followups.clear()
        self._detach_inflight()
        self._set_state(PollState.IDLE)
        self._closed.set()
        logger.debug(f"{self.name}: closed")

    async def wait_closed(self) -> None:
        await self._closed.wait()

    async def __aenter__(self) -> SnapshotPoller[T]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    # ========================================================================
    # Internals
    # ========================================================================

    def _set_state(self, state: PollState) -> None:
        if state is self._state:
            return
        logger.debug(f"{self.name}: {self._state.value} -> {state.value}")
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state)

    def _start_fetch(self) -> None:
        target = self._target
        if target is None:
            return
        self._set_state(PollState.FETCHING)
        task = asyncio.get_running_loop().create_task(
            self._run_fetch(target), name=f"{self.name}-fetch-{target}"
        )
        self._inflight = task

    def _detach_inflight(self) -> None:
        task = self._inflight
        self._inflight = None
        if task is not None and not task.done():
            self._detached.add(task)
            task.add_done_callback(self._detached.discard)

    async def _run_fetch(self, target: str) -> None:
        task = asyncio.current_task()
        try:
            result = await self._fetch(target)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            if task is not self._inflight:
                logger.debug(f"{self.name}: discarding stale error for {target}: {exc!r}")
                return
            self._inflight = None
            self._set_state(PollState.ERRORED)
            logger.debug(f"{self.name}: fetch for {target} failed: {exc!r}")
            self._deliver(self._on_error, target, exc)
            return

        if task is not self._inflight:
            logger.debug(f"{self.name}: discarding stale result for {target}")
            return
        self._inflight = None
        self._set_state(PollState.IDLE)
        self._deliver(self._on_result, target, result)

    def _deliver(self, callback: Callable[[str, object], None], target: str, value: object) -> None:
        try:
            callback(target, value)
        except Exception:
            logger.exception(f"{self.name}: callback for {target} raised")

    def _restart_timer(self) -> None:
        self._cancel_timer()
        self._timer = asyncio.get_running_loop().create_task(
            self._run_timer(), name=f"{self.name}-timer"
        )

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def _run_timer(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.tick()


__all__ = ["SnapshotPoller"]

"""Presenter base classes - own a view's poller, interaction state and payload.

Error policy shared by every view:
- ``TransportFailure`` keeps the last payload visible and counts consecutive
  failures; past ``PERSISTENT_FAILURE_THRESHOLD`` the error becomes standing.
- ``MalformedSnapshot`` drops the payload so the view shows "no data" with
  the reason.
- A successful refresh clears both.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, TypeVar

from textual.message import Message

from fleetscope.constants.enums import PollState
from fleetscope.constants.limits import PERSISTENT_FAILURE_THRESHOLD
from fleetscope.controllers.polling import SnapshotPoller
from fleetscope.errors import MalformedSnapshot, TelemetryError, TransportFailure
from fleetscope.models.state.interaction_state import InteractionStateStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Target used by views that are not scoped to a cluster.
FLEET_TARGET = "fleet"


# =============================================================================
# Worker Messages
# =============================================================================


class TelemetryLoaded(Message):
    """Message indicating a fresh payload was applied."""

    def __init__(self, target: str) -> None:
        super().__init__()
        self.target = target


class TelemetryLoadFailed(Message):
    """Message indicating a poll failed; the presenter state says how to show it."""

    def __init__(self, target: str, error: str) -> None:
        super().__init__()
        self.target = target
        self.error = error


class ClusterListLoaded(Message):
    """Message indicating the cluster list was replaced."""

    def __init__(self, clusters: list[str]) -> None:
        super().__init__()
        self.clusters = clusters


class ClusterListLoadFailed(Message):
    """Message indicating the cluster list could not be fetched."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


class PollStateChanged(Message):
    """Message indicating the poller moved to another state."""

    def __init__(self, state: PollState) -> None:
        super().__init__()
        self.state = state


# =============================================================================
# Presenters
# =============================================================================


class PollingPresenter(ABC, Generic[T]):
    """Presenter owning a single polling subscription and its latest payload."""

    def __init__(
        self,
        screen: Any,
        controller: Any,
        interval: float,
        *,
        name: str,
        failure_threshold: int = PERSISTENT_FAILURE_THRESHOLD,
    ) -> None:
        self._screen = screen
        self._controller = controller
        self._failure_threshold = failure_threshold
        self._data: T | None = None
        self._error_message: str | None = None
        self._no_data_reason: str | None = None
        self._consecutive_failures = 0
        self._last_updated: datetime | None = None
        self.poller: SnapshotPoller[T] = SnapshotPoller(
            self._fetch,
            interval,
            self._handle_result,
            self._handle_error,
            name=name,
            on_state_change=self._handle_state_change,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def data(self) -> T | None:
        return self._data

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def no_data_reason(self) -> str | None:
        return self._no_data_reason

    @property
    def consecutive_failures(self) -> int:
        return self._consecutive_failures

    @property
    def has_standing_error(self) -> bool:
        return self._consecutive_failures >= self._failure_threshold

    @property
    def last_updated(self) -> datetime | None:
        return self._last_updated

    @property
    def is_loading(self) -> bool:
        return self.poller.state is PollState.FETCHING

    @property
    def auto_refresh(self) -> bool:
        return self.poller.auto_refresh

    # =========================================================================
    # Commands
    # =========================================================================

    @abstractmethod
    async def start(self) -> None:
        """Begin polling once the view is mounted."""

    def refresh(self) -> bool:
        return self.poller.refresh()

    def set_auto_refresh(self, enabled: bool) -> None:
        self.poller.set_auto_refresh(enabled)

    def toggle_auto_refresh(self) -> bool:
        """Flip auto-refresh and return the new setting."""
        enabled = not self.auto_refresh
        self.set_auto_refresh(enabled)
        return enabled

    def close(self) -> None:
        self.poller.close()

    def status_line(self) -> str:
        """Refresh status shown beneath the view title."""
        parts = [f"Auto-refresh {'on' if self.auto_refresh else 'off'}"]
        parts.append(f"every {self.poller.interval:.0f}s")
        if self._last_updated is not None:
            parts.append(f"updated {self._last_updated.strftime('%H:%M:%S')}")
        if self.is_loading:
            parts.append("refreshing...")
        return "  |  ".join(parts)

    # =========================================================================
    # Poller callbacks
    # =========================================================================

    @abstractmethod
    async def _fetch(self, target: str) -> T: ...

    def _accept(self, target: str, payload: T) -> bool:
        """Hook run before a payload is applied; return False to discard it."""
        return True

    def _handle_result(self, target: str, payload: T) -> None:
        if not self._accept(target, payload):
            return
        self._data = payload
        self._error_message = None
        self._no_data_reason = None
        self._consecutive_failures = 0
        self._last_updated = datetime.now()
        self._after_apply(payload)
        self._screen.post_message(TelemetryLoaded(target))

    def _after_apply(self, payload: T) -> None:
        """Hook run after a payload became current."""

    def _handle_error(self, target: str, error: Exception) -> None:
        if not self._accept_error(target):
            return
        self._consecutive_failures += 1
        if isinstance(error, MalformedSnapshot):
            logger.error(f"{self.poller.name}: malformed payload for {target}: {error}")
            self._data = None
            self._no_data_reason = str(error)
        elif isinstance(error, TransportFailure):
            logger.warning(f"{self.poller.name}: {error}")
        else:
            logger.error(f"{self.poller.name}: unexpected error for {target}: {error!r}")
        self._error_message = str(error)
        self._screen.post_message(TelemetryLoadFailed(target, str(error)))

    def _accept_error(self, target: str) -> bool:
        return True

    def _handle_state_change(self, state: PollState) -> None:
        self._screen.post_message(PollStateChanged(state))


class FleetPresenter(PollingPresenter[T]):
    """Presenter for views that poll fleet-wide data rather than one cluster."""

    async def start(self) -> None:
        self.poller.select(FLEET_TARGET)


class ClusterViewPresenter(PollingPresenter[T]):
    """Presenter for cluster-scoped views.

    Cluster selection and auto-refresh go through the interaction store, which
    drives the poller; payloads for a cluster other than the selected one are
    discarded.
    """

    def __init__(
        self,
        screen: Any,
        controller: Any,
        interval: float,
        *,
        name: str,
        failure_threshold: int = PERSISTENT_FAILURE_THRESHOLD,
    ) -> None:
        super().__init__(
            screen, controller, interval, name=name, failure_threshold=failure_threshold
        )
        self.store = InteractionStateStore(
            on_cluster_selected=self._on_cluster_selected,
            on_auto_refresh_changed=self.poller.set_auto_refresh,
        )
        self._clusters: list[str] = []
        self._cluster_list_error: str | None = None

    @property
    def clusters(self) -> list[str]:
        return list(self._clusters)

    @property
    def selected_cluster(self) -> str | None:
        return self.store.selected_cluster

    @property
    def cluster_list_error(self) -> str | None:
        return self._cluster_list_error

    @property
    def auto_refresh(self) -> bool:
        return self.store.auto_refresh_enabled

    async def start(self) -> None:
        await self.load_clusters()

    async def load_clusters(self) -> None:
        """Fetch the cluster list, replacing the previous one wholesale.

        The first cluster is selected when nothing is selected yet.
        """
        try:
            clusters = await self._list_clusters()
        except TelemetryError as exc:
            logger.warning(f"{self.poller.name}: cluster listing failed: {exc}")
            self._cluster_list_error = str(exc)
            self._screen.post_message(ClusterListLoadFailed(str(exc)))
            return
        self._clusters = clusters
        self._cluster_list_error = None
        self._screen.post_message(ClusterListLoaded(list(clusters)))
        if self.store.selected_cluster is None and clusters:
            self.store.select_cluster(clusters[0])

    async def refresh_all(self) -> None:
        """Reload the cluster list and refresh the selected cluster."""
        await self.load_clusters()
        self.refresh()

    def select_cluster(self, cluster_name: str) -> bool:
        return self.store.select_cluster(cluster_name)

    def set_auto_refresh(self, enabled: bool) -> None:
        self.store.set_auto_refresh(enabled)

    @abstractmethod
    async def _list_clusters(self) -> list[str]: ...

    def _on_cluster_selected(self, cluster_name: str) -> None:
        self._data = None
        self._error_message = None
        self._no_data_reason = None
        self._consecutive_failures = 0
        self._last_updated = None
        self.poller.select(cluster_name)

    def _accept(self, target: str, payload: T) -> bool:
        if target != self.store.selected_cluster:
            logger.debug(f"{self.poller.name}: ignoring payload for {target}")
            return False
        return True

    def _accept_error(self, target: str) -> bool:
        return target == self.store.selected_cluster


__all__ = [
    "FLEET_TARGET",
    "ClusterListLoadFailed",
    "ClusterListLoaded",
    "ClusterViewPresenter",
    "FleetPresenter",
    "PollStateChanged",
    "PollingPresenter",
    "TelemetryLoadFailed",
    "TelemetryLoaded",
]

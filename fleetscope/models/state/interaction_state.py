"""Per-view interaction state that survives snapshot refreshes."""

from __future__ import annotations

import logging
from collections.abc import Callable, Container
from dataclasses import dataclass

from fleetscope.constants.enums import BulkTab

logger = logging.getLogger(__name__)


@dataclass
class InteractionState:
    """User selections for one mounted view; never persisted."""

    selected_cluster: str | None = None
    active_tab: BulkTab = BulkTab.HOSTS
    expanded_host: str | None = None
    auto_refresh_enabled: bool = True


class InteractionStateStore:
    """Holds InteractionState and exposes its only mutation entry points.

    The store performs no I/O. Selection and auto-refresh changes are
    forwarded to the owning presenter through the optional callbacks so it
    can drive its poller.
    """

    def __init__(
        self,
        on_cluster_selected: Callable[[str], None] | None = None,
        on_auto_refresh_changed: Callable[[bool], None] | None = None,
    ) -> None:
        self._state = InteractionState()
        self._on_cluster_selected = on_cluster_selected
        self._on_auto_refresh_changed = on_auto_refresh_changed

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def selected_cluster(self) -> str | None:
        return self._state.selected_cluster

    @property
    def active_tab(self) -> BulkTab:
        return self._state.active_tab

    @property
    def expanded_host(self) -> str | None:
        return self._state.expanded_host

    @property
    def auto_refresh_enabled(self) -> bool:
        return self._state.auto_refresh_enabled

    def select_cluster(self, cluster_name: str) -> bool:
        """Select a cluster; returns False if it was already selected.

        The expanded host belongs to the previous cluster's snapshot, so it is
        cleared on a real change.
        """
        if cluster_name == self._state.selected_cluster:
            return False
        self._state.selected_cluster = cluster_name
        self._state.expanded_host = None
        logger.debug(f"Selected cluster {cluster_name}")
        if self._on_cluster_selected is not None:
            self._on_cluster_selected(cluster_name)
        return True

    def select_tab(self, tab: BulkTab) -> None:
        self._state.active_tab = tab

    def toggle_expand(self, host_name: str) -> str | None:
        """Expand ``host_name``, or collapse it if it is already expanded.

        At most one host is expanded at a time. Returns the new expanded host.
        """
        if self._state.expanded_host == host_name:
            self._state.expanded_host = None
        else:
            self._state.expanded_host = host_name
        return self._state.expanded_host

    def set_auto_refresh(self, enabled: bool) -> None:
        if enabled == self._state.auto_refresh_enabled:
            return
        self._state.auto_refresh_enabled = enabled
        if self._on_auto_refresh_changed is not None:
            self._on_auto_refresh_changed(enabled)

    def reconcile(self, hosts: Container[str]) -> None:
        """Clear the expanded host if it is absent from the current snapshot."""
        expanded = self._state.expanded_host
        if expanded is not None and expanded not in hosts:
            logger.debug(f"Expanded host {expanded} no longer reported; collapsing")
            self._state.expanded_host = None


__all__ = [
    "InteractionState",
    "InteractionStateStore",
]

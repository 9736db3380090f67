"""Base screen classes for FleetScope TUI.

Every view is a screen backed by a presenter that owns the view's polling
subscription. The subscription runs inside a worker scoped to the screen:
it starts when the screen mounts and is released when it unmounts.

Screen pattern:
- ``create_presenter()`` builds the presenter
- ``compose_body()`` yields the view-specific widgets
- ``render_data()`` copies presenter state into those widgets
- presenter messages (TelemetryLoaded, TelemetryLoadFailed, PollStateChanged)
  trigger re-rendering
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import Footer, Header, Select, Static

from fleetscope.constants.values import APP_TITLE, NO_CLUSTERS_MESSAGE
from fleetscope.keyboard import BASE_SCREEN_BINDINGS, ScreenNavigator
from fleetscope.models.state.app_settings import AppSettings
from fleetscope.screens.base_presenter import (
    ClusterListLoaded,
    ClusterListLoadFailed,
    ClusterViewPresenter,
    PollingPresenter,
    PollStateChanged,
    TelemetryLoaded,
    TelemetryLoadFailed,
)
from fleetscope.screens.mixins import WorkerMixin
from fleetscope.widgets import StatusBanner

logger = logging.getLogger(__name__)

CLUSTER_SELECT_ID = "cluster-select"


class BaseScreen(WorkerMixin, ScreenNavigator, Screen):
    """Base class for polling views.

    Subclasses must implement:
    - screen_title: The title to display in the window
    - create_presenter: Build the view's presenter
    - compose_body: The view's widgets
    - render_data: Copy presenter state into widgets
    """

    BINDINGS = BASE_SCREEN_BINDINGS

    DEFAULT_CSS = """
    BaseScreen #view-toolbar {
        height: auto;
        padding: 0 1;
    }
    BaseScreen #status-line {
        width: 1fr;
        color: $text-muted;
        padding: 0 1;
        content-align: left middle;
    }
    """

    def __init__(self, controller: Any, settings: AppSettings | None = None) -> None:
        """Initialize the screen.

        Args:
            controller: Telemetry controller shared by all views.
            settings: Application settings (defaults when omitted).
        """
        super().__init__()
        self.controller = controller
        self.settings = settings or AppSettings()
        self.presenter: PollingPresenter[Any] = self.create_presenter()

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @abstractmethod
    def create_presenter(self) -> PollingPresenter[Any]: ...

    @abstractmethod
    def compose_body(self) -> ComposeResult: ...

    @abstractmethod
    def render_data(self) -> None: ...

    # =========================================================================
    # Composition and lifecycle
    # =========================================================================

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="view-toolbar"):
            yield from self.compose_toolbar()
            yield Static("", id="status-line")
        yield StatusBanner(id="error-banner")
        yield from self.compose_body()
        yield Footer()

    def compose_toolbar(self) -> ComposeResult:
        yield from ()

    def set_title(self, title: str) -> None:
        self.app.title = f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Set the window title and schedule the subscription start."""
        self.set_title(self.screen_title)
        self.call_later(self.load_data)

    def on_unmount(self) -> None:
        """Release the polling subscription and any running workers."""
        self.presenter.close()
        self.cancel_workers()

    async def load_data(self) -> None:
        self.render_view()
        self.start_worker(
            self._run_subscription, name=f"{self.presenter.poller.name}-subscription"
        )

    async def _run_subscription(self) -> None:
        poller = self.presenter.poller
        async with poller:
            await self.presenter.start()
            await poller.wait_closed()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        if not self.presenter.refresh():
            self.notify("A refresh is already in progress", timeout=3)
        self.render_status()

    def action_toggle_auto_refresh(self) -> None:
        enabled = self.presenter.toggle_auto_refresh()
        self.notify(f"Auto-refresh {'enabled' if enabled else 'disabled'}", timeout=3)
        self.render_status()

    # =========================================================================
    # Presenter messages
    # =========================================================================

    def on_telemetry_loaded(self, _: TelemetryLoaded) -> None:
        self.render_view()

    def on_telemetry_load_failed(self, _: TelemetryLoadFailed) -> None:
        self.render_view()

    def on_poll_state_changed(self, _: PollStateChanged) -> None:
        self.render_status()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_view(self) -> None:
        self.render_banner()
        self.render_status()
        self.render_data()

    def render_status(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#status-line", Static).update(self.presenter.status_line())

    def render_banner(self) -> None:
        with suppress(NoMatches, WrongType):
            banner = self.query_one("#error-banner", StatusBanner)
            presenter = self.presenter
            if presenter.has_standing_error:
                banner.show_standing(
                    f"Data source unavailable ({presenter.consecutive_failures} "
                    f"failed refreshes): {presenter.error_message}"
                )
            elif presenter.error_message:
                banner.show_transient(f"Last refresh failed: {presenter.error_message}")
            else:
                banner.clear()


class ClusterScreen(BaseScreen):
    """Base class for views scoped to one selected cluster."""

    presenter: ClusterViewPresenter[Any]

    def compose_toolbar(self) -> ComposeResult:
        yield Select[str]([], prompt="Cluster", id=CLUSTER_SELECT_ID)

    def action_refresh(self) -> None:
        self.start_worker(
            self.presenter.refresh_all, name=f"{self.presenter.poller.name}-refresh"
        )

    def on_cluster_list_loaded(self, message: ClusterListLoaded) -> None:
        with suppress(NoMatches, WrongType):
            select = self.query_one(f"#{CLUSTER_SELECT_ID}", Select)
            select.set_options([(name, name) for name in message.clusters])
            selected = self.presenter.selected_cluster
            if selected is not None and selected in message.clusters:
                select.value = selected
        if not message.clusters:
            with suppress(NoMatches, WrongType):
                self.query_one("#error-banner", StatusBanner).show_notice(NO_CLUSTERS_MESSAGE)

    def on_cluster_list_load_failed(self, message: ClusterListLoadFailed) -> None:
        self.show_error_state(f"Cannot list clusters: {message.error}")

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != CLUSTER_SELECT_ID or not isinstance(event.value, str):
            return
        if self.presenter.select_cluster(event.value):
            self.render_view()


__all__ = [
    "CLUSTER_SELECT_ID",
    "BaseScreen",
    "ClusterScreen",
]

"""Main application class for FleetScope TUI."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from fleetscope.constants import APP_TITLE
from fleetscope.controllers import TelemetryController
from fleetscope.keyboard import HELP_TEXT
from fleetscope.keyboard.app import APP_BINDINGS
from fleetscope.models.state.app_settings import AppSettings
from fleetscope.screens import DEFAULT_VIEW, SCREEN_FACTORIES, BaseScreen

logger = logging.getLogger(__name__)


class FleetScopeApp(App[None]):
    """Main TUI application for FleetScope.

    Exactly one view is mounted at a time; navigating replaces the current
    view so that its polling subscription is released.
    """

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: TelemetryController | None = None,
        initial_view: str = DEFAULT_VIEW,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        if initial_view not in SCREEN_FACTORIES:
            raise ValueError(f"Unknown view: {initial_view}")
        self.settings = settings or AppSettings()
        self.controller = controller or TelemetryController(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout_seconds,
            verify_ssl=self.settings.verify_ssl,
            max_queue_points=self.settings.queue_chart_points,
        )
        self.initial_view = initial_view
        self.current_view: str | None = None
        self.collector_reachable: bool | None = None

    def on_mount(self) -> None:
        """Called when app is mounted."""
        logger.info(f"Connecting to {self.settings.api_base_url}")
        self.push_screen(self._build_screen(self.initial_view))
        self.current_view = self.initial_view
        self.run_worker(self._check_collector(), name="check-collector", group="startup")

    async def _check_collector(self) -> None:
        self.collector_reachable = await self.controller.check_connection()
        if not self.collector_reachable:
            logger.warning(f"Collector at {self.settings.api_base_url} is not reachable")
            self.notify(
                f"Cannot reach the collector at {self.settings.api_base_url}",
                severity="warning",
                title="Connection",
            )

    def _build_screen(self, view: str) -> BaseScreen:
        return SCREEN_FACTORIES[view](self.controller, self.settings)

    def navigate_to(self, view: str) -> None:
        """Replace the current view with ``view``."""
        if view not in SCREEN_FACTORIES:
            raise ValueError(f"Unknown view: {view}")
        if view == self.current_view:
            return
        logger.debug(f"Navigating from {self.current_view} to {view}")
        self.switch_screen(self._build_screen(view))
        self.current_view = view

    # =========================================================================
    # Navigation actions
    # =========================================================================

    def action_nav_dashboard(self) -> None:
        self.navigate_to("dashboard")

    def action_nav_bulk_tasks(self) -> None:
        self.navigate_to("bulk-tasks")

    def action_nav_queue(self) -> None:
        self.navigate_to("queue")

    def action_nav_indexing_rate(self) -> None:
        self.navigate_to("indexing-rate")

    def action_nav_nodes(self) -> None:
        self.navigate_to("nodes")

    def action_nav_jobs(self) -> None:
        self.navigate_to("jobs")

    def action_show_help(self) -> None:
        """Show help dialog."""
        self.notify(HELP_TEXT, severity="information", title="Help", timeout=15)

    async def on_unmount(self) -> None:
        """Close the HTTP client when the app exits."""
        await self.controller.close()


__all__ = [
    "FleetScopeApp",
]

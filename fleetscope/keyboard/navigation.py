"""Screen-specific keyboard bindings and navigation helpers.

This module contains:
1. Screen-specific bindings (BASE_SCREEN_BINDINGS, *_SCREEN_BINDINGS)
2. ScreenNavigator mixin forwarding navigation actions to the app
"""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

# ============================================================================
# Screen bindings
# ============================================================================

BASE_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("a", "toggle_auto_refresh", "Auto-refresh"),
]

BULK_TASKS_SCREEN_BINDINGS: list[Binding] = [
    *BASE_SCREEN_BINDINGS,
    Binding("1", "switch_tab_1", "Hosts"),
    Binding("2", "switch_tab_2", "Indices"),
    Binding("e", "toggle_expand", "Expand host"),
]

JOBS_SCREEN_BINDINGS: list[Binding] = [
    *BASE_SCREEN_BINDINGS,
    Binding("t", "trigger_job", "Trigger job"),
]

HELP_TEXT = (
    "Keybindings:\n"
    "  d - Dashboard\n"
    "  b - Bulk tasks\n"
    "  w - Write queue\n"
    "  i - Indexing rate\n"
    "  n - Nodes\n"
    "  j - Jobs\n"
    "  r - Refresh\n"
    "  a - Toggle auto-refresh\n"
    "  e - Expand host (bulk tasks)\n"
    "  1 / 2 - Hosts / Indices tab\n"
    "  t - Trigger job (jobs)\n"
    "  q - Quit"
)

# ============================================================================
# SCREEN NAVIGATOR CLASS
# ============================================================================


class ScreenNavigator:
    """Mixin forwarding navigation actions to the app.

    The app owns screen switching so that the previous view is unmounted (and
    its polling released) on every navigation.
    """

    app: App

    def _navigate(self, view: str) -> None:
        navigate = getattr(self.app, "navigate_to", None)
        if callable(navigate):
            navigate(view)

    def action_nav_dashboard(self) -> None:
        self._navigate("dashboard")

    def action_nav_bulk_tasks(self) -> None:
        self._navigate("bulk-tasks")

    def action_nav_queue(self) -> None:
        self._navigate("queue")

    def action_nav_indexing_rate(self) -> None:
        self._navigate("indexing-rate")

    def action_nav_nodes(self) -> None:
        self._navigate("nodes")

    def action_nav_jobs(self) -> None:
        self._navigate("jobs")

    def action_show_help(self) -> None:
        """Show help dialog."""
        self.app.notify(HELP_TEXT, severity="information", timeout=15)


__all__ = [
    "BASE_SCREEN_BINDINGS",
    "BULK_TASKS_SCREEN_BINDINGS",
    "HELP_TEXT",
    "JOBS_SCREEN_BINDINGS",
    "ScreenNavigator",
]

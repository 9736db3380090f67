"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("d", "nav_dashboard", "Dashboard"),
    Binding("b", "nav_bulk_tasks", "Bulk Tasks"),
    Binding("w", "nav_queue", "Write Queue"),
    Binding("i", "nav_indexing_rate", "Indexing"),
    Binding("n", "nav_nodes", "Nodes"),
    Binding("j", "nav_jobs", "Jobs"),
    Binding("?", "show_help", "Help"),
    Binding("q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]

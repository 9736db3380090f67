"""StatusBanner widget - transient error line and standing error banner."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import Static


class StatusBanner(Static):
    """Single-line error surface.

    Hidden when there is nothing to report. A transient error shows as a
    muted warning line; a standing error (repeated failures) shows as a
    highlighted banner until cleared.
    """

    DEFAULT_CSS = """
    StatusBanner {
        height: auto;
        width: 1fr;
        padding: 0 1;
        display: none;
    }
    StatusBanner.transient {
        display: block;
        color: $warning;
    }
    StatusBanner.standing {
        display: block;
        color: $text;
        background: $error;
        text-style: bold;
    }
    StatusBanner.notice {
        display: block;
        color: $text-muted;
    }
    """

    _LEVELS = ("transient", "standing", "notice")

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__("", id=id)
        self._level = ""

    @property
    def level(self) -> str:
        return self._level

    def _show(self, level: str, message: str) -> None:
        for name in self._LEVELS:
            self.set_class(name == level, name)
        self._level = level
        self.update(escape(message))

    def show_transient(self, message: str) -> None:
        self._show("transient", message)

    def show_standing(self, message: str) -> None:
        self._show("standing", message)

    def show_notice(self, message: str) -> None:
        self._show("notice", message)

    def clear(self) -> None:
        self._show("", "")


__all__ = ["StatusBanner"]

"""StatusCard widget for summary figures.

CSS Classes: widget-status-card
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widgets import Static

from fleetscope.widgets._base import BaseWidget


class StatusCard(BaseWidget):
    """Titled value whose colour follows its status.

    CSS Classes: widget-status-card
    """

    DEFAULT_CSS = """
    StatusCard {
        height: auto;
        width: 1fr;
        padding: 0 1;
        border: solid $surface-lighten-1;
        background: $surface;
    }
    StatusCard > .card-title {
        text-style: bold;
        color: $secondary;
        text-align: center;
        width: 100%;
    }
    StatusCard > .card-value {
        text-style: bold;
        color: $text;
        text-align: center;
        width: 100%;
    }
    StatusCard.success > .card-value { color: $success; }
    StatusCard.warning > .card-value { color: $warning; }
    StatusCard.error > .card-value { color: $error; }
    StatusCard.info > .card-value { color: $text; }
    """
    _default_classes = "widget-status-card"

    value = reactive("", init=False)

    def __init__(
        self,
        title: str,
        value: str = "-",
        status: str = "info",
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        """Initialize the status card.

        Args:
            title: The card title.
            value: The value to display.
            status: Status indicator (success, warning, error, info).
            id: Optional widget ID.
            classes: Optional CSS classes.
        """
        super().__init__(id=id, classes=classes, status=status)
        self._title = title
        self._initial_value = value

    @property
    def title(self) -> str:
        return self._title

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="card-title")
        yield Static(self._initial_value, classes="card-value")

    def watch_value(self, value: str) -> None:
        for widget in self.query(".card-value"):
            if isinstance(widget, Static):
                widget.update(value)

    def set_value(self, value: str) -> None:
        """Set the displayed value."""
        self._initial_value = value
        self.value = value


__all__ = ["StatusCard"]

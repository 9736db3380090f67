"""Base widget classes shared by FleetScope widgets.

Standard status pattern:
- Widgets that colour themselves by status carry exactly one of the
  ``STATUS_CLASSES`` at a time
- ``set_status`` swaps the class; CSS in each widget maps it to a colour
"""

from __future__ import annotations

from typing import ClassVar

from textual.widget import Widget

STATUS_CLASSES: tuple[str, ...] = ("success", "warning", "error", "info")


class BaseWidget(Widget):
    """Base widget applying default CSS classes and a status class.

    Attributes:
        _default_classes: CSS classes added to every instance.
    """

    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str = "",
        status: str = "",
        **kwargs,
    ) -> None:
        """Initialize the base widget.

        Args:
            id: Widget ID.
            classes: CSS classes to apply to the widget.
            status: Initial status class (one of ``STATUS_CLASSES``) or empty.
            **kwargs: Additional keyword arguments passed to Widget.
        """
        super().__init__(id=id, classes=classes, **kwargs)
        if self._default_classes:
            self.add_class(*self._default_classes.split())
        self._status = ""
        if status:
            self.set_status(status)

    @property
    def status(self) -> str:
        return self._status

    def set_status(self, status: str) -> None:
        """Replace the current status class.

        Args:
            status: The new status (success, warning, error, info) or "".
        """
        if status and status not in STATUS_CLASSES:
            raise ValueError(f"unknown status {status!r}")
        if status == self._status:
            return
        if self._status:
            self.remove_class(self._status)
        if status:
            self.add_class(status)
        self._status = status


__all__ = [
    "STATUS_CLASSES",
    "BaseWidget",
]

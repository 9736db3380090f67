"""Tabbed view mixin for screens with TabbedContent."""

from __future__ import annotations

import logging
from contextlib import suppress

from textual.css.query import NoMatches, WrongType
from textual.widgets import TabbedContent

logger = logging.getLogger(__name__)


class TabbedViewMixin:
    """Mixin providing tab switching for screens.

    Screens list their pane ids in ``TAB_ORDER``; ``action_switch_tab_N``
    activates the N-th pane of the ``#tabbed-content`` widget.

    Usage:
        class MyScreen(TabbedViewMixin, BaseScreen):
            TAB_ORDER = ("tab-hosts", "tab-indices")

            def compose(self):
                with TabbedContent(id="tabbed-content"):
                    with TabPane("Hosts", id="tab-hosts"):
                        ...
    """

    TAB_ORDER: tuple[str, ...] = ()

    def switch_tab(self, tab_id: str) -> None:
        """Switch to the specified tab.

        Args:
            tab_id: The ID of the tab to switch to.
        """
        with suppress(NoMatches, WrongType):
            tabbed_content = self.query_one(  # type: ignore[attr-defined]
                "#tabbed-content", TabbedContent
            )
            tabbed_content.active = tab_id

    def _switch_to_position(self, position: int) -> None:
        if position < len(self.TAB_ORDER):
            self.switch_tab(self.TAB_ORDER[position])

    def action_switch_tab_1(self) -> None:
        """Switch to tab 1."""
        self._switch_to_position(0)

    def action_switch_tab_2(self) -> None:
        """Switch to tab 2."""
        self._switch_to_position(1)


__all__ = ["TabbedViewMixin"]

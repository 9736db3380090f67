"""TelemetryTable widget - keyed wrapper around Textual's DataTable.

Rows are replaced wholesale on every refresh. The cursor follows the row key
rather than the row index, so a re-sorted refresh keeps the same entity
highlighted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from textual.containers import Container
from textual.widgets import DataTable

from fleetscope.constants.limits import MAX_ROWS_DISPLAY

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult

Row = tuple[str, Sequence[Any]]


class TelemetryTable(Container):
    """Data table with fixed columns and keyed rows.

    CSS Classes: widget-telemetry-table

    Example:
        ```python
        table = TelemetryTable(
            columns=[("Host", 30), ("Tasks", 10)],
            id="hosts-table",
        )
        table.set_rows([("host-a", ("host-a", "12"))])
        ```
    """

    DEFAULT_CSS = """
    TelemetryTable {
        height: 1fr;
        width: 1fr;
        min-height: 3;
        background: $surface;
    }
    TelemetryTable > DataTable {
        height: 1fr;
        width: 1fr;
        border: none;
        background: transparent;
    }
    """

    def __init__(
        self,
        columns: Sequence[tuple[str, int]],
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = True,
        max_rows: int = MAX_ROWS_DISPLAY,
    ) -> None:
        """Initialize the table.

        Args:
            columns: (label, width) column definitions.
            id: Widget ID.
            classes: CSS classes (widget-telemetry-table is added automatically).
            zebra_stripes: Whether to display alternating row colors.
            max_rows: Rows beyond this count are not rendered.
        """
        super().__init__(id=id, classes=f"widget-telemetry-table {classes}".strip())
        self._columns = list(columns)
        self._zebra_stripes = zebra_stripes
        self._max_rows = max_rows
        self._inner: DataTable | None = None

    def compose(self) -> ComposeResult:
        table: DataTable = DataTable(cursor_type="row", zebra_stripes=self._zebra_stripes)
        for label, width in self._columns:
            table.add_column(label, width=width, key=label)
        self._inner = table
        yield table

    @property
    def data_table(self) -> DataTable | None:
        """The composed DataTable, or None before composition."""
        return self._inner

    @property
    def row_count(self) -> int:
        return 0 if self._inner is None else self._inner.row_count

    @property
    def cursor_row_key(self) -> str | None:
        """Key of the highlighted row, if any."""
        table = self._inner
        if table is None or table.row_count == 0:
            return None
        try:
            row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        except Exception:
            return None
        return row_key.value

    def set_rows(self, rows: Sequence[Row], *, keep_cursor: bool = True) -> None:
        """Replace all rows, restoring the cursor to the same key when present."""
        table = self._inner
        if table is None:
            return
        previous_key = self.cursor_row_key if keep_cursor else None
        if len(rows) > self._max_rows:
            logger.debug(f"Truncating {len(rows)} rows to {self._max_rows}")
            rows = rows[: self._max_rows]
        with table.app.batch_update():
            table.clear()
            for key, cells in rows:
                table.add_row(*cells, key=key)
        if previous_key is None:
            return
        try:
            table.move_cursor(row=table.get_row_index(previous_key))
        except Exception:
            logger.debug(f"Row {previous_key} not present after refresh")

    def show_message(self, message: str) -> None:
        """Replace rows with a single placeholder row."""
        table = self._inner
        if table is None:
            return
        table.clear()
        filler = ["" for _ in self._columns[1:]]
        table.add_row(message, *filler, key="__placeholder__")

    def clear(self) -> None:
        if self._inner is not None:
            self._inner.clear()


__all__ = ["TelemetryTable"]

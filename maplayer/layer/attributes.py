"""Attribute table of a layer.

Row ``i`` describes geometry ``i`` of the owning layer. Keeping the two
aligned is up to whoever loads the layer; nothing here checks that rows
are as wide as the column list either.
"""

from typing import Optional, Sequence

from maplayer.core.exceptions import AttributeRowIndexError, UnknownColumnError


class Attributes:
    """Named columns plus an ordered list of string rows."""

    def __init__(
        self,
        column_names: Optional[Sequence[str]] = None,
        rows: Optional[Sequence[Sequence[str]]] = None,
    ):
        self._column_names: list[str] = list(column_names or [])
        self._rows: list[list[str]] = [list(row) for row in rows or []]

    @property
    def column_names(self) -> list[str]:
        return list(self._column_names)

    @column_names.setter
    def column_names(self, names: Sequence[str]) -> None:
        self._column_names = list(names)

    def set_column_names(self, names: Sequence[str]) -> None:
        """Replace all column names."""
        self.column_names = names

    def add_row(self, row: Sequence[str], index: Optional[int] = None) -> None:
        """Append a row, or insert it before position ``index``."""
        if index is None:
            self._rows.append(list(row))
            return
        if not 0 <= index <= len(self._rows):
            raise AttributeRowIndexError(index, len(self._rows), "insert")
        self._rows.insert(index, list(row))

    def get_row(self, index: int) -> list[str]:
        if not 0 <= index < len(self._rows):
            raise AttributeRowIndexError(index, len(self._rows), "lookup")
        return list(self._rows[index])

    def get_value(self, index: int, column: str) -> Optional[str]:
        """Field of row ``index`` in ``column``; None if the row is too short."""
        try:
            position = self._column_names.index(column)
        except ValueError:
            raise UnknownColumnError(column) from None
        row = self.get_row(index)
        return row[position] if position < len(row) else None

    def records(self) -> list[dict[str, str]]:
        """Rows as dicts keyed by column name, truncated to the shorter side."""
        return [dict(zip(self._column_names, row)) for row in self._rows]

    def size(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def copy(self) -> "Attributes":
        """Independent table with the same column names and rows."""
        return Attributes(self._column_names, self._rows)

    def clear(self) -> None:
        """Drop every row and the column names."""
        self._rows.clear()
        self._column_names.clear()

    def __repr__(self) -> str:
        return f"Attributes(columns={self._column_names!r}, rows={len(self._rows)})"

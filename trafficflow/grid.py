"""The editable grid of initial data: row editing and sorting by a column."""

from __future__ import annotations

from typing import Iterable, Sequence

INPUT_HEADER = ("№", "N1", "ΔN1", "a", "b")
COLUMNS = len(INPUT_HEADER)
ARROW_UP = "▲"
ARROW_DOWN = "▼"


def _strip_arrow(text: str) -> str:
    for arrow in (ARROW_UP, ARROW_DOWN):
        position = text.find(arrow)
        if position >= 0:
            return text[:position]
    return text


def _blank_row() -> list[str]:
    return [""] * COLUMNS


class InputGrid:
    """Rows of initial data as text cells: number, N1, ΔN1, a and b.

    Rows are addressed the way the form shows them: row 0 is the header,
    data rows are numbered from 1.
    """

    def __init__(self, rows: Iterable[Sequence[str]] | None = None) -> None:
        if rows is None:
            self._rows = [["1", *_blank_row()[1:]]]
        else:
            self._rows = [self._normalise(row) for row in rows]
        self._header = list(INPUT_HEADER)
        self._sorted_col: int | None = None
        self._ascending = True

    @staticmethod
    def _normalise(row: Sequence[str]) -> list[str]:
        cells = [str(cell) for cell in row]
        if len(cells) > COLUMNS:
            raise ValueError(f"a row holds at most {COLUMNS} cells")
        return cells + [""] * (COLUMNS - len(cells))

    def __len__(self) -> int:
        return len(self._rows)

    def _renumber(self) -> None:
        for number, row in enumerate(self._rows, start=1):
            row[0] = str(number)

    def add_row(self) -> int:
        """Append an empty numbered row and return its position."""
        row = _blank_row()
        row[0] = str(len(self._rows) + 1)
        self._rows.append(row)
        return len(self._rows)

    def insert_row(self, index: int) -> int:
        """Insert an empty row after row ``index`` and return its position."""
        if index < 0:
            raise ValueError("no row is selected")
        if index > len(self._rows):
            raise IndexError(f"row {index} does not exist")
        self._rows.insert(index, _blank_row())
        self._renumber()
        return index + 1

    def delete_rows(self, top: int, bottom: int) -> int:
        """Delete rows ``top`` to ``bottom`` inclusive; return how many went."""
        if top < 1 or bottom < top:
            raise ValueError(f"invalid row selection {top}..{bottom}")
        removed = 0
        for position in range(bottom, top - 1, -1):
            if position <= len(self._rows):
                del self._rows[position - 1]
                removed += 1
        self._renumber()
        return removed

    def sort_by_column(self, col: int) -> bool:
        """Sort rows by the text of a column; repeated calls flip the order.

        The row numbers stay in place. Returns True for ascending order.
        """
        if not 0 <= col < COLUMNS:
            raise ValueError(f"column {col} does not exist")

        self._ascending = not self._ascending if self._sorted_col == col else True
        if self._sorted_col is not None and self._sorted_col != col:
            self._header[self._sorted_col] = _strip_arrow(
                self._header[self._sorted_col]
            )
        self._sorted_col = col

        if col != 0:
            numbers = [row[0] for row in self._rows]
            ordered = sorted(
                self._rows, key=lambda row: row[col], reverse=not self._ascending
            )
            for number, row in zip(numbers, ordered):
                row[0] = number
            self._rows = ordered

        arrow = ARROW_UP if self._ascending else ARROW_DOWN
        self._header[col] = _strip_arrow(self._header[col]) + arrow
        return self._ascending

    def header(self) -> list[str]:
        """The column titles, with the sort arrow where there is one."""
        return list(self._header)

    def cells(self) -> list[list[str]]:
        """A copy of the data rows."""
        return [list(row) for row in self._rows]

    def clear(self) -> None:
        """Reset to a single empty row."""
        self._rows = [["1", *_blank_row()[1:]]]
        self._header = list(INPUT_HEADER)
        self._sorted_col = None
        self._ascending = True
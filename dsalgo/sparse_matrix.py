"""Sparse matrices stored as a list of their non-zero entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = ["SparseEntry", "SparseMatrix"]


@dataclass(frozen=True)
class SparseEntry:
    """A non-zero value and its position."""

    value: Any
    row: int
    column: int

    def __str__(self) -> str:
        return f"[{self.value},{self.row},{self.column}]"


class SparseMatrix:
    """A ``rows`` by ``columns`` matrix that stores only its listed entries."""

    def __init__(self, rows: int, columns: int, entries: Iterable[SparseEntry] = ()) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(f"shape must be non-negative, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self._entries: list[SparseEntry] = []
        seen: set[tuple[int, int]] = set()
        for entry in entries:
            if not (0 <= entry.row < rows and 0 <= entry.column < columns):
                raise ValueError(f"entry {entry} lies outside a {rows}x{columns} matrix")
            position = (entry.row, entry.column)
            if position in seen:
                raise ValueError(f"duplicate entry at {position}")
            seen.add(position)
            self._entries.append(entry)

    @classmethod
    def from_dense(cls, rows: Iterable[Sequence[Any]]) -> SparseMatrix:
        """Collect the non-zero cells of a rectangular grid, row by row."""
        grid = [list(row) for row in rows]
        width = len(grid[0]) if grid else 0
        if any(len(row) != width for row in grid):
            raise ValueError("all rows must have the same length")
        entries = [
            SparseEntry(value, r, c)
            for r, row in enumerate(grid)
            for c, value in enumerate(row)
            if value != 0
        ]
        return cls(len(grid), width, entries)

    def to_dense(self) -> list[list[Any]]:
        """Return the full grid, with zeros where nothing is stored."""
        grid: list[list[Any]] = [[0] * self.columns for _ in range(self.rows)]
        for entry in self._entries:
            grid[entry.row][entry.column] = entry.value
        return grid

    def format(self) -> str:
        """Return the entries as ``[value,row,column]`` groups."""
        if not self._entries:
            return "Empty List"
        return "  ".join(str(entry) for entry in self._entries)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def __iter__(self) -> Iterator[SparseEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self._entries == other._entries

    def __repr__(self) -> str:
        return f"SparseMatrix({self.rows}, {self.columns}, {self._entries!r})"
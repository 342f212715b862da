"""Letter grid representation and loading rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Sequence

from ..core.constants import DEFAULT_FILLER, DEFAULT_GRID_SIZE, Bounds, RowPolicy
from ..core.exceptions import EmptyInputError, GridStateError, MalformedGridError, OutOfRangeError
from ..core.models import Cell, Coordinate
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def split_lines(text: str) -> List[str]:
    """Split raw puzzle text on ``\\n`` or ``\\r\\n`` separators."""
    return re.split(r"\r?\n", text)


@dataclass
class GridConfig:
    """Configuration values for the square letter grid."""

    size: int = DEFAULT_GRID_SIZE
    row_policy: RowPolicy = RowPolicy.STRICT
    filler: str = DEFAULT_FILLER

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        if len(self.filler) != 1:
            raise ValueError(f"Filler must be a single character, got {self.filler!r}")
        self.row_policy = RowPolicy(self.row_policy)

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class LetterGrid:
    """Fixed N x N grid of letter cells with highlight state."""

    def __init__(self, config: GridConfig | None = None) -> None:
        self.config = config or GridConfig()
        self.bounds = self.config.bounds()
        self.cells: List[List[Cell]] = [
            [Cell(letter=self.config.filler) for _ in range(self.bounds.cols)]
            for _ in range(self.bounds.rows)
        ]
        self.loaded = False

    @property
    def size(self) -> int:
        return self.bounds.rows

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, rows: Sequence[str]) -> None:
        """Populate the grid from row strings, top to bottom.

        Blank rows are skipped and trailing whitespace is ignored. Every
        check runs before any cell is touched, so a rejected load leaves the
        grid as it was.
        """
        if self.loaded:
            raise GridStateError("Grid is already loaded; use reset_all() to restart a run")

        cleaned = [row.rstrip().upper() for row in rows if row.strip()]
        if not cleaned:
            raise EmptyInputError("grid")

        size = self.size
        if len(cleaned) > size:
            raise MalformedGridError(
                f"Grid has {len(cleaned)} rows, expected {size}",
                row_count=len(cleaned),
            )
        for index, row in enumerate(cleaned):
            if len(row) > size:
                raise MalformedGridError(
                    f"Row {index} has {len(row)} letters, expected at most {size}",
                    row=index,
                    length=len(row),
                )
            if len(row) < size and self.config.row_policy == RowPolicy.STRICT:
                raise MalformedGridError(
                    f"Row {index} has {len(row)} letters, expected {size}",
                    row=index,
                    length=len(row),
                )
        if len(cleaned) < size:
            raise MalformedGridError(
                f"Grid has {len(cleaned)} rows, expected {size}",
                row_count=len(cleaned),
            )

        for r, row in enumerate(cleaned):
            for c, letter in enumerate(row):
                self.cells[r][c] = Cell(letter=letter)
        self.loaded = True
        LOGGER.debug("Loaded %sx%s grid (%s policy)", size, size, self.config.row_policy.value)

    def load_text(self, text: str) -> None:
        self.load(split_lines(text))

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.contains(row, col):
            raise OutOfRangeError(
                f"Cell {(row, col)} outside {self.size}x{self.size} grid",
                value=(row, col),
            )
        return self.cells[row][col]

    def mark_highlighted(self, row: int, col: int) -> None:
        self.cell_at(row, col).highlighted = True

    def reset_all(self) -> None:
        """Clear every highlight, leaving the letters untouched."""
        for row in self.cells:
            for cell in row:
                cell.highlighted = False

    def iter_coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                yield r, c

    def highlighted_coordinates(self) -> List[Coordinate]:
        return [(r, c) for r, c in self.iter_coordinates() if self.cells[r][c].highlighted]

    def rows(self) -> List[str]:
        return ["".join(cell.letter for cell in row) for row in self.cells]

    def to_jsonable(self) -> List[List[dict]]:
        return [
            [{"letter": cell.letter, "highlighted": cell.highlighted} for cell in row]
            for row in self.cells
        ]

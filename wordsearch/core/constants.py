"""Shared constants and enumerations for the word search solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


DEFAULT_GRID_SIZE = 20
DEFAULT_FILLER = "*"
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Direction(str, Enum):
    """Compass headings a word can run in."""

    N = "N"
    NW = "NW"
    W = "W"
    SW = "SW"
    S = "S"
    SE = "SE"
    E = "E"
    NE = "NE"

    @property
    def step(self) -> Tuple[int, int]:
        return STEPS[self]


# Search order matters: ties resolve to the first heading in this table.
SEARCH_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.N,
    Direction.NW,
    Direction.W,
    Direction.SW,
    Direction.S,
    Direction.SE,
    Direction.E,
    Direction.NE,
)

STEPS = {
    Direction.N: (-1, 0),
    Direction.NW: (-1, -1),
    Direction.W: (0, -1),
    Direction.SW: (1, -1),
    Direction.S: (1, 0),
    Direction.SE: (1, 1),
    Direction.E: (0, 1),
    Direction.NE: (-1, 1),
}


class RowPolicy(str, Enum):
    """How rows shorter than the grid size are treated on load."""

    STRICT = "STRICT"
    PAD = "PAD"


class RunState(str, Enum):
    IDLE = "IDLE"
    SEARCHING = "SEARCHING"
    SOLVING = "SOLVING"
    DONE = "DONE"


class StepStatus(str, Enum):
    """Outcome of a single cooperative search step."""

    IN_PROGRESS = "IN_PROGRESS"
    WORD_FOUND = "WORD_FOUND"
    WORD_EXHAUSTED = "WORD_EXHAUSTED"
    ALL_DONE = "ALL_DONE"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

"""Data models supporting the word search solver."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import ALPHABET, DEFAULT_FILLER, Direction, StepStatus


Coordinate = Tuple[int, int]


@dataclass
class Cell:
    """Represents a grid cell and whether a found word has consumed it."""

    letter: str = DEFAULT_FILLER
    highlighted: bool = False


@dataclass
class Word:
    """A target word and its found flag."""

    text: str
    found: bool = False

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Placement:
    """Where a word was found: start cell, heading and the cells it covers."""

    start_row: int
    start_col: int
    direction: Direction
    length: int

    @property
    def cells(self) -> List[Coordinate]:
        dr, dc = self.direction.step
        return [(self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)]

    @property
    def end(self) -> Coordinate:
        return self.cells[-1]


@dataclass
class StepResult:
    """What a single engine step did."""

    status: StepStatus
    word_index: Optional[int] = None
    placement: Optional[Placement] = None
    cell: Optional[Coordinate] = None
    letter: Optional[str] = None


@dataclass
class SearchResult:
    words: List[Word]
    placements: Dict[int, Placement]
    tally: Counter
    solution: str
    elapsed_seconds: Optional[float] = None
    solution_cells: List[Coordinate] = field(default_factory=list)

    @property
    def found(self) -> List[Word]:
        return [word for word in self.words if word.found]

    @property
    def unfound(self) -> List[Word]:
        return [word for word in self.words if not word.found]

    def full_tally(self) -> Dict[str, int]:
        """Return counts for every letter A-Z, zero when unused."""
        counts = {letter: self.tally.get(letter, 0) for letter in ALPHABET}
        for letter, count in self.tally.items():
            counts.setdefault(letter, count)
        return counts

    def to_jsonable(self) -> dict:
        words = []
        for index, word in enumerate(self.words):
            placement = self.placements.get(index)
            entry = {"text": word.text, "found": word.found, "path": None, "direction": None}
            if placement is not None:
                entry["path"] = [list(cell) for cell in placement.cells]
                entry["direction"] = placement.direction.value
            words.append(entry)
        return {
            "words": words,
            "tally": dict(sorted(self.tally.items())),
            "solution": self.solution,
            "elapsed_seconds": self.elapsed_seconds,
        }

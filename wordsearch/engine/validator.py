"""Deterministic consistency checks for a finished search."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Set

from ..core.exceptions import ValidationError
from ..core.models import Coordinate, SearchResult
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class ResultValidator:
    """Checks that a result agrees with the grid it was computed on."""

    def validate(self, grid: LetterGrid, result: SearchResult) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_placements(grid, result)
            self._check_coverage(grid, result)
            self._check_tally(grid, result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_placements(self, grid: LetterGrid, result: SearchResult) -> None:
        for index, word in enumerate(result.words):
            placement = result.placements.get(index)
            if word.found != (placement is not None):
                raise ValidationError(f"Word {word.text} found flag disagrees with its placement")
            if placement is None:
                continue
            letters = []
            for row, col in placement.cells:
                if not grid.contains(row, col):
                    raise ValidationError(f"Path of {word.text} leaves the grid at {(row, col)}")
                cell = grid.cells[row][col]
                if not cell.highlighted:
                    raise ValidationError(f"Path cell {(row, col)} of {word.text} is not highlighted")
                letters.append(cell.letter)
            if "".join(letters) != word.text:
                raise ValidationError(f"Path of {word.text} spells {''.join(letters)}")

    def _check_coverage(self, grid: LetterGrid, result: SearchResult) -> None:
        claimed: Set[Coordinate] = set()
        for placement in result.placements.values():
            claimed.update(placement.cells)
        highlighted = set(grid.highlighted_coordinates())
        if claimed != highlighted:
            stray = sorted(highlighted ^ claimed)
            raise ValidationError(f"Highlighted cells do not match found paths: {stray[:5]}")

        expected = [(r, c) for r, c in grid.iter_coordinates() if (r, c) not in highlighted]
        if result.solution_cells and result.solution_cells != expected:
            raise ValidationError("Solution cells are not the unhighlighted cells in row-major order")
        letters = "".join(grid.cells[r][c].letter for r, c in expected)
        if letters != result.solution:
            raise ValidationError(f"Solution {result.solution!r} should be {letters!r}")
        if len(highlighted) + len(result.solution) != grid.size * grid.size:
            raise ValidationError("Highlighted cells and solution letters do not partition the grid")

    def _check_tally(self, grid: LetterGrid, result: SearchResult) -> None:
        expected: Counter = Counter()
        for placement in result.placements.values():
            for row, col in placement.cells:
                expected[grid.cells[row][col].letter] += 1
        actual = Counter({letter: count for letter, count in result.tally.items() if count})
        if actual != expected:
            raise ValidationError(f"Tally {dict(actual)} should be {dict(expected)}")
        path_total = sum(placement.length for placement in result.placements.values())
        if sum(actual.values()) != path_total:
            raise ValidationError("Tally total differs from the summed path lengths")

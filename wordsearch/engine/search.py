"""Eight-direction word search with letter tally and solution extraction.

The engine is a small state machine driven by :meth:`SearchEngine.step`.
Each call performs one unit of work:

* while searching, one start-cell/direction trial for the current word
  (a start cell whose letter cannot begin the word costs a single trial);
* while solving, one leftover letter appended to the solution.

A found word is committed in the step that completes its match, so a caller
that stops stepping at any point still sees a consistent grid, word list and
tally. :meth:`SearchEngine.run` simply steps until ``ALL_DONE``.
"""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.constants import SEARCH_DIRECTIONS, Direction, RunState, StepStatus
from ..core.exceptions import SearchStateError
from ..core.models import Coordinate, Placement, SearchResult, StepResult, Word
from ..utils.logger import get_logger
from .grid import LetterGrid
from .word_list import WordList


LOGGER = get_logger(__name__)


@dataclass
class SearchConfig:
    record_timing: bool = True


def match_at(grid: LetterGrid, text: str, row: int, col: int, direction: Direction) -> bool:
    """Return True if ``text`` reads from ``(row, col)`` along ``direction``."""
    if not text or not grid.contains(row, col) or grid.cells[row][col].letter != text[0]:
        return False
    dr, dc = direction.step
    for i in range(1, len(text)):
        r, c = row + dr * i, col + dc * i
        if not grid.contains(r, c):
            return False
        if grid.cells[r][c].letter != text[i]:
            return False
    return True


class SearchEngine:
    """Finds every listed word in the grid and builds the leftover solution."""

    def __init__(
        self,
        grid: LetterGrid,
        words: WordList,
        config: Optional[SearchConfig] = None,
    ) -> None:
        self.grid = grid
        self.words = words
        self.config = config or SearchConfig()
        self._clear_run_state()

    def _clear_run_state(self) -> None:
        self.state = RunState.IDLE
        self.tally: Counter = Counter()
        self.placements: Dict[int, Placement] = {}
        self.solution_letters: List[str] = []
        self.solution_cells: List[Coordinate] = []
        self.elapsed_seconds: Optional[float] = None
        self._started_at: Optional[float] = None
        self._word_index = 0
        self._cell_index = 0
        self._direction_index = 0
        self._solve_index = 0

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    @property
    def current_word_index(self) -> Optional[int]:
        if self.state == RunState.SEARCHING:
            return self._word_index
        return None

    def step(self) -> StepResult:
        """Advance the run by one trial or one solution letter."""
        if self.state == RunState.IDLE:
            self._begin()
        if self.state == RunState.SEARCHING:
            if self._word_index < len(self.words):
                return self._search_step()
            self._finish_search()
        if self.state == RunState.SOLVING:
            return self._solve_step()
        return StepResult(status=StepStatus.ALL_DONE)

    def run(self) -> SearchResult:
        """Step to completion and return the result."""
        while self.step().status != StepStatus.ALL_DONE:
            pass
        return self.result()

    def result(self) -> SearchResult:
        if self.state != RunState.DONE:
            raise SearchStateError(f"Search is not finished (state {self.state.value})")
        return SearchResult(
            words=[Word(text=word.text, found=word.found) for word in self.words],
            placements=dict(self.placements),
            tally=Counter(self.tally),
            solution="".join(self.solution_letters),
            elapsed_seconds=self.elapsed_seconds,
            solution_cells=list(self.solution_cells),
        )

    def restart(self) -> None:
        """Clear highlights, found flags and every per-run counter."""
        self.grid.reset_all()
        self.words.reset_all()
        self._clear_run_state()
        LOGGER.debug("Search state reset")

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------
    def _begin(self) -> None:
        if self.config.record_timing:
            self._started_at = time.perf_counter()
        self.state = RunState.SEARCHING
        LOGGER.info(
            "Searching %s words in %sx%s grid",
            len(self.words),
            self.grid.size,
            self.grid.size,
        )

    def _search_step(self) -> StepResult:
        index = self._word_index
        text = self.words[index].text
        size = self.grid.size
        row, col = divmod(self._cell_index, size)

        if self.grid.cells[row][col].letter != text[0]:
            self._next_cell()
        else:
            direction = SEARCH_DIRECTIONS[self._direction_index]
            if match_at(self.grid, text, row, col, direction):
                placement = Placement(row, col, direction, len(text))
                self._commit(index, placement)
                self._next_word()
                return StepResult(
                    status=StepStatus.WORD_FOUND,
                    word_index=index,
                    placement=placement,
                    cell=(row, col),
                )
            self._direction_index += 1
            if self._direction_index == len(SEARCH_DIRECTIONS):
                self._next_cell()

        if self._cell_index >= size * size:
            LOGGER.info("Word %s not found", text)
            self._next_word()
            return StepResult(status=StepStatus.WORD_EXHAUSTED, word_index=index)
        return StepResult(status=StepStatus.IN_PROGRESS, word_index=index, cell=(row, col))

    def _commit(self, index: int, placement: Placement) -> None:
        # Flag the word first: a duplicate commit must fail before any cell changes.
        self.words.mark_found(index)
        for row, col in placement.cells:
            self.grid.mark_highlighted(row, col)
            self.tally[self.grid.cells[row][col].letter] += 1
        self.placements[index] = placement
        LOGGER.info(
            "Found %s at (%s,%s) heading %s",
            self.words[index].text,
            placement.start_row,
            placement.start_col,
            placement.direction.value,
        )

    def _next_cell(self) -> None:
        self._cell_index += 1
        self._direction_index = 0

    def _next_word(self) -> None:
        self._word_index += 1
        self._cell_index = 0
        self._direction_index = 0

    def _finish_search(self) -> None:
        if self._started_at is not None:
            self.elapsed_seconds = time.perf_counter() - self._started_at
        self.state = RunState.SOLVING
        LOGGER.info(
            "Search finished: %s/%s words found",
            len(self.placements),
            len(self.words),
        )

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------
    def _solve_step(self) -> StepResult:
        size = self.grid.size
        while self._solve_index < size * size:
            row, col = divmod(self._solve_index, size)
            self._solve_index += 1
            cell = self.grid.cells[row][col]
            if cell.highlighted:
                continue
            self.solution_letters.append(cell.letter)
            self.solution_cells.append((row, col))
            return StepResult(status=StepStatus.IN_PROGRESS, cell=(row, col), letter=cell.letter)

        self.state = RunState.DONE
        LOGGER.info("Solution: %s", "".join(self.solution_letters))
        return StepResult(status=StepStatus.ALL_DONE)

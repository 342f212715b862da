"""Pretty-print helpers for word search grids and results."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.models import Cell, SearchResult
    from ..engine.grid import LetterGrid


def cell_symbol(cell: Cell, show_highlights: bool = True) -> str:
    """Highlighted letters stay uppercase; untouched letters are lowercased."""
    if show_highlights and not cell.highlighted:
        return cell.letter.lower()
    return cell.letter


def format_grid(grid: LetterGrid, *, show_highlights: bool = True) -> str:
    width = grid.bounds.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.bounds.rows):
        row_cells = [cell_symbol(grid.cells[r][c], show_highlights) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: LetterGrid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_search_report(result: SearchResult, grid: LetterGrid, *, stream=None) -> None:
    """Print grid, word outcomes, letter tally and the solution."""

    stream = stream or sys.stdout
    print(format_grid(grid), file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    for index, word in enumerate(result.words):
        placement = result.placements.get(index)
        if placement is None:
            print(f"  {word.text:<20} not found", file=stream)
            continue
        end_row, end_col = placement.end
        print(
            f"  {word.text:<20} ({placement.start_row},{placement.start_col})"
            f"-({end_row},{end_col}) {placement.direction.value}",
            file=stream,
        )
    print(f"  Found: {len(result.found)}/{len(result.words)}", file=stream)

    print(file=stream)
    print("--- Letters ---", file=stream)
    tally = result.full_tally()
    letters = sorted(tally)
    for start in range(0, len(letters), 6):
        chunk = letters[start:start + 6]
        print("  " + "  ".join(f"{letter} : {tally[letter]:>3}" for letter in chunk), file=stream)

    print(file=stream)
    print(f"Solution: {result.solution}", file=stream)
    if result.elapsed_seconds is not None:
        print(f"It took {result.elapsed_seconds:.4f} seconds to find all words!", file=stream)

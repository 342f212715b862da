"""Read raw puzzle text from local files or over HTTP."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

import requests

from ..core.exceptions import PuzzleSourceError
from ..engine.grid import GridConfig, LetterGrid
from ..engine.word_list import WordList
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

Source = Union[str, Path]


def is_url(source: Source) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _declares_charset(response: requests.Response) -> bool:
    return "charset=" in response.headers.get("Content-Type", "").lower()


def read_puzzle_text(source: Source, timeout_seconds: float = 30.0) -> str:
    """Return the text behind ``source``, a path or an http(s) URL."""
    if is_url(source):
        try:
            response = requests.get(source, timeout=timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            LOGGER.warning("Fetching %s failed: %s", source, exc)
            raise PuzzleSourceError(f"Could not fetch {source}: {exc}") from exc
        # Plain-text responses without a charset would otherwise decode as ISO-8859-1.
        response.encoding = response.encoding if _declares_charset(response) else "utf-8"
        return response.text

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleSourceError(f"Could not read {path}: {exc}") from exc


def load_puzzle(
    words_source: Source,
    grid_source: Source,
    config: Optional[GridConfig] = None,
    timeout_seconds: float = 30.0,
) -> Tuple[LetterGrid, WordList]:
    """Build a loaded grid and word list from two text sources."""
    grid = LetterGrid(config)
    grid.load_text(read_puzzle_text(grid_source, timeout_seconds))
    words = WordList()
    words.load_text(read_puzzle_text(words_source, timeout_seconds))
    LOGGER.info("Loaded puzzle: %s words, %sx%s grid", len(words), grid.size, grid.size)
    return grid, words

"""Word search solver with leftover-letter solutions.

This package exposes the public API surface via:

- ``wordsearch.engine.grid.LetterGrid``: the square letter grid.
- ``wordsearch.engine.word_list.WordList``: the words to locate.
- ``wordsearch.engine.search.SearchEngine``: the stepwise eight-direction
  search that tallies letters and assembles the solution.
"""

from .engine.grid import GridConfig, LetterGrid
from .engine.search import SearchConfig, SearchEngine
from .engine.word_list import WordList

__all__ = [
    "GridConfig",
    "LetterGrid",
    "SearchConfig",
    "SearchEngine",
    "WordList",
]

__version__ = "0.1.0"

"""Ordered list of target words with found state."""

from __future__ import annotations

from typing import Iterator, List, Sequence

from ..core.exceptions import EmptyInputError, OutOfRangeError, WordStateError
from ..core.models import Word
from ..utils.logger import get_logger
from .grid import split_lines


LOGGER = get_logger(__name__)


class WordList:
    """Target words in input order."""

    def __init__(self, words: Sequence[str] = ()) -> None:
        self.words: List[Word] = [Word(text=text.strip().upper()) for text in words if text.strip()]

    def load(self, lines: Sequence[str]) -> None:
        """Replace the list with one word per non-blank line."""
        words = [Word(text=line.strip().upper()) for line in lines if line.strip()]
        if not words:
            raise EmptyInputError("word list")
        self.words = words
        LOGGER.debug("Loaded %s words", len(words))

    def load_text(self, text: str) -> None:
        self.load(split_lines(text))

    def mark_found(self, index: int) -> None:
        word = self[index]
        if word.found:
            raise WordStateError(f"Word {index} ({word.text}) is already marked found")
        word.found = True

    def reset_all(self) -> None:
        for word in self.words:
            word.found = False

    def found_words(self) -> List[Word]:
        return [word for word in self.words if word.found]

    def unfound_words(self) -> List[Word]:
        return [word for word in self.words if not word.found]

    def __getitem__(self, index: int) -> Word:
        if not 0 <= index < len(self.words):
            raise OutOfRangeError(
                f"Word index {index} outside list of {len(self.words)}",
                value=index,
            )
        return self.words[index]

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

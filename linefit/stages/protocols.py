from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol


class Segmenter(Protocol):
    name: str

    def graphemes(self, text: str) -> list[str]:
        """Split text into grapheme clusters; joining them gives back text."""
        ...

    def iter_graphemes(self, text: str) -> Iterator[str]:
        """Yield grapheme clusters of text lazily, left to right."""
        ...

    def words(self, text: str) -> list[str]:
        """Split a single line into word and whitespace tokens."""
        ...

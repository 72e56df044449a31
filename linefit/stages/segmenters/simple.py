from __future__ import annotations

from collections.abc import Iterator

from ...constants import SPACE

__all__ = ["SimpleSegmenter"]


class SimpleSegmenter:
    """Code point graphemes and words separated by the ASCII space only.

    Tabs, non-breaking spaces and other separators stay inside words.
    """

    name = "simple"

    def graphemes(self, text: str) -> list[str]:
        return list(text)

    def iter_graphemes(self, text: str) -> Iterator[str]:
        return iter(text)

    def words(self, text: str) -> list[str]:
        # str.split drops the separators, put one back between each pair.
        tokens: list[str] = []
        for word in text.split(SPACE):
            tokens.append(word)
            tokens.append(SPACE)
        tokens.pop()
        return tokens

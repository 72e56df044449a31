from __future__ import annotations

from collections.abc import Iterator

import regex

__all__ = ["UnicodeSegmenter"]

_GRAPHEME = regex.compile(r"\X")
# WORD switches \b to the Unicode default word boundaries (UAX #29).
_WORD_BOUNDARY = regex.compile(r"\b", flags=regex.WORD)


class UnicodeSegmenter:
    """Extended grapheme clusters and UAX #29 words via the regex module."""

    name = "unicode"

    def graphemes(self, text: str) -> list[str]:
        if not text:
            return []
        return _GRAPHEME.findall(text)

    def iter_graphemes(self, text: str) -> Iterator[str]:
        for match in _GRAPHEME.finditer(text):
            yield match.group()

    def words(self, text: str) -> list[str]:
        if not text:
            return []
        cluster_ends = {0}
        for match in _GRAPHEME.finditer(text):
            cluster_ends.add(match.end())
        boundaries = {0, len(text)}
        for match in _WORD_BOUNDARY.finditer(text):
            if match.start() in cluster_ends:
                boundaries.add(match.start())
        positions = sorted(boundaries)
        return [text[start:end] for start, end in zip(positions, positions[1:])]

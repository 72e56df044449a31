"""Greedy line wrapping driven by a caller supplied fit predicate.

Lines are broken at word boundaries when possible. A word that does not fit
on an empty line is cut at grapheme boundaries, and the remainder is wrapped
like any other word.
"""

from __future__ import annotations

import logging
from collections import deque

from .constants import LINE_BREAKS, SPACE
from .stages.protocols import Segmenter
from .stages.segmenters import default_segmenter
from .types import FitPredicate, InvalidInputError, Trace

logger = logging.getLogger(__name__)

__all__ = [
    "split_line_to_fit_width",
    "split_line_to_words",
    "split_text_to_chars",
    "split_word_to_fit_width",
]


def split_text_to_chars(text: str, segmenter: Segmenter | None = None) -> list[str]:
    """Split a string into graphemes, or code points with the simple segmenter."""
    return (segmenter or default_segmenter()).graphemes(text)


def split_line_to_words(text: str, segmenter: Segmenter | None = None) -> list[str]:
    """Split a line into word tokens interleaved with whitespace tokens."""
    return (segmenter or default_segmenter()).words(text)


def split_word_to_fit_width(
    check_fit: FitPredicate,
    word: str,
    segmenter: Segmenter | None = None,
    *,
    trace: Trace | None = None,
) -> tuple[str, str]:
    """Split a word into the longest prefix that fits and the remaining part.

    Args:
        check_fit: Returns True when a candidate string fits.
        word: Word to split.
        segmenter: Source of grapheme boundaries, the process default if None.
        trace: Optional trace receiving one event for the split.
    Returns:
        (first part of word that fits, rest of word). The first part is empty
        when not even the first grapheme fits.
    """
    if not word:
        return "", ""

    # Graphemes are pulled lazily, segmentation stops at the first rejection.
    fitted = ""
    for grapheme in (segmenter or default_segmenter()).iter_graphemes(word):
        candidate = fitted + grapheme
        if not check_fit(candidate):
            break
        fitted = candidate
    rest = word[len(fitted) :]

    if trace is not None:
        trace.add("fit", "split_word", word=word, fitted=fitted, rest=rest)
    return fitted, rest


def split_line_to_fit_width(
    line: str,
    check_fit: FitPredicate,
    segmenter: Segmenter | None = None,
    *,
    trace: Trace | None = None,
    forced: list[int] | None = None,
) -> list[str]:
    """Split a single line into the lines that each satisfy ``check_fit``.

    Words are kept whole whenever they fit on a line of their own. The space
    between two words is dropped where the line is broken.

    If a single grapheme does not fit on an empty line it is emitted alone
    anyway so that wrapping always terminates. The indices of such lines are
    appended to ``forced`` and ``trace.forced_lines`` when given.

    Line breaks are the characters ``str.splitlines`` splits on.

    Raises:
        InvalidInputError: ``line`` contains a line break.
    """
    if any(char in LINE_BREAKS for char in line):
        raise InvalidInputError(
            "split_line_to_fit_width does not support line breaks in the line"
        )
    segmenter = segmenter or default_segmenter()
    words = deque(segmenter.words(line))
    if trace is not None:
        trace.add("words", "split_line", tokens=list(words))

    lines: list[str] = []
    new_line = ""
    while words:
        joiner = ""
        if words[0] == SPACE:
            joiner = SPACE
            words.popleft()
            if not words:
                break
        next_word = words.popleft()

        line_with_next_word = new_line + joiner + next_word
        if check_fit(line_with_next_word):
            new_line = line_with_next_word
            if trace is not None:
                trace.add("line", "extend", line=new_line)
            continue

        if new_line:
            # Retry the word on a fresh line, without its joiner.
            lines.append(new_line)
            new_line = ""
            words.appendleft(next_word)
            if trace is not None:
                trace.add("line", "flush", line=lines[-1])
            continue

        if not next_word:
            continue

        fitted, rest = split_word_to_fit_width(
            check_fit, next_word, segmenter, trace=trace
        )
        if not fitted:
            fitted = next(segmenter.iter_graphemes(next_word))
            rest = next_word[len(fitted) :]
            logger.debug("Grapheme %r does not fit on an empty line", fitted)
            if forced is not None:
                forced.append(len(lines))
            if trace is not None:
                trace.forced_lines.append(len(lines))
                trace.warnings.append(
                    f"Grapheme {fitted!r} does not fit on an empty line"
                )
        lines.append(fitted)
        if rest:
            words.appendleft(rest)
        if trace is not None:
            trace.add("line", "split_word", line=fitted, rest=rest)

    if new_line:
        lines.append(new_line)
    logger.debug("Split line of %d chars into %d lines", len(line), len(lines))
    return lines if lines else [""]

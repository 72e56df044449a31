from __future__ import annotations

from collections.abc import Callable

from .stages.protocols import Segmenter
from .stages.segmenters import default_segmenter
from .types import FitPredicate


def fits_width(measure: Callable[[str], float], max_width: float) -> FitPredicate:
    """Build a predicate accepting text whose measured width is at most max_width.

    Parameters:
        measure: Returns the width of a string (pixels, cells, characters).
        max_width: Maximum width of a line, in the unit of ``measure``.
    """
    if max_width < 0:
        raise ValueError(f"max_width must be non-negative, got {max_width}")

    def check_fit(text: str) -> bool:
        return measure(text) <= max_width

    return check_fit


def fits_graphemes(limit: int, segmenter: Segmenter | None = None) -> FitPredicate:
    """Build a predicate accepting text of at most ``limit`` grapheme clusters."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    segmenter = segmenter or default_segmenter()
    return fits_width(lambda text: len(segmenter.graphemes(text)), limit)

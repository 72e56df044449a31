"""Segmentation strategies and the process-wide default."""

from __future__ import annotations

import logging
import os
from functools import lru_cache

import regex

from ...constants import SEGMENTATION_ENV_VAR
from ..protocols import Segmenter
from .simple import SimpleSegmenter
from .unicode import UnicodeSegmenter

logger = logging.getLogger(__name__)

__all__ = [
    "SimpleSegmenter",
    "UnicodeSegmenter",
    "default_segmenter",
    "get_segmenter",
    "unicode_segmentation_available",
]

SEGMENTATION_NAMES = ("auto", "unicode", "simple")


@lru_cache(maxsize=1)
def unicode_segmentation_available() -> bool:
    """Probe whether the regex engine groups combining sequences into clusters."""
    probe = "e\u0301\U0001f44d\U0001f3fd"
    try:
        clusters = regex.findall(r"\X", probe)
    except regex.error:
        return False
    return clusters == ["e\u0301", "\U0001f44d\U0001f3fd"]


def get_segmenter(name: str = "auto") -> Segmenter:
    """Return the segmenter registered under ``name``.

    ``auto`` picks the Unicode segmenter when the capability probe passes.
    """
    key = (name or "auto").strip().lower()
    if key not in SEGMENTATION_NAMES:
        raise ValueError(
            f"Unknown segmentation {name!r}, expected one of "
            f"{', '.join(SEGMENTATION_NAMES)}"
        )
    if key == "auto":
        key = "unicode" if unicode_segmentation_available() else "simple"
    if key == "unicode":
        return UnicodeSegmenter()
    return SimpleSegmenter()


@lru_cache(maxsize=1)
def default_segmenter() -> Segmenter:
    """Segmenter used when callers do not pass one; resolved once per process."""
    name = os.environ.get(SEGMENTATION_ENV_VAR, "auto")
    segmenter = get_segmenter(name)
    logger.debug("Using %s segmentation", segmenter.name)
    return segmenter

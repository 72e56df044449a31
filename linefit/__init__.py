"""linefit - greedy word-then-grapheme line wrapping with pluggable fit checks."""

from .predicates import fits_graphemes, fits_width
from .splitting import (
    split_line_to_fit_width,
    split_line_to_words,
    split_text_to_chars,
    split_word_to_fit_width,
)
from .types import FitPredicate, InvalidInputError, Trace, WrapResult
from .wrap_config import WrapConfig
from .wrapper import LineWrapper

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "FitPredicate",
    "InvalidInputError",
    "LineWrapper",
    "Trace",
    "WrapConfig",
    "WrapResult",
    "fits_graphemes",
    "fits_width",
    "split_line_to_fit_width",
    "split_line_to_words",
    "split_text_to_chars",
    "split_word_to_fit_width",
]

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class WrapConfig:
    """User-facing configuration for LineWrapper.

    Keep this frozen+hashable so wrappers can be cached per configuration.
    """

    # Stage selection
    segmentation: Literal["auto", "unicode", "simple"] = "auto"

    # Behavior toggles
    return_trace: bool = False

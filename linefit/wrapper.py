from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .runtime.tracing import trace_timing
from .splitting import split_line_to_fit_width
from .stages.protocols import Segmenter
from .stages.segmenters import default_segmenter, get_segmenter
from .types import FitPredicate, Trace, WrapResult
from .wrap_config import WrapConfig

logger = logging.getLogger(__name__)


class LineWrapper:
    def __init__(
        self,
        config: WrapConfig | None = None,
        *,
        segmenter: Segmenter | None = None,
    ) -> None:
        self.config = config or WrapConfig()
        self.segmenter = segmenter

    def _segmenter_for(self, cfg: WrapConfig) -> Segmenter:
        if self.segmenter is not None:
            return self.segmenter
        if cfg.segmentation == "auto":
            return default_segmenter()
        return get_segmenter(cfg.segmentation)

    def wrap(
        self, line: str, check_fit: FitPredicate, **overrides: Any
    ) -> WrapResult:
        cfg = replace(self.config, **overrides) if overrides else self.config
        segmenter = self._segmenter_for(cfg)
        trace = Trace() if cfg.return_trace else None
        forced: list[int] = []

        with trace_timing(
            trace, "wrap", "split_line", segmenter=segmenter.name
        ) as info:
            lines = split_line_to_fit_width(
                line, check_fit, segmenter, trace=trace, forced=forced
            )
            info["lines"] = len(lines)
        if forced:
            logger.debug("Forced %d lines that do not fit: %s", len(forced), forced)

        return WrapResult(lines=lines, forced=forced, trace=trace)

    def __call__(
        self, line: str, check_fit: FitPredicate, **overrides: Any
    ) -> WrapResult:
        return self.wrap(line, check_fit, **overrides)

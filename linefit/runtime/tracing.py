from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Literal

from ..types import Trace


@contextmanager
def trace_timing(
    trace: Trace | None,
    stage: Literal["words", "fit", "line", "wrap"],
    name: str,
    **details: Any,
) -> Iterator[dict[str, Any]]:
    """Record the wall time of the enclosed block as a TraceEvent.

    The yielded dict is stored as the event details, so the block can add
    values (counts, results) that are only known once it finished. Nothing is
    recorded when ``trace`` is None or the block raises.
    """
    start = time.perf_counter()
    yield details
    if trace is not None:
        ms = (time.perf_counter() - start) * 1000.0
        trace.add(stage, name, ms, **details)

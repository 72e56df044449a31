from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Literal

FitPredicate = Callable[[str], bool]
"""Returns True when the candidate string is acceptable as one line."""


class InvalidInputError(ValueError):
    """Raised when a line handed to the line splitter contains a line break."""


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["words", "fit", "line", "wrap"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    # Indices of lines emitted although the predicate rejected them
    forced_lines: list[int] = field(default_factory=list)

    def add(
        self,
        stage: Literal["words", "fit", "line", "wrap"],
        name: str,
        ms: float = 0.0,
        **details: Any,
    ) -> None:
        self.events.append(TraceEvent(stage=stage, name=name, ms=ms, details=details))


@dataclass
class WrapResult:
    lines: list[str]
    # Lines made of a single grapheme that did not satisfy the predicate
    forced: list[int] = field(default_factory=list)
    trace: Trace | None = None

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

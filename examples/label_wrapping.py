"""Wrap labels with a character budget and with a measured pixel width.

Usage:
    python examples/label_wrapping.py
"""

from __future__ import annotations

from linefit import LineWrapper, WrapConfig, fits_graphemes, fits_width

LABEL = "Grapheme aware wrapping keeps 👍🏽 and café intact"

# Rough glyph widths of a proportional font, in pixels.
NARROW = set("fijlrt ")
WIDE = set("mwMW")


def measure(text: str) -> float:
    width = 0.0
    for char in text:
        if char in NARROW:
            width += 4.0
        elif char in WIDE:
            width += 12.0
        else:
            width += 8.0
    return width


def show(label: str, lines: list[str]) -> None:
    print(f"[{label}]")
    for line in lines:
        print(f"  |{line}|")


def main() -> None:
    wrapper = LineWrapper(WrapConfig(return_trace=True))

    result = wrapper.wrap(LABEL, fits_graphemes(12))
    show("12 graphemes", result.lines)

    result = wrapper.wrap(LABEL, fits_width(measure, 80))
    show("80 pixels", result.lines)

    result = wrapper.wrap(LABEL, fits_graphemes(12), segmentation="simple")
    show("12 graphemes, simple word splitting", result.lines)

    result = wrapper.wrap("Wide", fits_width(measure, 6))
    show("6 pixels", result.lines)
    print(f"  forced lines: {result.forced}")


if __name__ == "__main__":
    main()

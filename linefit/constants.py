"""Constants for linefit - separators and program metadata."""

# Program metadata
PROGRAM_NAME = "linefit"

# Joiner re-inserted between two words placed on the same line
SPACE = " "

# Characters str.splitlines breaks on; split_line_to_fit_width rejects them
LINE_BREAKS = frozenset("\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029")

# Process-wide segmentation strategy: auto, unicode or simple
SEGMENTATION_ENV_VAR = "LINEFIT_SEGMENTATION"

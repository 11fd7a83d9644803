"""Source text offsets and ranges."""

from gmml.text.text import TextRange, TextSize, line_col, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "line_col",
    "slice_text_range",
]

"""
line-diff - positional line-by-line text comparison.

This package compares two text blocks line by line, pairing lines by their
index, and classifies each line as same, added or removed. It ships a
ComfyUI node and a command-line tool on top of the comparison engine.
"""

from .nodes import LineDiff
from .utils import (
    DiffResult,
    LineDiffError,
    LineKind,
    LineRecord,
    compare,
    format_diff_text,
    split_lines,
)

__version__ = "0.1.0"

NODE_CLASS_MAPPINGS = {
    "LineDiff": LineDiff,
}

NODE_DISPLAY_NAME_MAPPINGS = {
    "LineDiff": "Line Diff",
}

__all__ = [
    "NODE_CLASS_MAPPINGS",
    "NODE_DISPLAY_NAME_MAPPINGS",
    "DiffResult",
    "LineDiffError",
    "LineKind",
    "LineRecord",
    "compare",
    "format_diff_text",
    "split_lines",
]

from .diff_engine import compare, filter_context, split_lines, DiffResult, LineKind, LineRecord
from .errors import InvalidContextLinesError, LineDiffError, UnknownViewModeError
from .text_formatter import format_diff_text, DEFAULT_CONTEXT_LINES, DEFAULT_VIEW_MODE, VIEW_MODES

__all__ = [
    "compare",
    "filter_context",
    "split_lines",
    "DiffResult",
    "LineKind",
    "LineRecord",
    "format_diff_text",
    "DEFAULT_CONTEXT_LINES",
    "DEFAULT_VIEW_MODE",
    "VIEW_MODES",
    "LineDiffError",
    "InvalidContextLinesError",
    "UnknownViewModeError",
]

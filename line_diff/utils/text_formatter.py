"""
Plain-text formatter for diff output.

Renders a DiffResult either as a single prefixed column (unified) or as two
columns with the original text on the left (side by side).
"""

import logging
from typing import Dict, List, Optional, Tuple

from .diff_engine import DiffResult, LineKind, LineRecord, filter_context
from .errors import UnknownViewModeError

logger = logging.getLogger(__name__)

VIEW_MODES = ("unified", "side_by_side")
DEFAULT_VIEW_MODE = "unified"
DEFAULT_CONTEXT_LINES = -1

NO_CHANGES_MESSAGE = "No differences found"
COLUMN_SEPARATOR = " | "

PREFIXES = {
    LineKind.ADDED: "+ ",
    LineKind.REMOVED: "- ",
    LineKind.SAME: "  ",
}


def format_diff_text(
    diff_result: DiffResult,
    view_mode: str = DEFAULT_VIEW_MODE,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> str:
    """
    Render a diff result as text.

    Args:
        diff_result: The computed diff result
        view_mode: 'unified' or 'side_by_side'
        context_lines: Number of unchanged records to show around changes (-1 = show all)

    Returns:
        The rendered diff, header first
    """
    if view_mode not in VIEW_MODES:
        raise UnknownViewModeError(view_mode, VIEW_MODES)

    records = filter_context(diff_result.records, context_lines)
    logger.debug(f"Rendering {len(records)} of {len(diff_result)} record(s) as {view_mode}")

    if view_mode == "side_by_side":
        return format_side_by_side_view(diff_result, records)
    return format_unified_view(diff_result, records)


def format_unified_view(
    diff_result: DiffResult, records: Optional[List[LineRecord]] = None
) -> str:
    """
    Generate unified view: one line per record with +/- prefixes.
    """
    header = _generate_header(diff_result.stats)
    if not diff_result.has_changes:
        return f"{header}\n{NO_CHANGES_MESSAGE}"

    if records is None:
        records = list(diff_result.records)

    rows = [f"{PREFIXES[record.kind]}{record.value}" for record in records]
    return "\n".join([header] + rows)


def format_side_by_side_view(
    diff_result: DiffResult, records: Optional[List[LineRecord]] = None
) -> str:
    """
    Generate side-by-side view.

    Shows original text on the left and new text on the right. A removed
    record directly followed by an added one always comes from the same
    index, so the two share a row.
    """
    header = _generate_header(diff_result.stats)
    if not diff_result.has_changes:
        return f"{header}\n{NO_CHANGES_MESSAGE}"

    if records is None:
        records = list(diff_result.records)

    # Group records into (marker, left, right) rows
    rows: List[Tuple[str, str, str]] = []
    i = 0
    while i < len(records):
        record = records[i]

        if record.kind is LineKind.SAME:
            rows.append((" ", record.value, record.value))
            i += 1

        elif record.kind is LineKind.REMOVED:
            if i + 1 < len(records) and records[i + 1].kind is LineKind.ADDED:
                rows.append(("~", record.value, records[i + 1].value))
                i += 2
            else:
                rows.append(("-", record.value, ""))
                i += 1

        else:
            rows.append(("+", "", record.value))
            i += 1

    width = max(len(left) for _, left, _ in rows)
    lines = [
        f"{marker} {left.ljust(width)}{COLUMN_SEPARATOR}{right}"
        for marker, left, right in rows
    ]
    return "\n".join([header] + lines)


def _generate_header(stats: Dict[str, int]) -> str:
    """Generate the header with addition/removal counts."""
    return f"+{stats.get('added', 0)} -{stats.get('removed', 0)}"

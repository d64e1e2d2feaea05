"""
Diff engine for positional line-by-line text comparison.

Lines are paired strictly by their index in each input. There is no
re-alignment search: a line inserted in the middle of one side makes every
following index report a removed/added pair.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import InvalidContextLinesError

logger = logging.getLogger(__name__)

# The only line separator. "\r" is line content, not a break.
LINE_SEPARATOR = "\n"


class LineKind(str, Enum):
    """Classification of a line in the diff output."""

    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class LineRecord:
    """A single classified line."""

    kind: LineKind
    value: str


@dataclass(frozen=True)
class DiffResult:
    """Ordered records produced by one call to :func:`compare`."""

    records: Tuple[LineRecord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LineRecord]:
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]

    @property
    def stats(self) -> Dict[str, int]:
        """Record counts keyed by kind value ('added', 'removed', 'same')."""
        stats = {kind.value: 0 for kind in LineKind}
        for record in self.records:
            stats[record.kind.value] += 1
        return stats

    @property
    def has_changes(self) -> bool:
        return any(record.kind is not LineKind.SAME for record in self.records)


def split_lines(text: str) -> List[str]:
    """
    Split text into lines on "\\n" only.

    An empty string is one empty line, and a trailing newline yields a
    trailing empty line.
    """
    return text.split(LINE_SEPARATOR)


def compare(text_a: str, text_b: str) -> DiffResult:
    """
    Compare two texts line by line, pairing lines by index.

    For each index up to the longer input's line count, equal lines produce
    one SAME record. Otherwise the line from text_a (if that side still has
    lines) is REMOVED, then the line from text_b (if present) is ADDED.
    An empty input has no lines unless both inputs are empty, in which case
    the result is a single SAME empty line.

    Args:
        text_a: The original text
        text_b: The new text

    Returns:
        DiffResult with records in index order
    """
    lines_a = split_lines(text_a)
    lines_b = split_lines(text_b)

    # An empty input is zero lines against non-empty text; two empty inputs
    # stay the single empty line they split into.
    if text_a != text_b:
        if not text_a:
            lines_a = []
        if not text_b:
            lines_b = []

    len_a = len(lines_a)
    len_b = len(lines_b)

    records: List[LineRecord] = []
    for i in range(max(len_a, len_b)):
        # Index past the end means the side is exhausted, not an empty line
        has_a = i < len_a
        has_b = i < len_b

        if has_a and has_b and lines_a[i] == lines_b[i]:
            records.append(LineRecord(LineKind.SAME, lines_a[i]))
            continue

        if has_a:
            records.append(LineRecord(LineKind.REMOVED, lines_a[i]))
        if has_b:
            records.append(LineRecord(LineKind.ADDED, lines_b[i]))

    logger.debug(
        f"Compared {len_a} line(s) against {len_b} line(s): {len(records)} record(s)"
    )
    return DiffResult(records=tuple(records))


def filter_context(records: Sequence[LineRecord], context_lines: int) -> List[LineRecord]:
    """
    Keep only changed records and the records surrounding them.

    Args:
        records: Records from a DiffResult
        context_lines: Number of records to keep on each side of a change
            (-1 = keep everything)

    Returns:
        Filtered list with only relevant records
    """
    if context_lines < -1:
        raise InvalidContextLinesError(context_lines)

    records = list(records)
    if context_lines == -1 or not records:
        return records

    changed_indices = [
        i for i, record in enumerate(records)
        if record.kind is not LineKind.SAME
    ]

    if not changed_indices:
        return records  # No changes, return all

    included = set()
    for idx in changed_indices:
        start = max(0, idx - context_lines)
        end = min(len(records), idx + context_lines + 1)
        included.update(range(start, end))

    return [record for i, record in enumerate(records) if i in included]

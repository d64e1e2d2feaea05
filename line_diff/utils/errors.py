"""Exceptions raised while rendering or configuring a diff."""

from typing import Iterable


class LineDiffError(ValueError):
    """Base class for line-diff errors."""


class UnknownViewModeError(LineDiffError):
    """Raised when a view mode other than the supported ones is requested."""

    def __init__(self, view_mode: str, supported: Iterable[str]) -> None:
        self.view_mode = view_mode
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown view mode {view_mode!r} (expected one of: {', '.join(self.supported)})"
        )


class InvalidContextLinesError(LineDiffError):
    """Raised when context_lines is below -1."""

    def __init__(self, context_lines: int) -> None:
        self.context_lines = context_lines
        super().__init__(f"context_lines must be -1 (show all) or >= 0, got {context_lines}")

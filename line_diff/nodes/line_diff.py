"""LineDiff node for comparing two text strings line by line."""

from typing import Any, Dict

from ..utils import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_VIEW_MODE,
    VIEW_MODES,
    compare,
    format_diff_text,
)


class LineDiff:
    """
    ComfyUI node that compares two text strings position by position and
    outputs the rendered diff as text.
    """

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "text_a": ("STRING", {"forceInput": True, "multiline": True}),
                "text_b": ("STRING", {"forceInput": True, "multiline": True}),
            },
            "optional": {
                "view_mode": (list(VIEW_MODES), {"default": DEFAULT_VIEW_MODE}),
                "context_lines": (
                    "INT",
                    {"default": DEFAULT_CONTEXT_LINES, "min": -1, "max": 50, "step": 1,
                     "tooltip": "Lines of context around changes (-1 = show all)"},
                ),
            },
        }

    RETURN_TYPES = ("STRING", "BOOLEAN")
    RETURN_NAMES = ("diff_text", "has_changes")
    FUNCTION = "compute_diff"
    OUTPUT_NODE = True
    CATEGORY = "utils/text"

    def compute_diff(
        self,
        text_a: str,
        text_b: str,
        view_mode: str = DEFAULT_VIEW_MODE,
        context_lines: int = DEFAULT_CONTEXT_LINES,
    ) -> Dict[str, Any]:
        """
        Compute the diff between two text strings.

        Args:
            text_a: The first (original) text string
            text_b: The second (new) text string
            view_mode: Display mode - 'unified' or 'side_by_side'
            context_lines: Number of context lines around changes (-1 = show all)

        Returns:
            Dict with 'ui' (diff_text and stats for display) and 'result'
            (diff_text, has_changes) for downstream nodes
        """
        diff_result = compare(text_a, text_b)
        diff_text = format_diff_text(diff_result, view_mode, context_lines)

        return {
            "ui": {
                "diff_text": [diff_text],
                "stats": [diff_result.stats],
            },
            "result": (diff_text, diff_result.has_changes),
        }

    @classmethod
    def IS_CHANGED(cls, **kwargs):
        """Force re-execution when inputs change."""
        return float("nan")

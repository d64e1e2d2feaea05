from .line_diff import LineDiff

__all__ = ["LineDiff"]

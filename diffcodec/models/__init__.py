from .diff import FileDiff, Hunk

__all__ = ["FileDiff", "Hunk"]

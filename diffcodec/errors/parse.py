from typing import Optional

from .base import DiffError


class ParseError(DiffError):
    """Raised when diff text does not follow the unified diff grammar."""

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line

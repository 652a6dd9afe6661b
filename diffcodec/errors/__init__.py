from .base import DiffError
from .parse import ParseError
from .quote import MalformedTokenError

__all__ = ["DiffError", "MalformedTokenError", "ParseError"]

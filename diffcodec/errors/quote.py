from .base import DiffError


class MalformedTokenError(DiffError):
    """A quoted filename token could not be decoded."""

    def __init__(self, message: str, token: str = ""):
        super().__init__(message)
        self.token = token

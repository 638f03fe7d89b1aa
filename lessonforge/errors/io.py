from __future__ import annotations


class PageIOError(Exception):
    """Raised when reading a source, creating a directory or writing a page fails."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

import os

from ..errors import PageIOError


def read_text(path: str) -> str:
    """Read a whole UTF-8 file. Raises PageIOError if it is missing or unreadable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise PageIOError(f"Failed to read '{path}': {e}", path) from e


def ensure_dir(path: str) -> None:
    """Create `path` and any missing ancestors. Existing directories are left alone."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise PageIOError(f"Failed to create directory '{path}': {e}", path) from e


def write_text(path: str, content: str) -> None:
    """Write `content` to `path`, replacing whatever is there."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise PageIOError(f"Failed to write '{path}': {e}", path) from e

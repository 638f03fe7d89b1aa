# lessonforge/config.py
import os
from dataclasses import dataclass
from typing import Optional

from .utils.discovery import DEFAULT_PATTERN
from .utils.paths import DOC_EXTENSION


@dataclass
class ConvertConfig:
    """Where to read lessons from, where to write pages, and how to name them."""

    source_root: str
    destination_root: str
    pattern: str = DEFAULT_PATTERN
    doc_extension: str = DOC_EXTENSION
    language: str = "ts"
    index_name: str = "index.md"
    write_index: bool = True
    respect_gitignore: bool = True

    @classmethod
    def from_cwd(cls, cwd: Optional[str] = None, **overrides) -> "ConvertConfig":
        """Lessons in '<cwd>/src', pages in '<cwd>/markdown'."""
        base = os.path.abspath(cwd or os.getcwd())
        return cls(
            source_root=os.path.join(base, "src"),
            destination_root=os.path.join(base, "markdown"),
            **overrides,
        )

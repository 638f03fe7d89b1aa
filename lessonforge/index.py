# lessonforge/index.py
import os
from typing import Iterable, List

from .utils.fs import ensure_dir, write_text
from .utils.paths import index_entry

INDEX_NAME = "index.md"
INDEX_TITLE = "Pages"


def render_index(names: Iterable[str]) -> str:
    """Markdown listing of generated pages, one link per name, in the given order."""
    lines: List[str] = [f"# {INDEX_TITLE}", ""]
    for name in names:
        entry = index_entry(name)
        lines.append(f"- [{entry.label}]({entry.link})")
    return "\n".join(lines) + "\n"


def generate_index(destination_root: str, names: Iterable[str], *, index_name: str = INDEX_NAME) -> str:
    """
    Write the index page under `destination_root` and return its path.

    Raises:
        PageIOError: if the root cannot be created or the page cannot be written.
    """
    ensure_dir(destination_root)
    path = os.path.join(destination_root, index_name)
    write_text(path, render_index(names))
    return path

# lessonforge/utils/__init__.py
from .discovery import discover_files
from .fs import ensure_dir, read_text, write_text
from .gitignore import IgnoreRules, find_gitignore, load_ignore_rules
from .paths import destination_name, index_entry, index_label

__all__ = [
    "discover_files",
    "ensure_dir",
    "read_text",
    "write_text",
    "IgnoreRules",
    "find_gitignore",
    "load_ignore_rules",
    "destination_name",
    "index_entry",
    "index_label",
]

# lessonforge/utils/gitignore.py
import os
from dataclasses import dataclass
from typing import Optional

import pathspec

from ..errors import DiscoveryError


@dataclass(frozen=True)
class IgnoreRules:
    """Patterns from one .gitignore, anchored at the folder that holds it."""

    base: str
    spec: pathspec.PathSpec

    def ignores(self, path: str, is_dir: bool = False) -> bool:
        rel = os.path.relpath(os.path.abspath(path), self.base).replace(os.sep, "/")
        if is_dir:
            rel += "/"
        return self.spec.match_file(rel)


def find_gitignore(start: str) -> Optional[str]:
    """Path of the nearest .gitignore in `start` or one of its parents, if any."""
    cur = os.path.abspath(start)
    while True:
        candidate = os.path.join(cur, ".gitignore")
        if os.path.isfile(candidate):
            return candidate
        parent = os.path.dirname(cur)
        if parent == cur:
            return None
        cur = parent


def load_ignore_rules(root: str) -> Optional[IgnoreRules]:
    """
    Rules from the .gitignore nearest to `root`, or None when there is none.

    Raises:
        DiscoveryError: if the .gitignore exists but cannot be read.
    """
    path = find_gitignore(root)
    if path is None:
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DiscoveryError(f"Failed to read '{path}': {e}") from e
    spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)
    return IgnoreRules(base=os.path.dirname(path), spec=spec)

# lessonforge/utils/discovery.py
import logging
import os
from typing import List

import pathspec

from ..errors import DiscoveryError
from .gitignore import load_ignore_rules

log = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.ts"


def _compile_pattern(pattern: str) -> pathspec.PathSpec:
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", [pattern])
    except Exception as e:
        raise DiscoveryError(f"Invalid discovery pattern '{pattern}': {e}") from e


def discover_files(
    root: str,
    pattern: str = DEFAULT_PATTERN,
    *,
    respect_gitignore: bool = True,
) -> List[str]:
    """
    List files under `root` whose root-relative path matches `pattern`.

    Paths are returned relative to `root` with forward slashes, sorted so
    that repeated runs over the same tree produce the same order. Hidden
    files and folders (leading '.') are skipped, as a shell glob does. With
    `respect_gitignore`, the nearest .gitignore at or above `root` filters
    the result, its patterns anchored where that file lives.

    Raises:
        DiscoveryError: if `root` is not a directory, cannot be walked, or
            its .gitignore cannot be read.
    """
    if not os.path.isdir(root):
        raise DiscoveryError(f"Source root '{root}' is not a directory")

    root = os.path.abspath(root)
    spec = _compile_pattern(pattern)
    rules = load_ignore_rules(root) if respect_gitignore else None

    def _on_error(err: OSError) -> None:
        raise DiscoveryError(f"Failed to list '{err.filename}': {err}") from err

    found: List[str] = []
    for current, dirs, files in os.walk(root, onerror=_on_error):
        rel_dir = os.path.relpath(current, root).replace(os.sep, "/")
        rel_dir = "" if rel_dir == "." else rel_dir + "/"

        # Prune in place so os.walk skips these subtrees entirely.
        dirs[:] = sorted(
            d for d in dirs
            if not d.startswith(".")
            and not (rules and rules.ignores(os.path.join(current, d), is_dir=True))
        )

        for name in files:
            if name.startswith("."):
                continue
            rel_path = rel_dir + name
            if not spec.match_file(rel_path):
                continue
            if rules and rules.ignores(os.path.join(current, name)):
                log.debug("Skipping ignored file %s", rel_path)
                continue
            found.append(rel_path)

    return sorted(found)

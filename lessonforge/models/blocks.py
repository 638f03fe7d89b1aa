from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class BlockKind(str, Enum):
    CODE = "code"
    COMMENT = "comment"
    LINKED_CODE = "linked_code"


@dataclass(frozen=True)
class Block:
    """A contiguous run of source lines classified uniformly."""

    kind: BlockKind
    lines: Tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def is_code(self) -> bool:
        return self.kind in (BlockKind.CODE, BlockKind.LINKED_CODE)


@dataclass(frozen=True)
class PageIndexEntry:
    """One generated page as listed on the index page."""

    name: str   # destination path relative to the output root, POSIX separators
    label: str  # display text
    link: str   # relative link target, e.g. './language/classes.md'

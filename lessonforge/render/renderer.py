# lessonforge/render/renderer.py
import re
from typing import Iterable, List

from ..models.blocks import Block, BlockKind
from .link import playground_markdown_link

FENCE = "```"
DEFAULT_LANGUAGE = "ts"

# Applied in order, each at most once; the opener rule precedes the bare '*' rule.
_COMMENT_MARKERS = (
    re.compile(r"^[ \t]*/\*\*?"),
    re.compile(r"\*/[ \t]*$"),
    re.compile(r"^//"),
    re.compile(r"^\*"),
)


def strip_comment_markers(line: str) -> str:
    """
    Remove comment syntax from a single comment line, keeping the prose.

    Whatever follows the marker is kept verbatim, so '* doc' becomes ' doc'.
    """
    for pattern in _COMMENT_MARKERS:
        line = pattern.sub("", line, count=1)
    return line


def _render_code(block: Block, language: str) -> List[str]:
    out = [FENCE + language]
    out.extend(block.lines)
    out.append(FENCE)
    if block.kind is BlockKind.LINKED_CODE:
        out.append(playground_markdown_link(block.text))
    return out


def render_blocks(blocks: Iterable[Block], *, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Render classified blocks as a Markdown page body.

    Code blocks become fenced sections tagged with `language`; linked-code
    blocks get a playground link line after the fence; comment blocks lose
    their markers and are emitted as prose.
    """
    out: List[str] = []
    for block in blocks:
        if block.is_code:
            out.extend(_render_code(block, language))
        else:
            out.extend(strip_comment_markers(line) for line in block.lines)
    return "\n".join(out)


render = render_blocks

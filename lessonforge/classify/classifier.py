# lessonforge/classify/classifier.py
"""
Line-oriented classifier that splits a TypeScript lesson into blocks.

The classifier is a small state machine. `step` is a pure transition from
one `ClassifierState` to the next for a single line, returning any blocks
the line completes; `finish` drains what is left at end of input and
`classify` folds both over a whole source text.

Comment detection is a prefix/suffix heuristic, not a lexer: a code line
that starts with '/*' or ends with '*/' (for instance inside a string
literal) is taken as a comment boundary.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

from ..models.blocks import Block, BlockKind

PLAYGROUND_MARKER = "// @playground-link"


class Mode(Enum):
    IN_CODE = "in_code"
    IN_BLOCK_COMMENT = "in_block_comment"


class PendingKind(Enum):
    """Kind the pending code lines will be emitted as."""

    PLAIN = "plain"
    LINKED = "linked"


@dataclass(frozen=True)
class ClassifierState:
    mode: Mode = Mode.IN_CODE
    comment_lines: Tuple[str, ...] = ()
    code_lines: Tuple[str, ...] = ()
    code_kind: PendingKind = PendingKind.PLAIN


INITIAL_STATE = ClassifierState()


def _has_content(lines: Tuple[str, ...]) -> bool:
    return any(line.strip() for line in lines)


def flush_code(state: ClassifierState) -> Tuple[ClassifierState, List[Block]]:
    """
    Emit the pending code lines as one block if any of them is non-blank.

    The buffer and the pending kind are reset either way, so a linked marker
    followed only by blank lines is spent without producing a block.
    """
    emitted: List[Block] = []
    if _has_content(state.code_lines):
        kind = BlockKind.LINKED_CODE if state.code_kind is PendingKind.LINKED else BlockKind.CODE
        emitted.append(Block(kind=kind, lines=state.code_lines))
    return replace(state, code_lines=(), code_kind=PendingKind.PLAIN), emitted


def step(state: ClassifierState, line: str) -> Tuple[ClassifierState, List[Block]]:
    """Advance the classifier by one source line."""
    trimmed = line.strip()

    # Marker and '//' checks use the raw line: an indented '//' stays code.
    if line.startswith(PLAYGROUND_MARKER):
        return replace(state, code_kind=PendingKind.LINKED), []

    if (trimmed.startswith("/*") and trimmed.endswith("*/")) or line.startswith("//"):
        state, emitted = flush_code(state)
        emitted.append(Block(kind=BlockKind.COMMENT, lines=(line,)))
        return state, emitted

    if trimmed.startswith("/*"):
        state, emitted = flush_code(state)
        state = replace(
            state,
            mode=Mode.IN_BLOCK_COMMENT,
            comment_lines=state.comment_lines + (trimmed,),
        )
        return state, emitted

    if state.mode is Mode.IN_BLOCK_COMMENT:
        lines = state.comment_lines + (trimmed,)
        if not trimmed.endswith("*/"):
            return replace(state, comment_lines=lines), []
        block = Block(kind=BlockKind.COMMENT, lines=lines)
        return replace(state, mode=Mode.IN_CODE, comment_lines=()), [block]

    return replace(state, code_lines=state.code_lines + (line,)), []


def finish(state: ClassifierState) -> List[Block]:
    """Blocks still pending at end of input."""
    state, emitted = flush_code(state)
    if state.comment_lines:
        # Unterminated block comment; keep its text rather than dropping it.
        emitted.append(Block(kind=BlockKind.COMMENT, lines=state.comment_lines))
    return emitted


def split_lines(source_text: str) -> List[str]:
    r"""
    Split on "\n" only, dropping one trailing "\r" per line.

    Other characters str.splitlines() treats as breaks (form feed, U+2028, ...)
    stay inside their line. A final newline does not start an extra empty line.
    """
    if not source_text:
        return []
    lines = source_text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def classify(source_text: str) -> List[Block]:
    """
    Split `source_text` into an ordered list of code, comment and linked-code blocks.

    Blank-only code runs are dropped, so whitespace-only input yields [].
    """
    blocks: List[Block] = []
    state = INITIAL_STATE
    for line in split_lines(source_text):
        state, emitted = step(state, line)
        blocks.extend(emitted)
    blocks.extend(finish(state))
    return blocks

from .link import PLAYGROUND_URL, encode_playground_link, playground_markdown_link
from .renderer import render, render_blocks, strip_comment_markers

__all__ = [
    "PLAYGROUND_URL",
    "encode_playground_link",
    "playground_markdown_link",
    "render",
    "render_blocks",
    "strip_comment_markers",
]

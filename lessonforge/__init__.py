from .classify import classify
from .config import ConvertConfig
from .errors import DiscoveryError, PageIOError
from .models.blocks import Block, BlockKind, PageIndexEntry
from .index import generate_index, render_index
from .pipeline import convert_file, convert_text, run
from .render import encode_playground_link, render, render_blocks, strip_comment_markers
from .utils.discovery import discover_files
from .utils.paths import destination_name, index_label

__all__ = [
    "classify",
    "render",
    "render_blocks",
    "strip_comment_markers",
    "encode_playground_link",
    "convert_text",
    "convert_file",
    "run",
    "generate_index",
    "render_index",
    "discover_files",
    "destination_name",
    "index_label",
    "Block",
    "BlockKind",
    "PageIndexEntry",
    "ConvertConfig",
    "DiscoveryError",
    "PageIOError",
]

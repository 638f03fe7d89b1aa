# lessonforge/utils/paths.py
import posixpath

from ..models.blocks import PageIndexEntry

DOC_EXTENSION = ".md"
LABEL_SEPARATORS = "-/"


def destination_name(source_name: str, doc_extension: str = DOC_EXTENSION) -> str:
    """
    Swap the final extension of a root-relative source path for `doc_extension`.

    Only the last segment is replaced: 'a.test.ts' -> 'a.test.md'. Dots in
    directory names are left alone and a name without an extension simply
    gets one appended.
    """
    if doc_extension and not doc_extension.startswith("."):
        doc_extension = "." + doc_extension
    source_name = source_name.replace("\\", "/")
    stem, _ext = posixpath.splitext(source_name)
    return stem + doc_extension


def index_label(name: str) -> str:
    """Display label for an index entry: every hyphen and slash becomes a space."""
    for sep in LABEL_SEPARATORS:
        name = name.replace(sep, " ")
    return name


def index_entry(name: str) -> PageIndexEntry:
    return PageIndexEntry(name=name, label=index_label(name), link=f"./{name}")

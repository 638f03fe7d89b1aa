# lessonforge/pipeline.py
import logging
import os
from typing import List, Optional

from ._logging import progress_logger
from .classify import classify
from .config import ConvertConfig
from .index import generate_index
from .render import render_blocks
from .utils.discovery import discover_files
from .utils.fs import ensure_dir, read_text, write_text
from .utils.paths import destination_name


def convert_text(source_text: str, *, language: str = "ts") -> str:
    """Classify a lesson source and render it as a Markdown page body."""
    return render_blocks(classify(source_text), language=language)


def convert_file(config: ConvertConfig, source_name: str) -> str:
    """
    Convert one root-relative source file and return the page name it was written to.

    Raises:
        PageIOError: on any read, mkdir or write failure.
    """
    source_path = os.path.join(config.source_root, *source_name.split("/"))
    body = convert_text(read_text(source_path), language=config.language)

    page_name = destination_name(source_name, config.doc_extension)
    page_path = os.path.join(config.destination_root, *page_name.split("/"))
    ensure_dir(os.path.dirname(page_path))
    write_text(page_path, body)
    return page_name


def run(
    config: ConvertConfig,
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> List[str]:
    """
    Convert every lesson under `config.source_root` into a page under
    `config.destination_root` and, unless disabled, write the index page.

    Files are processed one at a time in discovery order. The first failure
    aborts the run; pages written before it stay on disk.

    Returns:
        Generated page names relative to the destination root.

    Raises:
        DiscoveryError: if the source tree cannot be listed.
        PageIOError: on any read, mkdir or write failure.
    """
    lg = progress_logger(logger, enabled=log, name=__name__)
    lg.info("source %s", config.source_root)
    lg.info("destination %s", config.destination_root)
    ensure_dir(config.destination_root)

    sources = discover_files(
        config.source_root,
        config.pattern,
        respect_gitignore=config.respect_gitignore,
    )
    lg.debug("discovered %d file(s)", len(sources))

    generated: List[str] = []
    for source_name in sources:
        page_name = convert_file(config, source_name)
        lg.info("%s -> %s", source_name, page_name)
        generated.append(page_name)

    if config.write_index:
        path = generate_index(config.destination_root, generated, index_name=config.index_name)
        lg.info("index written to %s", path)
    return generated

# lessonforge/cli.py
"""
Command line entry point.

Usage:
  python -m lessonforge
  python -m lessonforge --source lessons --destination docs -v
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import ConvertConfig
from .errors import DiscoveryError, PageIOError
from .pipeline import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lessonforge",
        description="Convert annotated TypeScript lessons into Markdown pages",
    )
    parser.add_argument("--source", default=None, help="lesson source root (default: ./src)")
    parser.add_argument("--destination", default=None, help="output root (default: ./markdown)")
    parser.add_argument("--pattern", default=None, help="glob for lesson files (default: **/*.ts)")
    parser.add_argument("--extension", default=None, help="page extension (default: .md)")
    parser.add_argument("--no-index", action="store_true", help="do not write the index page")
    parser.add_argument("--no-gitignore", action="store_true", help="do not honour .gitignore")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def config_from_args(args: argparse.Namespace) -> ConvertConfig:
    config = ConvertConfig.from_cwd()
    if args.source:
        config.source_root = args.source
    if args.destination:
        config.destination_root = args.destination
    if args.pattern:
        config.pattern = args.pattern
    if args.extension:
        config.doc_extension = args.extension
    config.write_index = not args.no_index
    config.respect_gitignore = not args.no_gitignore
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = config_from_args(args)
    try:
        generated = run(config, log=args.verbose)
    except (DiscoveryError, PageIOError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for name in generated:
        print(name)
    return 0

"""Markdown to HTML converter."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mdhtml.batch import convert_sources
from mdhtml.converter import convert, run

logger = logging.getLogger(__name__)

__all__ = ["convert", "main", "run"]


def _convert_stdin(
    output: Optional[Path],
    wrap_with_html: bool,
    default_style: bool,
    title: Optional[str],
) -> int:
    """converts markdown read from stdin to stdout or to an output file."""
    html_text = convert(
        sys.stdin.read(),
        wrap_with_html=wrap_with_html,
        default_style=default_style,
        title=title,
    )
    if output is None:
        sys.stdout.write(html_text + "\n")
        return 0

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html_text, encoding="utf-8")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for mdhtml CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    parser = argparse.ArgumentParser(description="Convert markdown to HTML")
    parser.add_argument(
        "source",
        help="markdown file, JSON job file, directory, ZIP archive, or - for stdin",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="output directory or .html file (default: beside the source, "
        "stdout for stdin)",
    )
    parser.add_argument(
        "--wrap",
        action="store_true",
        help="wrap output in a complete HTML document",
    )
    parser.add_argument(
        "--default-style",
        action="store_true",
        help="embed the built-in stylesheet in wrapped documents",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="document title for wrapped output",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    output = Path(args.output) if args.output else None

    try:
        if args.source == "-":
            return _convert_stdin(output, args.wrap, args.default_style, args.title)

        # validates source path exists
        source_path = Path(args.source)
        if not source_path.exists():
            logger.error("Source not found: %s", args.source)
            return 2

        return convert_sources(
            source=source_path,
            output=output,
            wrap_with_html=args.wrap,
            default_style=args.default_style,
            title=args.title,
            quiet=args.quiet,
            progress=args.progress,
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Fatal error: %s", e)
        return 2

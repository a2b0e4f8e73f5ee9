"""Command-line front door for findword.

Parses flags into a ``SearchConfig``, validates the root path, runs the
search with console progress, and prints the report.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .config import SearchConfig, build_config
from .console import ConsolePresenter, default_rule_width, stream_supports_color
from .highlight import DEFAULT_STYLE
from .preview import render_previews
from .report import format_report
from .search import search
from .search.types import SearchResult
from .ui_theme import THEME_NAMES, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A simple app to search for a specific string in files of a given directory, recursively."
    )
    parser.add_argument("-p", "--path", default="", help="Modify the searched path (default: current directory).")
    parser.add_argument("-s", "--silent", action="store_true", help="Mute per-file and per-directory progress.")
    parser.add_argument("-f", "--find", default="", help="The string you are looking for.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Console theme name ({', '.join(THEME_NAMES)}).",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Report rule width (default: terminal width).",
    )
    parser.add_argument(
        "--max-depth",
        type=_nonnegative_int,
        default=None,
        help="Do not descend more than this many directory levels below the root.",
    )
    parser.add_argument("--jobs", type=_positive_int, default=1, help="Number of files scanned in parallel.")
    parser.add_argument("--show-lines", action="store_true", help="Print matching lines after the report.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for --show-lines.")
    parser.add_argument("--debug", action="store_true", help="Log diagnostics to stderr.")
    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_search(config: SearchConfig, presenter: ConsolePresenter, jobs: int = 1) -> tuple[SearchResult, float]:
    """Run the search and return ``(result, elapsed_ms)``."""
    started = time.perf_counter()
    result = search(config, presenter, jobs=jobs)
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    logger.debug(
        "searched %s: %d hits in %d files (%.1fms)",
        config.root_path,
        result.total_occurrences,
        result.matching_file_count,
        elapsed_ms,
    )
    return result, elapsed_ms


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and search the selected path.

    ``default_path`` is primarily for tests; when omitted the canonicalized
    current working directory is used. Exits with status 1 when the path
    does not exist.
    """
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(args.debug)

    config = build_config(
        args.path,
        silent=args.silent,
        search_term=args.find,
        max_depth=args.max_depth,
        cwd=default_path,
    )

    no_color = args.no_color or not stream_supports_color(sys.stdout)
    theme = resolve_theme(args.theme, no_color=no_color)
    presenter = ConsolePresenter(sys.stdout, theme)
    presenter.write_line(config.describe())

    if not config.root_path.exists():
        raise SystemExit(f"Please input a correct path: {config.root_path}")

    width = args.width if args.width is not None else default_rule_width()
    result, elapsed_ms = run_search(config, presenter, jobs=args.jobs)
    presenter.show_report(format_report(result, config, width=width))

    if args.show_lines and config.search_enabled and result:
        previews = render_previews(result, config.search_term, theme=theme, style=args.style, width=width)
        if previews:
            presenter.write_line(previews)

    if config.search_enabled:
        presenter.write_line(f"The search took {int(round(elapsed_ms))}ms")


if __name__ == "__main__":
    main()

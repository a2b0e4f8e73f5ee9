"""Matching-line previews shown after the report with ``--show-lines``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .ansi import clip_ansi_line, styled
from .highlight import DEFAULT_STYLE, highlight_lines, sanitize_terminal_text
from .search.scanner import read_file_text
from .search.types import SearchResult
from .ui_theme import PLAIN_THEME, UITheme

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINES_PER_FILE = 20


@dataclass(frozen=True)
class HitLine:
    path: Path
    line: int  # 1-based
    column: int  # 1-based
    preview: str


def _preview_line(text: str, max_chars: int = 220) -> str:
    clean = text.rstrip("\r\n").replace("\t", "    ")
    if len(clean) <= max_chars:
        return clean
    return clean[: max(1, max_chars - 3)] + "..."


def find_hit_lines(source: str, path: Path, term: str, max_lines: int = DEFAULT_MAX_LINES_PER_FILE) -> list[HitLine]:
    """Return up to ``max_lines`` lines of ``source`` containing ``term``."""
    if not term or max_lines <= 0:
        return []
    hits: list[HitLine] = []
    for idx, raw_line in enumerate(source.split("\n")):
        line = raw_line.rstrip("\r")
        column = line.find(term)
        if column < 0:
            continue
        hits.append(HitLine(path=path, line=idx + 1, column=column + 1, preview=_preview_line(line)))
        if len(hits) >= max_lines:
            break
    return hits


def render_file_preview(
    path: Path,
    term: str,
    *,
    theme: UITheme = PLAIN_THEME,
    style: str = DEFAULT_STYLE,
    width: int = 0,
    max_lines: int = DEFAULT_MAX_LINES_PER_FILE,
) -> list[str]:
    """Render ``path:line:column: text`` rows for each hit line in ``path``.

    Rows are syntax highlighted when ``theme`` carries colors and clipped
    to ``width`` columns when ``width`` is positive.
    """
    try:
        source = read_file_text(Path(path))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("no preview for %s: %s", path, exc)
        return []

    hits = find_hit_lines(source, Path(path), term, max_lines)
    if not hits:
        return []

    colored = bool(theme.reset)
    highlighted = highlight_lines(source, Path(path), style) if colored else []
    rows: list[str] = []
    for hit in hits:
        location = styled(f"{hit.path}:{hit.line}:{hit.column}:", theme.preview_location, theme.reset)
        if colored and hit.line - 1 < len(highlighted):
            text = highlighted[hit.line - 1].replace("\t", "    ")
        else:
            text = sanitize_terminal_text(hit.preview)
        row = f"{location} {text}"
        if width > 0:
            row = clip_ansi_line(row, width)
        if colored:
            row += theme.reset
        rows.append(row)
    return rows


def render_previews(
    result: SearchResult,
    term: str,
    *,
    theme: UITheme = PLAIN_THEME,
    style: str = DEFAULT_STYLE,
    width: int = 0,
    max_lines: int = DEFAULT_MAX_LINES_PER_FILE,
) -> str:
    """Render previews for every file in ``result``, in report order."""
    rows: list[str] = []
    for record in result.files:
        rows.extend(
            render_file_preview(
                record.path,
                term,
                theme=theme,
                style=style,
                width=width,
                max_lines=max_lines,
            )
        )
    return "\n".join(rows)


__all__ = [
    "DEFAULT_MAX_LINES_PER_FILE",
    "HitLine",
    "find_hit_lines",
    "render_file_preview",
    "render_previews",
]

"""Terminal-safe syntax highlighting for preview lines.

Highlights whole files with Pygments so multi-line tokens color correctly,
then hands back per-line output. Control bytes are escaped first so file
content cannot drive the terminal.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def _split_lines(text: str) -> list[str]:
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@lru_cache(maxsize=None)
def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Return ANSI-highlighted ``source`` using a lexer picked from ``path``."""
    try:
        lexer = get_lexer_for_filename(Path(path).name, source, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    formatter = _formatter_for_style(normalize_style(style))
    return pygments_highlight(source, lexer, formatter)


def highlight_lines(source: str, path: Path, style: str = DEFAULT_STYLE) -> list[str]:
    """Highlight ``source`` and split it into lines without trailing newlines.

    Lines break on ``\\n`` only, so index ``i`` is source line ``i + 1`` the same
    way ``preview.find_hit_lines`` numbers them. Falls back to plain lines
    when the highlighted output does not line up.
    """
    source = sanitize_terminal_text(source)
    plain_lines = _split_lines(source)
    if not plain_lines:
        return []
    rendered = _split_lines(colorize_source(source, path, style))
    if len(rendered) != len(plain_lines):
        return plain_lines
    return rendered


__all__ = [
    "DEFAULT_STYLE",
    "colorize_source",
    "highlight_lines",
    "normalize_style",
    "sanitize_terminal_text",
]

"""ANSI-aware text measurement and clipping.

Keeps preview rows inside the report width when color codes and wide
characters are present. Callers expand tabs before measuring.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def cell_width(ch: str) -> int:
    """Terminal cells used by ``ch``: 0 for combining marks, 2 for wide/fullwidth."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def visible_width(text: str) -> int:
    """Return display columns used by ``text`` ignoring escape sequences."""
    return sum(cell_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` after ``max_cols`` display columns, keeping every escape before the cut."""
    if max_cols <= 0:
        return ""

    kept: list[str] = []
    used = 0
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        segment = text[pos : match.start()]
        for ch in segment:
            used += cell_width(ch)
            if used > max_cols:
                return "".join(kept)
            kept.append(ch)
        kept.append(match.group(0))
        pos = match.end()
    for ch in text[pos:]:
        used += cell_width(ch)
        if used > max_cols:
            break
        kept.append(ch)
    return "".join(kept)


def styled(text: str, sgr: str, reset: str) -> str:
    """Wrap ``text`` in ``sgr``/``reset`` unless the style is empty."""
    if not sgr:
        return text
    return f"{sgr}{text}{reset}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "cell_width",
    "clip_ansi_line",
    "strip_ansi",
    "styled",
    "visible_width",
]

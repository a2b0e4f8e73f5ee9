"""Console theme definitions and selection helpers.

Themes are ANSI palettes for notices and the report chrome. Syntax
highlighting style for preview lines remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass

from .search.events import NoticeLevel


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the console presenter."""

    name: str
    reset: str
    notice_info: str
    notice_progress: str
    notice_warning: str
    notice_error: str
    report_rule: str
    report_count: str
    report_path: str
    report_summary: str
    preview_location: str

    def color_for_level(self, level: NoticeLevel) -> str:
        if level is NoticeLevel.INFO:
            return self.notice_info
        if level is NoticeLevel.PROGRESS:
            return self.notice_progress
        if level is NoticeLevel.WARNING:
            return self.notice_warning
        return self.notice_error


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    notice_info="\033[35m",
    notice_progress="\033[36m",
    notice_warning="\033[31m",
    notice_error="\033[1;31m",
    report_rule="\033[2m",
    report_count="\033[1;33m",
    report_path="\033[38;5;252m",
    report_summary="\033[1;32m",
    preview_location="\033[38;5;44m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    notice_info="\033[38;5;39m",
    notice_progress="\033[38;5;117m",
    notice_warning="\033[38;5;215m",
    notice_error="\033[1;38;5;203m",
    report_rule="\033[2;38;5;31m",
    report_count="\033[1;38;5;45m",
    report_path="\033[38;5;153m",
    report_summary="\033[1;38;5;84m",
    preview_location="\033[38;5;73m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    notice_info="",
    notice_progress="",
    notice_warning="",
    notice_error="",
    report_rule="",
    report_count="",
    report_path="",
    report_summary="",
    preview_location="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


THEME_NAMES: tuple[str, ...] = tuple(sorted(_THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the palette for ``name``; unknown names get the default theme."""
    if no_color:
        return PLAIN_THEME
    key = (name or "").strip().lower()
    return _THEMES.get(key, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "THEME_NAMES",
    "resolve_theme",
]

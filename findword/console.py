"""Console presentation of notices and the final report.

``ConsolePresenter`` is a notice sink: pass it to the search core and each
notice is written on its own line, colored per level. Thread-safe so the
parallel scanner can report from worker threads.
"""

from __future__ import annotations

import shutil
import sys
import threading
from typing import TextIO

from .ansi import styled
from .report import DEFAULT_RULE_WIDTH, RULE_CHAR
from .search.events import Notice
from .ui_theme import PLAIN_THEME, UITheme


def default_rule_width() -> int:
    """Resolve the report rule width from the current terminal size."""
    term = shutil.get_terminal_size((DEFAULT_RULE_WIDTH, 24))
    if term.columns <= 0:
        return DEFAULT_RULE_WIDTH
    return term.columns


def stream_supports_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


class ConsolePresenter:
    def __init__(self, stream: TextIO | None = None, theme: UITheme = PLAIN_THEME) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.theme = theme
        self._lock = threading.Lock()

    def write_line(self, text: str = "") -> None:
        with self._lock:
            self.stream.write(text + "\n")
            self.stream.flush()

    def __call__(self, notice: Notice) -> None:
        self.write_line(styled(notice.message, self.theme.color_for_level(notice.level), self.theme.reset))

    def style_report_line(self, line: str) -> str:
        """Color one plain report line by its role (rule, hit, summary)."""
        theme = self.theme
        if not theme.reset or not line:
            return line
        if line == RULE_CHAR * len(line):
            return styled(line, theme.report_rule, theme.reset)
        if line.startswith("Keyword: "):
            return styled(line, theme.report_summary, theme.reset)
        if line.startswith("found: ") and " in: " in line:
            head, _sep, path = line.partition(" in: ")
            label, _space, count_and_unit = head.partition(" ")
            return (
                f"{label} {styled(count_and_unit, theme.report_count, theme.reset)}"
                f" in: {styled(path, theme.report_path, theme.reset)}"
            )
        return line

    def show_report(self, report: str) -> None:
        for line in report.split("\n"):
            self.write_line(self.style_report_line(line))


__all__ = [
    "ConsolePresenter",
    "default_rule_width",
    "stream_supports_color",
]

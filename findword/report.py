"""Plain-text report rendering for aggregated search results.

Pure formatting: no I/O and no color. The console presenter styles the
returned text separately.
"""

from __future__ import annotations

from .config import SearchConfig
from .search.types import FileRecord, SearchResult

DEFAULT_RULE_WIDTH = 60
RULE_CHAR = "="
COUNT_FIELD_WIDTH = 3


def pluralize_times(count: int) -> str:
    return "time" if count == 1 else "times"


def format_count_field(count: int) -> str:
    """Return ``count`` left-justified so the unit word starts at column 3.

    Counts shorter than three digits are space padded; longer counts keep a
    single separating space.
    """
    text = str(count)
    if len(text) < COUNT_FIELD_WIDTH:
        return text.ljust(COUNT_FIELD_WIDTH)
    return text + " "


def format_record_line(record: FileRecord) -> str:
    count = record.occurrence_count
    return f"found: {format_count_field(count)}{pluralize_times(count)} in: {record.path}"


def format_summary_line(result: SearchResult, config: SearchConfig) -> str:
    total = result.total_occurrences
    return (
        f"Keyword: '{config.search_term}' found {total} {pluralize_times(total)} "
        f"in {result.matching_file_count} files"
    )


def format_report(result: SearchResult, config: SearchConfig, width: int = DEFAULT_RULE_WIDTH) -> str:
    """Render ``result`` between two rules, plus a summary when searching.

    Non-positive ``width`` falls back to :data:`DEFAULT_RULE_WIDTH`.
    """
    if width <= 0:
        width = DEFAULT_RULE_WIDTH
    rule = RULE_CHAR * width
    lines = [rule]
    lines.extend(format_record_line(record) for record in result.files)
    lines.append(rule)
    if config.search_enabled:
        lines.append(format_summary_line(result, config))
    return "\n".join(lines)


__all__ = [
    "DEFAULT_RULE_WIDTH",
    "format_count_field",
    "format_record_line",
    "format_report",
    "format_summary_line",
    "pluralize_times",
]

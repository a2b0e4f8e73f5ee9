"""Per-file keyword counting."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import SearchConfig
from .events import NoticeSink, file_notice, null_sink, read_error_notice
from .types import FileRecord, SearchResult

logger = logging.getLogger(__name__)


def count_occurrences(content: str, term: str) -> int:
    """Count non-overlapping occurrences of ``term`` scanning left to right.

    An empty ``term`` counts as zero rather than matching everywhere.
    """
    if not term:
        return 0
    return content.count(term)


def read_file_text(path: Path) -> str:
    """Read ``path`` as strict UTF-8 text, accepting a leading BOM.

    Raises ``OSError`` or ``UnicodeDecodeError`` when the file cannot be read
    as text.
    """
    with path.open("r", encoding="utf-8-sig", errors="strict") as handle:
        return handle.read()


def scan_file(path: Path, config: SearchConfig, notify: NoticeSink = null_sink) -> SearchResult:
    """Scan one file and return a result holding it only if it has hits.

    Read failures are reported through ``notify`` and yield an empty result.
    """
    path = Path(path)
    if not config.silent:
        notify(file_notice(path))

    try:
        content = read_file_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("skipping unreadable file %s: %s", path, exc)
        if not config.silent:
            notify(read_error_notice(path, exc))
        return SearchResult()

    if not config.search_enabled:
        return SearchResult()
    record = FileRecord(path=path, occurrence_count=count_occurrences(content, config.search_term))
    return SearchResult.from_record(record)


__all__ = [
    "count_occurrences",
    "read_file_text",
    "scan_file",
]

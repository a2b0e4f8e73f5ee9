"""Traversal-and-search engine.

Combines the extension filter, per-file scanner, recursive walker, and
result types in one import surface.
"""

from __future__ import annotations

from .events import (
    Notice,
    NoticeLevel,
    NoticeSink,
    null_sink,
)
from .extensions import HANDLED_EXTENSIONS, file_extension, is_eligible
from .scanner import count_occurrences, read_file_text, scan_file
from .types import FileRecord, SearchResult, merge_results
from .walker import search, walk_directory

__all__ = [
    "FileRecord",
    "HANDLED_EXTENSIONS",
    "Notice",
    "NoticeLevel",
    "NoticeSink",
    "SearchResult",
    "count_occurrences",
    "file_extension",
    "is_eligible",
    "merge_results",
    "null_sink",
    "read_file_text",
    "scan_file",
    "search",
    "walk_directory",
]

"""Progress notices emitted by the traversal core.

The core never prints. It reports what it is doing to an optional sink so
callers (the console presenter, tests) decide how to surface it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class NoticeLevel(Enum):
    INFO = "info"
    PROGRESS = "progress"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    message: str
    path: Path | None = None


NoticeSink = Callable[[Notice], None]


def null_sink(_notice: Notice) -> None:
    """Discard ``_notice``."""
    return None


def directory_notice(path: Path) -> Notice:
    return Notice(NoticeLevel.INFO, f"Searching in dir: {path}", path)


def file_notice(path: Path) -> Notice:
    return Notice(NoticeLevel.PROGRESS, f"Searching in file: {path}", path)


def bad_extension_notice(path: Path, extension: str) -> Notice:
    return Notice(
        NoticeLevel.WARNING,
        f"Skipped file — bad extension: '{path.name}: {extension}'",
        path,
    )


def read_error_notice(path: Path, error: BaseException) -> Notice:
    return Notice(
        NoticeLevel.ERROR,
        f"Got an error reading the file: {path}\nError: {error}",
        path,
    )


__all__ = [
    "NoticeLevel",
    "Notice",
    "NoticeSink",
    "null_sink",
    "directory_notice",
    "file_notice",
    "bad_extension_notice",
    "read_error_notice",
]

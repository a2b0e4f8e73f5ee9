"""Recursive directory traversal feeding the per-file scanner.

Entries are visited in filesystem enumeration order (not sorted) and child
results are concatenated in that order. Symlinks are neither followed nor
scanned, so the walk cannot loop through a symlink cycle.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path

from ..config import SearchConfig
from .events import NoticeSink, bad_extension_notice, directory_notice, null_sink
from .extensions import file_extension, is_eligible
from .scanner import scan_file
from .types import SearchResult, merge_results

logger = logging.getLogger(__name__)

_Part = SearchResult | Future


def _list_entries(directory: Path) -> list[os.DirEntry] | None:
    """Return immediate entries of ``directory`` or ``None`` when unreadable."""
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except OSError as exc:
        logger.debug("cannot enumerate %s: %s", directory, exc)
        return None


def _entry_kind(entry: os.DirEntry) -> str:
    """Classify ``entry`` as ``dir``, ``file`` or ``other`` without following symlinks."""
    try:
        if entry.is_symlink():
            return "other"
        if entry.is_dir(follow_symlinks=False):
            return "dir"
        if entry.is_file(follow_symlinks=False):
            return "file"
    except OSError:
        pass
    return "other"


def _resolve_parts(parts: list[_Part]) -> SearchResult:
    return merge_results(*(part.result() if isinstance(part, Future) else part for part in parts))


def walk_directory(
    path: Path,
    config: SearchConfig,
    notify: NoticeSink = null_sink,
    *,
    executor: Executor | None = None,
    depth: int = 0,
) -> SearchResult:
    """Recursively search ``path`` and return every matching file beneath it.

    A directory that cannot be enumerated contributes an empty result. When
    ``executor`` is given, eligible files are scanned on it while enumeration
    stays on the calling thread; results are still merged in discovery order.
    """
    path = Path(path)
    if not config.silent:
        notify(directory_notice(path))

    entries = _list_entries(path)
    if entries is None:
        return SearchResult()

    parts: list[_Part] = []
    for entry in entries:
        child = Path(entry.path)
        kind = _entry_kind(entry)
        if kind == "dir":
            if config.max_depth is not None and depth >= config.max_depth:
                logger.debug("depth limit %d reached at %s", config.max_depth, child)
                continue
            parts.append(walk_directory(child, config, notify, executor=executor, depth=depth + 1))
        elif kind == "file":
            if is_eligible(child):
                if executor is not None:
                    parts.append(executor.submit(scan_file, child, config, notify))
                else:
                    parts.append(scan_file(child, config, notify))
            elif not config.silent:
                notify(bad_extension_notice(child, file_extension(child)))

    return _resolve_parts(parts)


def search(config: SearchConfig, notify: NoticeSink = null_sink, jobs: int = 1) -> SearchResult:
    """Search ``config.root_path`` and return the aggregated result.

    Directories go through :func:`walk_directory`. A file root is filtered
    and scanned directly. ``jobs`` greater than one scans files on a thread
    pool; notice order between files is then not deterministic.
    """
    root = Path(config.root_path)
    if root.is_file():
        if is_eligible(root):
            return scan_file(root, config, notify)
        if not config.silent:
            notify(bad_extension_notice(root, file_extension(root)))
        return SearchResult()

    if jobs <= 1:
        return walk_directory(root, config, notify)
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        return walk_directory(root, config, notify, executor=executor)


__all__ = [
    "walk_directory",
    "search",
]

"""Domain datatypes for keyword search results.

Results are immutable values composed bottom-up: each scanned file yields
at most one record, each directory concatenates its children's results.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """One scanned file with its non-overlapping keyword occurrence count."""

    path: Path
    occurrence_count: int = 0


@dataclass(frozen=True)
class SearchResult:
    """Ordered collection of matching files, in discovery order."""

    files: tuple[FileRecord, ...] = ()

    @classmethod
    def from_record(cls, record: FileRecord) -> "SearchResult":
        """Wrap ``record`` only when it holds at least one occurrence."""
        if record.occurrence_count > 0:
            return cls(files=(record,))
        return cls()

    def merge(self, other: "SearchResult") -> "SearchResult":
        """Return ``self`` followed by ``other``; no deduplication."""
        if not other.files:
            return self
        if not self.files:
            return other
        return SearchResult(files=self.files + other.files)

    @property
    def total_occurrences(self) -> int:
        return sum(record.occurrence_count for record in self.files)

    @property
    def matching_file_count(self) -> int:
        return len(self.files)

    def __bool__(self) -> bool:
        return bool(self.files)


def merge_results(*results: SearchResult) -> SearchResult:
    """Fold ``results`` left to right with :meth:`SearchResult.merge`."""
    merged = SearchResult()
    for result in results:
        merged = merged.merge(result)
    return merged


__all__ = [
    "FileRecord",
    "SearchResult",
    "merge_results",
]

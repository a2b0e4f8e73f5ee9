"""Per-run search configuration.

Built once from command-line flags, normalized, then threaded read-only
through the traversal alongside each visited path.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True)
class SearchConfig:
    """Immutable search options for one run."""

    root_path: Path
    silent: bool = False
    search_term: str = ""
    max_depth: int | None = None

    @property
    def search_enabled(self) -> bool:
        return self.search_term != ""

    def normalized(self, cwd: Path | None = None) -> "SearchConfig":
        """Return a copy whose empty root path becomes the canonical cwd.

        Explicit paths are kept as given; only the implicit default is
        resolved.
        """
        raw = str(self.root_path) if self.root_path is not None else ""
        if raw in ("", "."):
            base = cwd if cwd is not None else Path.cwd()
            return replace(self, root_path=base.resolve())
        return replace(self, root_path=Path(raw))

    def describe(self) -> str:
        """Return the human-readable run summary printed before searching."""
        lines = [f"Selected path is: {self.root_path}"]
        lines.append("Silent mode is on." if self.silent else "Silent mode is off.")
        if self.search_enabled:
            lines.append(f"Search system will track: '{self.search_term}'.")
        else:
            lines.append("Search system is deactivated.")
        if self.max_depth is not None:
            lines.append(f"Maximum depth is: {self.max_depth}.")
        return "\n".join(lines)


def build_config(
    path: str | Path | None,
    *,
    silent: bool = False,
    search_term: str | None = None,
    max_depth: int | None = None,
    cwd: Path | None = None,
) -> SearchConfig:
    """Build a normalized config from raw flag values."""
    config = SearchConfig(
        root_path=Path(path) if path else Path(""),
        silent=bool(silent),
        search_term=search_term or "",
        max_depth=max_depth,
    )
    return config.normalized(cwd=cwd)


__all__ = [
    "SearchConfig",
    "build_config",
]

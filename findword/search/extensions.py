"""Extension allow-list deciding which files are scanned."""

from __future__ import annotations

from pathlib import Path

HANDLED_EXTENSIONS: frozenset[str] = frozenset(
    {"txt", "py", "pyw", "c", "cpp", "rs", "bat", "cmd", "toml", "md", "log", "cs"}
)


def file_extension(path: Path | str) -> str:
    """Return text after the last ``.`` of the final path component.

    Names without a dot yield ``""``. Leading-dot names such as ``.bashrc``
    have no extension, matching ``Path.suffix``.
    """
    suffix = Path(path).suffix
    return suffix[1:] if suffix else ""


def is_eligible(path: Path | str, allowed: frozenset[str] = HANDLED_EXTENSIONS) -> bool:
    """Return whether ``path`` has a case-sensitive extension in ``allowed``."""
    extension = file_extension(path)
    if not extension:
        return False
    return extension in allowed


__all__ = [
    "HANDLED_EXTENSIONS",
    "file_extension",
    "is_eligible",
]

"""Path normalization helpers shared by rule matching and walking."""

from __future__ import annotations

import re
from typing import Final

WINDOWS_DRIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z]:/")


def to_posix_path(candidate: str) -> str:
    """Convert backslash separators to forward slashes.

    Rule matching is defined only over forward-slash paths, so every
    relative path must pass through here before it is matched.
    """
    return candidate.replace("\\", "/")


def normalize_relative_path(candidate: str) -> str:
    """Normalize a collection-relative path for matching.

    Separators become forward slashes, repeated slashes collapse, and any
    leading ``./`` or ``/`` is dropped. A trailing slash is preserved
    because it marks a directory.
    """
    normalized = to_posix_path(candidate).strip()
    if WINDOWS_DRIVE_PATTERN.match(normalized):
        normalized = normalized[3:]
    while "//" in normalized:
        normalized = normalized.replace("//", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.lstrip("/")


def is_hidden_path(relative_path: str) -> bool:
    """Return True when any component other than '.' or '..' starts with a dot."""
    parts = to_posix_path(relative_path).split("/")
    return any(part.startswith(".") and part not in (".", "..") for part in parts)

"""Baseline snapshot persistence."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from refrepo.logging import utc_timestamp

BASELINE_FILENAME = ".refrepo-baseline.json"


@dataclass(slots=True, frozen=True)
class Baseline:
    """Snapshot of the file paths included by the last successful index run."""

    timestamp: str
    file_count: int
    files: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "timestamp": self.timestamp,
            "fileCount": self.file_count,
            "files": list(self.files),
        }

    @classmethod
    def from_dict(cls, payload: object) -> Baseline | None:
        """Parse a stored payload, returning None when its shape is invalid."""
        if not isinstance(payload, dict):
            return None
        timestamp = payload.get("timestamp")
        files = payload.get("files")
        if not isinstance(timestamp, str):
            return None
        if not isinstance(files, list) or not all(isinstance(item, str) for item in files):
            return None
        file_count = payload.get("fileCount", len(files))
        if not isinstance(file_count, int) or isinstance(file_count, bool):
            return None
        return cls(timestamp=timestamp, file_count=file_count, files=tuple(files))


class BaselineStore:
    """Reads and overwrites the baseline file in a data directory."""

    def __init__(self, data_dir: Path) -> None:
        self._path = data_dir.resolve() / BASELINE_FILENAME

    @property
    def path(self) -> Path:
        """Return on-disk baseline path."""
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> Baseline | None:
        """Load the baseline; a missing, unreadable or malformed file counts as absent."""
        if not self._path.exists():
            return None
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return None
        return Baseline.from_dict(payload)

    def save(self, files: Iterable[str], timestamp: str | None = None) -> Baseline:
        """Overwrite the baseline with a sorted snapshot of ``files``."""
        ordered = sorted(files)
        baseline = Baseline(
            timestamp=timestamp or utc_timestamp(),
            file_count=len(ordered),
            files=tuple(ordered),
        )
        atomic_write_json(self._path, baseline.to_dict())
        return baseline


def atomic_write_json(path: Path, payload: dict[str, object]) -> None:
    """Write pretty-printed JSON through a temp file and rename."""
    atomic_write_text(path, json.dumps(payload, indent=2) + "\n")


def atomic_write_text(path: Path, text: str) -> None:
    """Write text through a sibling temp file and rename it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    tmp.replace(path)

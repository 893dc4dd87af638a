"""Changes record derived from a plan and the stored baseline."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from refrepo.baseline.diff import DiffResult, diff_against_baseline
from refrepo.baseline.store import Baseline, atomic_write_json
from refrepo.logging import utc_timestamp

CHANGES_FILENAME = ".refrepo-changes.json"
NO_BASELINE_DATE = "none"


@dataclass(slots=True, frozen=True)
class ChangesRecord:
    """What changed since the last index, as read by the suggestion workflow."""

    timestamp: str
    baseline_date: str
    total_files: int
    new_files: tuple[str, ...]
    removed_files: tuple[str, ...]

    @property
    def has_changes(self) -> bool:
        return bool(self.new_files or self.removed_files)

    def to_dict(self) -> dict[str, object]:
        return {
            "timestamp": self.timestamp,
            "baselineDate": self.baseline_date,
            "totalFiles": self.total_files,
            "newFiles": list(self.new_files),
            "removedFiles": list(self.removed_files),
            "hasChanges": self.has_changes,
        }


def build_changes_record(
    current_files: Sequence[str],
    total_files: int,
    baseline: Baseline | None,
    diff: DiffResult | None = None,
    timestamp: str | None = None,
) -> ChangesRecord:
    """Build the changes record; without a baseline every current file is new."""
    if baseline is None:
        return ChangesRecord(
            timestamp=timestamp or utc_timestamp(),
            baseline_date=NO_BASELINE_DATE,
            total_files=total_files,
            new_files=tuple(current_files),
            removed_files=(),
        )
    if diff is None:
        diff = diff_against_baseline(current_files, baseline)
    return ChangesRecord(
        timestamp=timestamp or utc_timestamp(),
        baseline_date=baseline.timestamp,
        total_files=total_files,
        new_files=diff.new_files,
        removed_files=diff.removed_files,
    )


def write_changes_record(data_dir: Path, record: ChangesRecord) -> Path:
    """Overwrite the changes record in ``data_dir`` and return its path."""
    path = data_dir.resolve() / CHANGES_FILENAME
    atomic_write_json(path, record.to_dict())
    return path

"""Baseline snapshots and change detection between planning runs."""

from .changes import (
    CHANGES_FILENAME,
    NO_BASELINE_DATE,
    ChangesRecord,
    build_changes_record,
    write_changes_record,
)
from .diff import DiffResult, diff_against_baseline
from .store import BASELINE_FILENAME, Baseline, BaselineStore, atomic_write_json, atomic_write_text

__all__ = [
    "BASELINE_FILENAME",
    "Baseline",
    "BaselineStore",
    "CHANGES_FILENAME",
    "ChangesRecord",
    "DiffResult",
    "NO_BASELINE_DATE",
    "atomic_write_json",
    "atomic_write_text",
    "build_changes_record",
    "diff_against_baseline",
    "write_changes_record",
]

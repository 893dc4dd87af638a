"""Set difference between a current walk and a stored baseline."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from refrepo.baseline.store import Baseline


@dataclass(slots=True, frozen=True)
class DiffResult:
    """Files added and removed since the baseline, each sorted ascending."""

    new_files: tuple[str, ...]
    removed_files: tuple[str, ...]

    @property
    def has_changes(self) -> bool:
        return bool(self.new_files or self.removed_files)

    def to_dict(self) -> dict[str, object]:
        return {"newFiles": list(self.new_files), "removedFiles": list(self.removed_files)}


def diff_against_baseline(current_files: Iterable[str], baseline: Baseline) -> DiffResult:
    """Compute deterministic new/removed sets; duplicates on either side collapse.

    Only call this when a baseline exists. The first-run policy (everything
    is new) belongs to the caller.
    """
    current = set(current_files)
    previous = set(baseline.files)
    return DiffResult(
        new_files=tuple(sorted(current - previous)),
        removed_files=tuple(sorted(previous - current)),
    )

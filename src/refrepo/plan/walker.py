"""Deterministic collection walking against a compiled rule set."""

from __future__ import annotations

import os
import time
from dataclasses import asdict, dataclass
from pathlib import Path

from refrepo.plan.models import FileRecord
from refrepo.rules import RuleSet, is_hidden_path


@dataclass(slots=True, frozen=True)
class WalkProfile:
    """Deterministic diagnostics for one walk."""

    directories_scanned: int
    excluded_hidden: int
    excluded_by_rule: int
    excluded_by_size: int
    skipped_unreadable: int
    included_files: int
    total_seconds: float


def walk_collection(
    root: Path,
    rule_set: RuleSet,
    max_file_size_bytes: int,
    profile: dict[str, object] | None = None,
) -> list[FileRecord]:
    """Return included files under ``root`` sorted by relative path.

    Hidden entries are dropped before the rules are consulted, and excluded
    directories are never descended into. A missing root yields an empty
    list; unreadable entries are skipped one at a time. Symlinks are not
    followed.
    """
    started = time.perf_counter()
    directories_scanned = 0
    excluded_hidden = 0
    excluded_by_rule = 0
    excluded_by_size = 0
    skipped_unreadable = 0
    records: list[FileRecord] = []

    if root.is_dir():
        stack: list[tuple[Path, str]] = [(root, "")]
        while stack:
            current, rel_dir = stack.pop()
            try:
                with os.scandir(current) as entries:
                    ordered_entries = sorted(entries, key=lambda item: item.name)
            except OSError:
                skipped_unreadable += 1
                continue
            directories_scanned += 1
            subdirs: list[tuple[Path, str]] = []
            for entry in ordered_entries:
                relative = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
                if is_hidden_path(relative):
                    excluded_hidden += 1
                    continue
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = not is_dir and entry.is_file(follow_symlinks=False)
                except OSError:
                    skipped_unreadable += 1
                    continue
                if is_dir:
                    if rule_set.is_excluded(relative, is_dir=True):
                        excluded_by_rule += 1
                        continue
                    subdirs.append((Path(entry.path), relative))
                    continue
                if not is_file:
                    continue
                if rule_set.is_excluded(relative):
                    excluded_by_rule += 1
                    continue
                try:
                    size = entry.stat(follow_symlinks=False).st_size
                except OSError:
                    skipped_unreadable += 1
                    continue
                if size > max_file_size_bytes:
                    excluded_by_size += 1
                    continue
                records.append(FileRecord(relative_path=relative, size_bytes=size))
            stack.extend(reversed(subdirs))

    records.sort(key=lambda item: item.relative_path)
    if profile is not None:
        payload = WalkProfile(
            directories_scanned=directories_scanned,
            excluded_hidden=excluded_hidden,
            excluded_by_rule=excluded_by_rule,
            excluded_by_size=excluded_by_size,
            skipped_unreadable=skipped_unreadable,
            included_files=len(records),
            total_seconds=time.perf_counter() - started,
        )
        profile.update(asdict(payload))
    return records

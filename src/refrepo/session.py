"""Planning session: plan, compare to baseline, write ignore files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from refrepo.baseline import (
    Baseline,
    BaselineStore,
    ChangesRecord,
    DiffResult,
    atomic_write_text,
    build_changes_record,
    diff_against_baseline,
    write_changes_record,
)
from refrepo.config import ConfigOverrides, PlannerConfig, load_effective_config
from refrepo.logging import (
    AUDIT_FILENAME,
    AuditEvent,
    JsonlAuditLogger,
    sanitize_metadata,
    utc_timestamp,
)
from refrepo.plan import (
    CollectionTarget,
    PlanSummary,
    compile_collection_rules,
    compute_plan,
)
from refrepo.rules import to_posix_path

IGNORE_FILENAME = ".mgrepignore"


@dataclass(slots=True, frozen=True)
class PlanReport:
    """Plan summary together with its baseline comparison."""

    summary: PlanSummary
    baseline: Baseline | None
    diff: DiffResult | None
    changes: ChangesRecord
    changes_path: Path

    def to_dict(self, include_files: bool = False) -> dict[str, object]:
        payload = self.summary.to_dict(include_files=include_files)
        if self.baseline is not None and self.diff is not None:
            payload["baselineComparison"] = {
                "baselineDate": self.baseline.timestamp,
                **self.diff.to_dict(),
            }
        return payload


@dataclass(slots=True, frozen=True)
class IgnoreFileResult:
    """Outcome of rendering one collection's ignore file."""

    collection_id: str
    name: str
    path: Path
    rule_count: int
    written: bool


@dataclass(slots=True, frozen=True)
class IgnoreBuildSummary:
    """Outcome of rendering every collection's ignore file."""

    results: tuple[IgnoreFileResult, ...]
    total_rules: int
    files_written: int
    dry_run: bool


@dataclass(slots=True, frozen=True)
class SessionStatus:
    """Baseline state for the configured data directory."""

    has_baseline: bool
    baseline_timestamp: str | None
    baseline_file_count: int
    collection_count: int


class PlanningSession:
    """Runs planning operations for a fixed set of collections under one root."""

    def __init__(
        self,
        config: PlannerConfig,
        targets: Iterable[CollectionTarget],
        max_workers: int = 1,
    ) -> None:
        self._config = config
        self._targets = tuple(targets)
        seen: set[str] = set()
        for target in self._targets:
            if target.collection_id in seen:
                raise ValueError(f"Duplicate collection id: {target.collection_id}")
            seen.add(target.collection_id)
        self._max_workers = max_workers
        self._baseline_store = BaselineStore(config.data_dir)
        self._audit_logger = JsonlAuditLogger(path=config.data_dir / AUDIT_FILENAME)
        self._run_counter = 0

    @property
    def config(self) -> PlannerConfig:
        return self._config

    @property
    def baseline_store(self) -> BaselineStore:
        return self._baseline_store

    @property
    def audit_logger(self) -> JsonlAuditLogger:
        return self._audit_logger

    def plan(self, collection_id: str | None = None) -> PlanReport:
        """Compute the plan, diff it against the baseline, and write the changes record."""
        run_id = self.next_run_id()
        try:
            summary = compute_plan(
                self._targets,
                self._config,
                collection_id=collection_id,
                max_workers=self._max_workers,
            )
        except ValueError as error:
            self.log_operation(
                run_id,
                "plan",
                ok=False,
                error=str(error),
                metadata={"collection_id": collection_id},
            )
            raise

        baseline = self._baseline_store.load()
        diff: DiffResult | None = None
        if baseline is not None:
            diff = diff_against_baseline(summary.all_files, baseline)
        changes = build_changes_record(
            summary.all_files,
            total_files=summary.totals.included_file_count,
            baseline=baseline,
            diff=diff,
        )
        changes_path = write_changes_record(self._config.data_dir, changes)
        self.log_operation(
            run_id,
            "plan",
            ok=True,
            metadata={
                "collection_id": collection_id,
                "collection_count": summary.totals.collection_count,
                "included_file_count": summary.totals.included_file_count,
                "included_total_bytes": summary.totals.included_total_bytes,
                "warning_level": summary.overall_warning_level,
                "has_baseline": baseline is not None,
                "new_files": changes.new_files,
                "removed_files": changes.removed_files,
            },
        )
        return PlanReport(
            summary=summary,
            baseline=baseline,
            diff=diff,
            changes=changes,
            changes_path=changes_path,
        )

    def record_successful_index(self, summary: PlanSummary) -> Baseline:
        """Overwrite the baseline after the external indexer finished successfully."""
        run_id = self.next_run_id()
        baseline = self._baseline_store.save(summary.all_files)
        self.log_operation(
            run_id,
            "save_baseline",
            ok=True,
            metadata={"file_count": baseline.file_count},
        )
        return baseline

    def build_ignore_files(self, dry_run: bool = False) -> IgnoreBuildSummary:
        """Render each checked-out collection's rule set into its ignore file."""
        run_id = self.next_run_id()
        results: list[IgnoreFileResult] = []
        for target in self._targets:
            rule_set = compile_collection_rules(target, self._config)
            collection_root = self._config.root / to_posix_path(target.local_dir).rstrip("/")
            path = collection_root / IGNORE_FILENAME
            written = False
            if collection_root.is_dir() and not dry_run:
                atomic_write_text(path, rule_set.to_text())
                written = True
            results.append(
                IgnoreFileResult(
                    collection_id=target.collection_id,
                    name=target.name,
                    path=path,
                    rule_count=rule_set.rule_count,
                    written=written,
                )
            )
        summary = IgnoreBuildSummary(
            results=tuple(results),
            total_rules=sum(result.rule_count for result in results),
            files_written=sum(1 for result in results if result.written),
            dry_run=dry_run,
        )
        self.log_operation(
            run_id,
            "build_ignore",
            ok=True,
            metadata={
                "dry_run": dry_run,
                "collection_count": len(results),
                "total_rules": summary.total_rules,
                "files_written": summary.files_written,
            },
        )
        return summary

    def status(self) -> SessionStatus:
        """Return baseline presence and size."""
        baseline = self._baseline_store.load()
        return SessionStatus(
            has_baseline=baseline is not None,
            baseline_timestamp=baseline.timestamp if baseline is not None else None,
            baseline_file_count=baseline.file_count if baseline is not None else 0,
            collection_count=len(self._targets),
        )

    def next_run_id(self) -> str:
        """Generate deterministic run IDs within a session."""
        self._run_counter += 1
        return f"run-{self._run_counter:06d}"

    def log_operation(
        self,
        run_id: str,
        operation: str,
        ok: bool,
        metadata: dict[str, object],
        error: str | None = None,
    ) -> None:
        """Log one sanitized operation event."""
        event = AuditEvent(
            timestamp=utc_timestamp(),
            run_id=run_id,
            operation=operation,
            ok=ok,
            error=error,
            metadata=sanitize_metadata(metadata),
        )
        self._audit_logger.append(event)


def create_session(
    targets: Iterable[CollectionTarget],
    root: str | Path | None = None,
    overrides: ConfigOverrides | None = None,
    max_workers: int = 1,
) -> PlanningSession:
    """Create a session from the effective configuration for ``root``."""
    config = load_effective_config(root, overrides)
    return PlanningSession(config=config, targets=targets, max_workers=max_workers)

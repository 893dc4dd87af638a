"""Per-collection and overall index planning."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from refrepo.config import PlannerConfig
from refrepo.plan.aggregate import aggregate_plan, not_cloned_result, worst_warning_level
from refrepo.plan.models import CollectionPlan, CollectionTarget, PlanSummary, PlanTotals
from refrepo.plan.walker import walk_collection
from refrepo.rules import RuleSet, compile_rule_set, to_posix_path


def compile_collection_rules(target: CollectionTarget, config: PlannerConfig) -> RuleSet:
    """Compile the rule set a collection is planned against."""
    return compile_rule_set(
        target.collection_id,
        overrides=config.ignore.collections,
        custom_patterns=config.ignore.custom_patterns,
    )


def plan_collection(
    target: CollectionTarget,
    config: PlannerConfig,
    profile: dict[str, object] | None = None,
) -> CollectionPlan:
    """Plan one collection; a collection that is not checked out plans as empty."""
    local_dir = to_posix_path(target.local_dir).rstrip("/")
    root_path = config.root / local_dir
    if not root_path.is_dir():
        return CollectionPlan(
            target=target,
            root_path=root_path,
            cloned=False,
            result=not_cloned_result(),
            files=(),
        )

    rule_set = compile_collection_rules(target, config)
    max_file_size_bytes = target.max_file_size_bytes or config.max_file_size_bytes
    records = walk_collection(root_path, rule_set, max_file_size_bytes, profile=profile)
    return CollectionPlan(
        target=target,
        root_path=root_path,
        cloned=True,
        result=aggregate_plan(records, config.thresholds),
        files=tuple(f"{local_dir}/{record.relative_path}" for record in records),
    )


def compute_plan(
    targets: Iterable[CollectionTarget],
    config: PlannerConfig,
    collection_id: str | None = None,
    max_workers: int = 1,
) -> PlanSummary:
    """Plan every target, or only ``collection_id``, preserving input order.

    With ``max_workers > 1`` independent collections are planned on a
    thread pool; each plan reads only its own root and rule set, so the
    result is identical to the sequential run.
    """
    if not isinstance(max_workers, int) or isinstance(max_workers, bool) or max_workers < 1:
        raise ValueError("max_workers must be a positive integer.")
    selected = list(targets)
    if collection_id is not None:
        selected = [target for target in selected if target.collection_id == collection_id]
        if not selected:
            raise ValueError(f"Repo not found: {collection_id}")

    if max_workers == 1 or len(selected) < 2:
        plans = [plan_collection(target, config) for target in selected]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            plans = list(executor.map(lambda target: plan_collection(target, config), selected))
    return summarize_plans(plans)


def summarize_plans(plans: Sequence[CollectionPlan]) -> PlanSummary:
    """Sum per-collection totals and take the worst warning level."""
    all_files: list[str] = []
    for plan in plans:
        all_files.extend(plan.files)
    return PlanSummary(
        collections=tuple(plans),
        totals=PlanTotals(
            included_file_count=sum(plan.result.included_file_count for plan in plans),
            included_total_bytes=sum(plan.result.included_total_bytes for plan in plans),
            collection_count=len(plans),
        ),
        overall_warning_level=worst_warning_level(plan.warning_level for plan in plans),
        all_files=tuple(all_files),
    )

"""Tree walking, plan aggregation and threshold classification."""

from .aggregate import (
    aggregate_plan,
    build_extension_histogram,
    build_warnings,
    classify_warning_level,
    extension_key,
    format_bytes,
    not_cloned_result,
    top_largest_files,
    worst_warning_level,
)
from .models import (
    NO_EXTENSION,
    NOT_CLONED_WARNING,
    CollectionPlan,
    CollectionTarget,
    ExtensionCount,
    FileRecord,
    PlanResult,
    PlanSummary,
    PlanTotals,
    WarningLevel,
)
from .planner import compile_collection_rules, compute_plan, plan_collection, summarize_plans
from .walker import WalkProfile, walk_collection

__all__ = [
    "CollectionPlan",
    "CollectionTarget",
    "ExtensionCount",
    "FileRecord",
    "NOT_CLONED_WARNING",
    "NO_EXTENSION",
    "PlanResult",
    "PlanSummary",
    "PlanTotals",
    "WalkProfile",
    "WarningLevel",
    "aggregate_plan",
    "build_extension_histogram",
    "build_warnings",
    "classify_warning_level",
    "compile_collection_rules",
    "compute_plan",
    "extension_key",
    "format_bytes",
    "not_cloned_result",
    "plan_collection",
    "summarize_plans",
    "top_largest_files",
    "walk_collection",
    "worst_warning_level",
]

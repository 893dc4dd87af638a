"""Plan statistics and the green/yellow/red threshold ladder."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from refrepo.config import PlanThresholds
from refrepo.plan.models import (
    NO_EXTENSION,
    NOT_CLONED_WARNING,
    TOP_LARGEST_LIMIT,
    WARNING_SEVERITY,
    ExtensionCount,
    FileRecord,
    PlanResult,
    WarningLevel,
)

_BYTE_UNITS = ("B", "KB", "MB", "GB")


def aggregate_plan(records: Sequence[FileRecord], thresholds: PlanThresholds) -> PlanResult:
    """Aggregate walked files into counts, histogram, largest files and a warning level."""
    file_count = len(records)
    total_bytes = sum(record.size_bytes for record in records)
    return PlanResult(
        included_file_count=file_count,
        included_total_bytes=total_bytes,
        top_largest_files=top_largest_files(records),
        extension_histogram=build_extension_histogram(records),
        warning_level=classify_warning_level(file_count, total_bytes, thresholds),
        warnings=build_warnings(file_count, total_bytes, thresholds),
    )


def not_cloned_result() -> PlanResult:
    """Return the zero plan reported for a collection that is not checked out."""
    return PlanResult(
        included_file_count=0,
        included_total_bytes=0,
        top_largest_files=(),
        extension_histogram=(),
        warning_level="green",
        warnings=(NOT_CLONED_WARNING,),
    )


def extension_key(relative_path: str) -> str:
    """Return the lower-cased extension of a path's file name, dot included."""
    name = relative_path.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot <= 0:
        return NO_EXTENSION
    return name[dot:].lower()


def build_extension_histogram(records: Iterable[FileRecord]) -> tuple[ExtensionCount, ...]:
    """Count files per extension, most common first, ties by extension."""
    counts = Counter(extension_key(record.relative_path) for record in records)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return tuple(ExtensionCount(ext=ext, count=count) for ext, count in ordered)


def top_largest_files(
    records: Iterable[FileRecord], limit: int = TOP_LARGEST_LIMIT
) -> tuple[FileRecord, ...]:
    """Return the largest files, descending by size, ties by path."""
    ordered = sorted(records, key=lambda record: (-record.size_bytes, record.relative_path))
    return tuple(ordered[:limit])


def classify_warning_level(
    file_count: int, total_bytes: int, thresholds: PlanThresholds
) -> WarningLevel:
    """Classify byte and file totals; either dimension alone can raise the level."""
    if total_bytes > thresholds.error_bytes or file_count > thresholds.error_count:
        return "red"
    if total_bytes > thresholds.warning_bytes or file_count > thresholds.warning_count:
        return "yellow"
    return "green"


def build_warnings(
    file_count: int, total_bytes: int, thresholds: PlanThresholds
) -> tuple[str, ...]:
    """Describe the crossed thresholds that set the warning level.

    At most one message per dimension. A red plan only reports error-tier
    crossings; a yellow plan reports warning-tier crossings.
    """
    level = classify_warning_level(file_count, total_bytes, thresholds)
    if level == "green":
        return ()
    if level == "red":
        byte_limit, count_limit, tier = thresholds.error_bytes, thresholds.error_count, "error"
    else:
        byte_limit, count_limit, tier = (
            thresholds.warning_bytes,
            thresholds.warning_count,
            "warning",
        )
    warnings: list[str] = []
    if total_bytes > byte_limit:
        warnings.append(
            f"Total bytes ({format_bytes(total_bytes)}) exceeds {tier} threshold "
            f"({format_bytes(byte_limit)})"
        )
    if file_count > count_limit:
        warnings.append(f"File count ({file_count:,}) exceeds {tier} threshold ({count_limit:,})")
    return tuple(warnings)


def worst_warning_level(levels: Iterable[WarningLevel]) -> WarningLevel:
    """Return the most severe level, green when there are none."""
    worst: WarningLevel = "green"
    for level in levels:
        if WARNING_SEVERITY[level] > WARNING_SEVERITY[worst]:
            worst = level
    return worst


def format_bytes(size_bytes: int) -> str:
    """Format a byte count with one decimal in base-1024 units."""
    if size_bytes <= 0:
        return "0 B"
    exponent = 0
    value = float(size_bytes)
    while value >= 1024 and exponent < len(_BYTE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{value:.1f} {_BYTE_UNITS[exponent]}"

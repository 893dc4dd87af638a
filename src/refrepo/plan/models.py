"""Typed models for index planning."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Literal

WarningLevel = Literal["green", "yellow", "red"]

WARNING_SEVERITY: Final[dict[str, int]] = {"green": 0, "yellow": 1, "red": 2}
NO_EXTENSION: Final = "(no ext)"
NOT_CLONED_WARNING: Final = "Repo not cloned"
TOP_LARGEST_LIMIT: Final = 10


@dataclass(slots=True, frozen=True)
class FileRecord:
    """An included file, relative to its collection root."""

    relative_path: str
    size_bytes: int

    def to_dict(self) -> dict[str, object]:
        return {"path": self.relative_path, "bytes": self.size_bytes}


@dataclass(slots=True, frozen=True)
class ExtensionCount:
    """One extension histogram bucket."""

    ext: str
    count: int

    def to_dict(self) -> dict[str, object]:
        return {"ext": self.ext, "count": self.count}


@dataclass(slots=True, frozen=True)
class PlanResult:
    """Aggregate statistics and classification for one collection."""

    included_file_count: int
    included_total_bytes: int
    top_largest_files: tuple[FileRecord, ...]
    extension_histogram: tuple[ExtensionCount, ...]
    warning_level: WarningLevel
    warnings: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "includedFileCount": self.included_file_count,
            "includedTotalBytes": self.included_total_bytes,
            "topLargestFiles": [record.to_dict() for record in self.top_largest_files],
            "extensionHistogram": [bucket.to_dict() for bucket in self.extension_histogram],
            "warningLevel": self.warning_level,
            "warnings": list(self.warnings),
        }


@dataclass(slots=True, frozen=True)
class CollectionTarget:
    """A collection to plan, as resolved from the repository manifest."""

    collection_id: str
    name: str
    local_dir: str
    max_file_size_bytes: int | None = None

    def __post_init__(self) -> None:
        if not self.collection_id:
            raise ValueError("Collection id must be a non-empty string.")
        if not self.local_dir:
            raise ValueError(f"Collection '{self.collection_id}' must have a local_dir.")
        if self.max_file_size_bytes is not None and (
            not isinstance(self.max_file_size_bytes, int)
            or isinstance(self.max_file_size_bytes, bool)
            or self.max_file_size_bytes < 1
        ):
            raise ValueError(
                f"Collection '{self.collection_id}' max_file_size_bytes must be a positive integer."
            )


@dataclass(slots=True, frozen=True)
class CollectionPlan:
    """Plan for one collection, including its prefixed file list."""

    target: CollectionTarget
    root_path: Path
    cloned: bool
    result: PlanResult
    files: tuple[str, ...]

    @property
    def warning_level(self) -> WarningLevel:
        return self.result.warning_level

    def to_dict(self, include_files: bool = False) -> dict[str, object]:
        payload: dict[str, object] = {
            "collectionId": self.target.collection_id,
            "name": self.target.name,
            "localDir": self.target.local_dir,
            "rootPath": str(self.root_path),
            "cloned": self.cloned,
        }
        payload.update(self.result.to_dict())
        if include_files:
            payload["files"] = list(self.files)
        return payload


@dataclass(slots=True, frozen=True)
class PlanTotals:
    """Pointwise sums across collections."""

    included_file_count: int
    included_total_bytes: int
    collection_count: int


@dataclass(slots=True, frozen=True)
class PlanSummary:
    """Overall plan across every planned collection."""

    collections: tuple[CollectionPlan, ...]
    totals: PlanTotals
    overall_warning_level: WarningLevel
    all_files: tuple[str, ...]

    def to_dict(self, include_files: bool = False) -> dict[str, object]:
        payload: dict[str, object] = {
            "collections": [
                plan.to_dict(include_files=include_files) for plan in self.collections
            ],
            "totals": {
                "includedFileCount": self.totals.included_file_count,
                "includedTotalBytes": self.totals.included_total_bytes,
                "collectionCount": self.totals.collection_count,
            },
            "overallWarningLevel": self.overall_warning_level,
        }
        if include_files:
            payload["allFiles"] = list(self.all_files)
        return payload

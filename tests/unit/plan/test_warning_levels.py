from __future__ import annotations

from refrepo.config import PlanThresholds
from refrepo.plan import build_warnings, classify_warning_level, worst_warning_level

THRESHOLDS = PlanThresholds(warning_bytes=1000, error_bytes=5000, warning_count=2, error_count=5)


def test_bytes_above_error_threshold_is_red_with_single_byte_warning() -> None:
    assert classify_warning_level(3, 6000, THRESHOLDS) == "red"

    warnings = build_warnings(3, 6000, THRESHOLDS)

    assert len(warnings) == 1
    assert warnings[0].startswith("Total bytes (5.9 KB) exceeds error threshold (4.9 KB)")


def test_either_dimension_alone_raises_level() -> None:
    assert classify_warning_level(3, 10, THRESHOLDS) == "yellow"
    assert classify_warning_level(1, 1001, THRESHOLDS) == "yellow"
    assert classify_warning_level(6, 10, THRESHOLDS) == "red"
    assert classify_warning_level(2, 1000, THRESHOLDS) == "green"


def test_yellow_plan_reports_each_crossed_warning_threshold() -> None:
    warnings = build_warnings(3, 2000, THRESHOLDS)

    assert warnings == (
        "Total bytes (2.0 KB) exceeds warning threshold (1000.0 B)",
        "File count (3) exceeds warning threshold (2)",
    )


def test_green_plan_has_no_warnings() -> None:
    assert build_warnings(1, 10, THRESHOLDS) == ()


def test_level_is_monotonic_in_bytes_and_count() -> None:
    severity = {"green": 0, "yellow": 1, "red": 2}
    previous = 0
    for total_bytes in range(0, 8000, 250):
        current = severity[classify_warning_level(0, total_bytes, THRESHOLDS)]
        assert current >= previous
        previous = current
    previous = 0
    for count in range(0, 10):
        current = severity[classify_warning_level(count, 0, THRESHOLDS)]
        assert current >= previous
        previous = current


def test_worst_level_wins_across_collections() -> None:
    assert worst_warning_level([]) == "green"
    assert worst_warning_level(["green", "yellow", "green"]) == "yellow"
    assert worst_warning_level(["yellow", "red", "green"]) == "red"

from __future__ import annotations

import json
from pathlib import Path

from refrepo.baseline import BASELINE_FILENAME, CHANGES_FILENAME
from refrepo.plan import CollectionTarget
from refrepo.session import create_session


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _targets() -> list[CollectionTarget]:
    return [
        CollectionTarget(collection_id="alpha", name="Alpha", local_dir="alpha"),
        CollectionTarget(collection_id="beta", name="Beta", local_dir="beta"),
    ]


def test_plan_index_change_plan_roundtrip(tmp_path: Path) -> None:
    _write(tmp_path / "alpha" / "src" / "a.ts", "export const a = 1;\n")
    _write(tmp_path / "alpha" / "src" / "b.ts", "export const b = 2;\n")
    _write(tmp_path / "alpha" / "node_modules" / "dep" / "index.js", "module.exports = 1;\n")
    _write(tmp_path / "beta" / "README.md", "# Beta\n")
    session = create_session(_targets(), root=tmp_path)

    first = session.plan()
    assert first.baseline is None
    assert first.diff is None
    assert first.changes.baseline_date == "none"
    assert first.changes.new_files == ("alpha/src/a.ts", "alpha/src/b.ts", "beta/README.md")
    assert "baselineComparison" not in first.to_dict()

    session.record_successful_index(first.summary)
    baseline_payload = json.loads((tmp_path / BASELINE_FILENAME).read_text(encoding="utf-8"))
    assert baseline_payload["fileCount"] == 3

    unchanged = session.plan()
    assert unchanged.diff is not None
    assert unchanged.diff.has_changes is False
    assert unchanged.changes.has_changes is False

    (tmp_path / "alpha" / "src" / "b.ts").unlink()
    _write(tmp_path / "alpha" / "src" / "c.ts", "export const c = 3;\n")
    changed = session.plan()

    assert changed.diff is not None
    assert changed.diff.new_files == ("alpha/src/c.ts",)
    assert changed.diff.removed_files == ("alpha/src/b.ts",)
    changes_payload = json.loads((tmp_path / CHANGES_FILENAME).read_text(encoding="utf-8"))
    assert changes_payload["newFiles"] == ["alpha/src/c.ts"]
    assert changes_payload["removedFiles"] == ["alpha/src/b.ts"]
    assert changes_payload["baselineDate"] == baseline_payload["timestamp"]
    comparison = changed.to_dict()["baselineComparison"]
    assert comparison == {
        "baselineDate": baseline_payload["timestamp"],
        "newFiles": ["alpha/src/c.ts"],
        "removedFiles": ["alpha/src/b.ts"],
    }


def test_corrupt_baseline_behaves_like_first_run(tmp_path: Path) -> None:
    _write(tmp_path / "alpha" / "a.ts", "a\n")
    _write(tmp_path / BASELINE_FILENAME, "{broken")
    session = create_session(_targets(), root=tmp_path)

    report = session.plan()

    assert report.baseline is None
    assert report.changes.new_files == ("alpha/a.ts",)
    assert report.summary.collections[1].cloned is False


def test_repeated_plans_are_identical(tmp_path: Path) -> None:
    for index in range(20):
        _write(tmp_path / "alpha" / f"dir{index % 3}" / f"f{index}.ts", "x" * index)
    session = create_session(_targets(), root=tmp_path, max_workers=2)

    first = session.plan().summary
    second = session.plan().summary

    assert first == second
    assert first.to_dict(include_files=True) == second.to_dict(include_files=True)

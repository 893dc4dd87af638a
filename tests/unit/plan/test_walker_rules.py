from __future__ import annotations

import os
from pathlib import Path

import pytest

from refrepo.plan import walk_collection
from refrepo.rules import CollectionIgnores, build_override_table, compile_rule_set


def _write(path: Path, size: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


def test_global_rules_keep_source_and_drop_dependencies_and_env(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "index.ts", 2000)
    _write(tmp_path / "node_modules" / "lodash" / "index.js", 500)
    _write(tmp_path / ".env", 10)

    records = walk_collection(tmp_path, compile_rule_set("unknown"), 1024 * 1024)

    assert [record.relative_path for record in records] == ["src/index.ts"]
    assert sum(record.size_bytes for record in records) == 2000


def test_collection_rule_drops_unwanted_framework_package(tmp_path: Path) -> None:
    _write(tmp_path / "packages" / "vue" / "App.vue", 100)
    _write(tmp_path / "packages" / "vue" / "index.ts", 100)
    _write(tmp_path / "packages" / "react" / "App.tsx", 100)
    overrides = build_override_table(
        [CollectionIgnores(collection_id="demo", drop_paths=("packages/vue/",))]
    )

    records = walk_collection(
        tmp_path, compile_rule_set("demo", overrides=overrides), 1024 * 1024
    )

    assert [record.relative_path for record in records] == ["packages/react/App.tsx"]


def test_hidden_entries_are_dropped_even_when_a_rule_re_includes_them(tmp_path: Path) -> None:
    _write(tmp_path / ".env.example", 10)
    _write(tmp_path / ".github" / "workflows" / "ci.yml", 10)
    _write(tmp_path / "src" / ".cache" / "state.json", 10)
    _write(tmp_path / "src" / "main.ts", 10)
    rule_set = compile_rule_set("unknown")
    profile: dict[str, object] = {}

    records = walk_collection(tmp_path, rule_set, 1024 * 1024, profile=profile)

    assert not rule_set.is_excluded(".env.example")
    assert [record.relative_path for record in records] == ["src/main.ts"]
    assert profile["excluded_hidden"] == 3


def test_files_above_size_limit_are_skipped(tmp_path: Path) -> None:
    _write(tmp_path / "small.ts", 100)
    _write(tmp_path / "exact.ts", 200)
    _write(tmp_path / "large.ts", 201)
    profile: dict[str, object] = {}

    records = walk_collection(tmp_path, compile_rule_set("unknown"), 200, profile=profile)

    assert [record.relative_path for record in records] == ["exact.ts", "small.ts"]
    assert profile["excluded_by_size"] == 1


def test_missing_root_yields_empty_walk(tmp_path: Path) -> None:
    records = walk_collection(tmp_path / "absent", compile_rule_set("unknown"), 1024)

    assert records == []


def test_broken_symlink_is_skipped(tmp_path: Path) -> None:
    _write(tmp_path / "real.ts", 10)
    try:
        os.symlink(tmp_path / "missing.ts", tmp_path / "dangling.ts")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")

    records = walk_collection(tmp_path, compile_rule_set("unknown"), 1024)

    assert [record.relative_path for record in records] == ["real.ts"]


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root reads all")
def test_unreadable_directory_is_skipped(tmp_path: Path) -> None:
    _write(tmp_path / "ok" / "a.ts", 10)
    locked = tmp_path / "locked"
    _write(locked / "b.ts", 10)
    locked.chmod(0)
    profile: dict[str, object] = {}
    try:
        records = walk_collection(tmp_path, compile_rule_set("unknown"), 1024, profile=profile)
    finally:
        locked.chmod(0o755)

    assert [record.relative_path for record in records] == ["ok/a.ts"]
    assert profile["skipped_unreadable"] == 1


def test_deep_tree_walks_past_recursion_limit(tmp_path: Path) -> None:
    depth = 1100
    chain = [tmp_path]
    for _ in range(depth):
        chain.append(chain[-1] / "d")
        chain[-1].mkdir()
    leaf = chain[-1] / "leaf.ts"
    leaf.write_bytes(b"x" * 5)
    try:
        records = walk_collection(tmp_path, compile_rule_set("unknown"), 1024)
    finally:
        leaf.unlink()
        for directory in reversed(chain[1:]):
            directory.rmdir()

    assert [record.relative_path for record in records] == ["/".join(["d"] * depth + ["leaf.ts"])]


def test_walk_order_is_sorted_and_repeatable(tmp_path: Path) -> None:
    for name in ("b/z.ts", "a/y.ts", "c.ts", "a/b/x.ts"):
        _write(tmp_path / name, 1)
    rule_set = compile_rule_set("unknown")

    first = walk_collection(tmp_path, rule_set, 1024)
    second = walk_collection(tmp_path, rule_set, 1024)

    paths = [record.relative_path for record in first]
    assert paths == sorted(paths)
    assert first == second


def test_adding_exclude_rule_never_grows_included_set(tmp_path: Path) -> None:
    for name in ("docs/guide.md", "src/app.ts", "src/app.test.ts", "README.md"):
        _write(tmp_path / name, 10)

    base = walk_collection(tmp_path, compile_rule_set("unknown"), 1024)
    narrowed = walk_collection(
        tmp_path, compile_rule_set("unknown", custom_patterns=["docs/"]), 1024
    )

    assert {record.relative_path for record in narrowed} <= {
        record.relative_path for record in base
    }
    assert "docs/guide.md" not in {record.relative_path for record in narrowed}


def test_walk_profile_counts_rule_exclusions(tmp_path: Path) -> None:
    _write(tmp_path / "node_modules" / "x.js", 1)
    _write(tmp_path / "yarn.lock", 1)
    _write(tmp_path / "src" / "a.ts", 1)
    profile: dict[str, object] = {}

    walk_collection(tmp_path, compile_rule_set("unknown"), 1024, profile=profile)

    assert profile["excluded_by_rule"] == 2
    assert profile["included_files"] == 1
    assert profile["directories_scanned"] == 2
    assert isinstance(profile["total_seconds"], float)


def test_later_negation_re_includes_file_in_walk(tmp_path: Path) -> None:
    _write(tmp_path / "docs" / "README.md", 10)
    _write(tmp_path / "docs" / "guide.md", 10)
    _write(tmp_path / "src" / "index.ts", 10)
    rule_set = compile_rule_set("unknown", custom_patterns=["*.md", "!README.md"])

    records = walk_collection(tmp_path, rule_set, 1024)

    assert [record.relative_path for record in records] == ["docs/README.md", "src/index.ts"]


def test_hidden_check_uses_path_relative_to_collection_root(tmp_path: Path) -> None:
    root = tmp_path / ".checkouts" / "repo"
    _write(root / "src" / "index.ts", 10)
    _write(root / "src" / ".local" / "notes.ts", 10)

    records = walk_collection(root, compile_rule_set("unknown"), 1024)

    assert [record.relative_path for record in records] == ["src/index.ts"]

from __future__ import annotations

from refrepo.plan import CollectionTarget, extension_key
from refrepo.rules import (
    CollectionIgnores,
    build_override_table,
    compile_rule_set,
    normalize_relative_path,
    to_posix_path,
)


def test_backslash_and_slash_paths_get_identical_verdicts() -> None:
    overrides = build_override_table(
        [CollectionIgnores(collection_id="demo", drop_paths=("packages/vue/",))]
    )
    rule_set = compile_rule_set("demo", overrides=overrides)

    pairs = [
        (r"packages\vue\index.ts", "packages/vue/index.ts"),
        (r"packages\react\App.tsx", "packages/react/App.tsx"),
        (r"src\node_modules\x.js", "src/node_modules/x.js"),
        (r".\src\index.ts", "./src/index.ts"),
    ]
    for windows, posix in pairs:
        assert rule_set.is_excluded(windows) == rule_set.is_excluded(posix)
        assert rule_set.explain(windows) == rule_set.explain(posix)


def test_drive_prefix_and_duplicate_separators_are_dropped() -> None:
    assert normalize_relative_path(r"C:\repo\src\a.ts") == "repo/src/a.ts"
    assert to_posix_path(r"a\b\c") == "a/b/c"


def test_windows_local_dir_is_accepted_and_extension_ignores_separators() -> None:
    target = CollectionTarget(collection_id="demo", name="Demo", local_dir=r"group\demo")

    assert to_posix_path(target.local_dir) == "group/demo"
    assert extension_key(r"src\Main.TS") == ".ts"

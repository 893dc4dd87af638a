from __future__ import annotations

from pathlib import Path

import pytest

from refrepo.config import CONFIG_FILE_NAME, ConfigOverrides, load_effective_config


def _write_config(root: Path, *lines: str) -> None:
    (root / CONFIG_FILE_NAME).write_text("\n".join(lines), encoding="utf-8")


def test_invalid_size_type_raises_value_error(tmp_path: Path) -> None:
    _write_config(tmp_path, "[plan]", 'max_file_size_bytes = "big"')

    with pytest.raises(ValueError, match="plan.max_file_size_bytes"):
        load_effective_config(root=tmp_path)


def test_size_above_cap_is_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "[plan]", f"max_file_size_bytes = {128 * 1024 * 1024}")

    with pytest.raises(ValueError, match="must be <="):
        load_effective_config(root=tmp_path)

    with pytest.raises(ValueError, match="overrides.max_file_size_bytes"):
        load_effective_config(
            root=tmp_path / "other", overrides=ConfigOverrides(max_file_size_bytes=0)
        )


def test_invalid_section_type_raises_value_error(tmp_path: Path) -> None:
    _write_config(tmp_path, 'thresholds = "not-a-table"')

    with pytest.raises(ValueError, match="section 'thresholds'"):
        load_effective_config(root=tmp_path)


def test_custom_patterns_must_be_strings(tmp_path: Path) -> None:
    _write_config(tmp_path, "[ignore]", "custom_patterns = [1, 2]")

    with pytest.raises(ValueError, match="ignore.custom_patterns"):
        load_effective_config(root=tmp_path)


def test_collection_entry_requires_drop_paths(tmp_path: Path) -> None:
    _write_config(tmp_path, "[collections.demo]", 'notes = "no paths"')

    with pytest.raises(ValueError, match="collections.demo.drop_paths"):
        load_effective_config(root=tmp_path)


def test_empty_data_dir_is_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "[plan]", 'data_dir = "  "')

    with pytest.raises(ValueError, match="plan.data_dir"):
        load_effective_config(root=tmp_path)


def test_boolean_values_are_not_accepted_as_integers(tmp_path: Path) -> None:
    _write_config(tmp_path, "[thresholds]", "warning_count = true")

    with pytest.raises(ValueError, match="thresholds.warning_count"):
        load_effective_config(root=tmp_path)

    _write_config(tmp_path, "[plan]", "max_file_size_bytes = true")

    with pytest.raises(ValueError, match="plan.max_file_size_bytes"):
        load_effective_config(root=tmp_path)

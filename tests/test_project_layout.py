from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/refrepo/session.py",
        "src/refrepo/config.py",
        "src/refrepo/rules/__init__.py",
        "src/refrepo/plan/__init__.py",
        "src/refrepo/baseline/__init__.py",
        "src/refrepo/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel

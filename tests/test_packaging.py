"""
Тесты метаданных пакета.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_project_metadata():
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]

    assert project["name"] == "article-rest-api"
    assert "readme" not in project
    assert "fastapi>=0.110" in project["dependencies"]

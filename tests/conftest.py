from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def static_dir(tmp_path: Path) -> Path:
    root = tmp_path / "static"
    root.mkdir()
    return root


@pytest.fixture()
def settings(static_dir: Path):
    from servelite.config import ServerSettings

    return ServerSettings(host="127.0.0.1", port=0, static_dir=static_dir)

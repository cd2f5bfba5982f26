"""Fixtures for tests that drive a real cargo against tests/data/hello_world."""

import shutil
from pathlib import Path

import pytest

from cargobay.common.config.settings import Settings


HELLO_WORLD = Path(__file__).resolve().parent.parent / "data" / "hello_world"


def pytest_collection_modifyitems(config, items):
    if shutil.which("cargo") is not None:
        return
    skip = pytest.mark.skip(reason="cargo is not installed")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def hello_world() -> Path:
    return HELLO_WORLD


@pytest.fixture(scope="session")
def target_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("cargo-target")


@pytest.fixture
def cargo_settings() -> Settings:
    return Settings(_env_file=None, cargo_path="cargo")


@pytest.fixture
def context(hello_world: Path, target_dir: Path) -> dict:
    return {"workspace": hello_world, "target_dir": target_dir}

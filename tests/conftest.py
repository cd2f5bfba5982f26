"""Shared fixtures for the cargobay test suite."""

from pathlib import Path
from typing import Callable

import pytest

from cargobay.common.config.settings import Settings
from cargobay.testing.fake_process import FakeExecutable, make_fake_executable


@pytest.fixture
def fake_cargo(tmp_path: Path) -> FakeExecutable:
    """A fake cargo that exits successfully without output until configured."""
    return make_fake_executable(tmp_path / "bin" / "cargo")


@pytest.fixture
def settings(fake_cargo: FakeExecutable) -> Settings:
    return Settings(_env_file=None, cargo_path=str(fake_cargo.path))


@pytest.fixture
def make_test_binary(tmp_path: Path) -> Callable[..., FakeExecutable]:
    """Create fake libtest binaries under ``tmp_path/target``."""

    def factory(name: str, **scenario) -> FakeExecutable:
        return make_fake_executable(tmp_path / "target" / "debug" / "deps" / name, **scenario)

    return factory


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "workspace"
    path.mkdir()
    return path

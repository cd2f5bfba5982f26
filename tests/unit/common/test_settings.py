"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from cargobay.common.config.constants import DEFAULT_STREAM_LIMIT_BYTES
from cargobay.common.config.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CARGOBAY_CARGO_PATH", raising=False)
    settings = Settings(_env_file=None)

    assert settings.cargo_path == "cargo"
    assert settings.message_format_arg() == "--message-format=json-diagnostic-rendered-ansi"
    assert settings.stream_limit_bytes == DEFAULT_STREAM_LIMIT_BYTES
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGOBAY_CARGO_PATH", "/opt/rust/bin/cargo")
    monkeypatch.setenv("CARGOBAY_LOG_LEVEL", "debug")
    monkeypatch.setenv("CARGOBAY_LOG_JSON", "true")

    settings = Settings(_env_file=None)

    assert settings.cargo_path == "/opt/rust/bin/cargo"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_reads_env_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CARGOBAY_CARGO_PATH", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("CARGOBAY_CARGO_PATH=/from/env/file/cargo\n")

    assert Settings(_env_file=env_file).cargo_path == "/from/env/file/cargo"


@pytest.mark.parametrize(
    "overrides",
    [
        {"log_level": "LOUD"},
        {"message_format": "human"},
        {"stream_limit_bytes": 1024},
    ],
)
def test_rejects_invalid_values(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)

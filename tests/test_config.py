from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_ENDPOINT_URL, AppSettings, write_user_env_vars


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)

    assert settings.endpoint_url == DEFAULT_ENDPOINT_URL
    assert settings.http_timeout_seconds is None
    assert settings.max_concurrency is None
    assert settings.csv_header is False
    assert settings.log_level == "WARNING"


def test_env_vars_are_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AZCHECK_MAX_CONCURRENCY", "8")
    monkeypatch.setenv("AZCHECK_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.max_concurrency == 8
    assert settings.log_level == "DEBUG"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="chatty")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, max_concurrency=0)


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "azcheck" / ".env"
    write_user_env_vars({"AZCHECK_LOG_LEVEL": "INFO"}, env_path)
    write_user_env_vars({"AZCHECK_MAX_CONCURRENCY": "4"}, env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "AZCHECK_LOG_LEVEL=INFO" in lines
    assert "AZCHECK_MAX_CONCURRENCY=4" in lines

    settings = AppSettings(_env_file=env_path)
    assert settings.max_concurrency == 4

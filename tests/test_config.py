import os
from pathlib import Path

import pytest

from tweet_extractor.config import load_dotenv, load_settings


def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # load_dotenv writes os.environ directly; give each test its own copy
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in ("LOG_LEVEL", "OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _clean_env(monkeypatch, tmp_path)
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.output_format == "text"


def test_dotenv_does_not_override_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _clean_env(monkeypatch, tmp_path)
    (tmp_path / ".env").write_text("OUTPUT_FORMAT='json'\n# comment\nLOG_LEVEL=error\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.output_format == "json"
    assert settings.log_level == "DEBUG"


def test_dotenv_line_forms(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _clean_env(monkeypatch, tmp_path)
    path = tmp_path / "custom.env"
    path.write_text('export A_KEY="quoted value"\nB_KEY = plain\nnot a pair\n=orphan\n', encoding="utf-8")
    load_dotenv(str(path))
    assert os.environ["A_KEY"] == "quoted value"
    assert os.environ["B_KEY"] == "plain"
    assert "" not in os.environ


@pytest.mark.parametrize(("name", "value"), [("OUTPUT_FORMAT", "xml"), ("LOG_LEVEL", "loud")])
def test_invalid_values(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    _clean_env(monkeypatch, tmp_path)
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()

"""Tests for openapi_arrangement.config -- project file and precedence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from openapi_arrangement.config import (
    ENV_PATH,
    ENV_STRATEGY,
    PROJECT_CONFIG_FILENAME,
    load_project_config,
    resolve_config,
)
from openapi_arrangement.exceptions import ConfigError
from openapi_arrangement.models import ArrangementConfig
from openapi_arrangement.ordering import GREEDY_REQUIRED_FIRST


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_PATH, raising=False)
    monkeypatch.delenv(ENV_STRATEGY, raising=False)


def _write_project(directory: Path, data: object) -> None:
    (directory / PROJECT_CONFIG_FILENAME).write_text(json.dumps(data), encoding="utf-8")


class TestLoadProjectConfig:
    """Loading ./openapi-arrangement.json."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_project_config(tmp_path)
        assert config == ArrangementConfig()
        assert config.path is None
        assert config.strategy == GREEDY_REQUIRED_FIRST

    def test_reads_file(self, tmp_path: Path) -> None:
        _write_project(tmp_path, {"path": "#/$defs/", "strategy": "alphabetical"})
        config = load_project_config(tmp_path)
        assert config.path == "#/$defs/"
        assert config.strategy == "alphabetical"

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_project(tmp_path, {"strategy": "ref"})
        monkeypatch.chdir(tmp_path)
        assert load_project_config().strategy == "ref"

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / PROJECT_CONFIG_FILENAME).write_text("{oops", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid project config"):
            load_project_config(tmp_path)

    def test_unknown_field(self, tmp_path: Path) -> None:
        _write_project(tmp_path, {"sort": "alphabetical"})
        with pytest.raises(ConfigError):
            load_project_config(tmp_path)


class TestResolveConfig:
    """Precedence: CLI > env > project file > defaults."""

    def test_defaults(self, tmp_path: Path) -> None:
        assert resolve_config(directory=tmp_path) == ArrangementConfig()

    def test_env_overrides_project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_project(tmp_path, {"path": "#/$defs/", "strategy": "alphabetical"})
        monkeypatch.setenv(ENV_PATH, "#/definitions/")
        monkeypatch.setenv(ENV_STRATEGY, "ref")
        config = resolve_config(directory=tmp_path)
        assert config.path == "#/definitions/"
        assert config.strategy == "ref"

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_PATH, "#/definitions/")
        monkeypatch.setenv(ENV_STRATEGY, "ref")
        config = resolve_config(
            cli_path="#/components/schemas/",
            cli_strategy="alphabetical",
            directory=tmp_path,
        )
        assert config.path == "#/components/schemas/"
        assert config.strategy == "alphabetical"

    def test_empty_env_is_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_project(tmp_path, {"strategy": "alphabetical"})
        monkeypatch.setenv(ENV_STRATEGY, "")
        assert resolve_config(directory=tmp_path).strategy == "alphabetical"

    def test_output_format_is_not_a_project_setting(self, tmp_path: Path) -> None:
        _write_project(tmp_path, {"output": {"format": "json"}})
        with pytest.raises(ConfigError, match="output"):
            resolve_config(directory=tmp_path)

"""Configuration loading and precedence resolution.

Settings come from, highest precedence first:

1. CLI flags (``--path``, ``--strategy``)
2. Environment variables (``OPENAPI_ARRANGEMENT_PATH``,
   ``OPENAPI_ARRANGEMENT_STRATEGY``)
3. Project config (``./openapi-arrangement.json``)
4. Defaults of :class:`~openapi_arrangement.models.ArrangementConfig`
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from openapi_arrangement.exceptions import ConfigError
from openapi_arrangement.models import ArrangementConfig

PROJECT_CONFIG_FILENAME = "openapi-arrangement.json"
ENV_PATH = "OPENAPI_ARRANGEMENT_PATH"
ENV_STRATEGY = "OPENAPI_ARRANGEMENT_STRATEGY"


def load_project_config(directory: Optional[Path] = None) -> ArrangementConfig:
    """Load ``openapi-arrangement.json`` from *directory* (default: cwd).

    Returns:
        The validated config, or a default instance if the file is absent.

    Raises:
        ConfigError: If the file contains invalid JSON or fails validation.
    """
    path = (directory or Path.cwd()) / PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return ArrangementConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return ArrangementConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError, OSError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc


def resolve_config(
    cli_path: Optional[str] = None,
    cli_strategy: Optional[str] = None,
    directory: Optional[Path] = None,
) -> ArrangementConfig:
    """Resolve the effective configuration with full precedence chain.

    Returns:
        A new :class:`~openapi_arrangement.models.ArrangementConfig`.
    """
    config = load_project_config(directory)

    env_path = os.environ.get(ENV_PATH)
    if env_path:
        config.path = env_path
    env_strategy = os.environ.get(ENV_STRATEGY)
    if env_strategy:
        config.strategy = env_strategy

    if cli_path is not None:
        config.path = cli_path
    if cli_strategy is not None:
        config.strategy = cli_strategy

    return config

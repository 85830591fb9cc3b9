# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for elm-report."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import CONFIG_FILENAME, DEFAULT_COMPILER, DEFAULT_MAIN
from .errors import ConfigError

_ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$(\w+)|\$\{([^}]+)\}")
_RELATIVE_PATH_KEYS: Final[frozenset[str]] = frozenset({"main", "root"})


class ReportConfig(BaseModel):
    """Resolved settings for a single elm-report run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    compiler: Path = DEFAULT_COMPILER
    main: Path = DEFAULT_MAIN
    root: Path = Field(default_factory=Path.cwd)
    color: bool = True
    timeout: float | None = None
    debug: bool = False

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @property
    def base_path(self) -> str:
        """Return the directory report paths are joined onto."""

        return self.root.as_posix()


def _expand_env_string(value: str, env: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        if key is None:
            return match.group(0)
        return env.get(key, match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _expand_env(data: Mapping[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    return {key: _expand_env_string(value, env) if isinstance(value, str) else value for key, value in data.items()}


def load_config_file(path: Path, *, env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Read a TOML configuration file and expand environment references.

    Relative paths inside the file resolve against the file's directory. A bare
    ``compiler`` name is kept as is and looked up on ``PATH``.

    Args:
        path: TOML document to load. A missing file yields an empty mapping.
        env: Environment used for ``$VAR`` expansion; defaults to ``os.environ``.

    Returns:
        dict[str, Any]: Configuration fragment.

    Raises:
        ConfigError: If the document cannot be parsed.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid configuration at {path}: {exc}") from exc
    expanded = _expand_env(document, os.environ if env is None else env)
    for key in _RELATIVE_PATH_KEYS & expanded.keys():
        value = expanded[key]
        if isinstance(value, str) and not Path(value).is_absolute():
            expanded[key] = str(path.parent / value)
    compiler = expanded.get("compiler")
    if isinstance(compiler, str) and "/" in compiler and not Path(compiler).is_absolute():
        expanded["compiler"] = str(path.parent / compiler)
    return expanded


def load_config(
    root: Path | None = None,
    *,
    config_file: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> ReportConfig:
    """Build a :class:`ReportConfig` from defaults, a TOML file and overrides.

    Args:
        root: Project root; also where ``.elm-report.toml`` is looked up.
        config_file: Explicit configuration file replacing the root lookup.
        overrides: Values supplied on the command line. ``None`` values are ignored.
        env: Environment used for variable expansion.

    Returns:
        ReportConfig: Validated configuration.

    Raises:
        ConfigError: If a source is malformed or the merged values are invalid.
    """

    base = root if root is not None else Path.cwd()
    source = config_file if config_file is not None else base / CONFIG_FILENAME
    if config_file is not None and not config_file.is_file():
        raise ConfigError(f"Configuration file {config_file} does not exist")
    merged: dict[str, Any] = {"root": base}
    merged.update(load_config_file(source, env=env))
    merged.update({key: value for key, value in (overrides or {}).items() if value is not None})
    try:
        return ReportConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = ["ReportConfig", "load_config", "load_config_file"]

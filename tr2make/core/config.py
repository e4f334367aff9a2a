# SPDX-License-Identifier: MIT
"""Project configuration loading.

A project is described by a YAML file named ``.tr2make`` in the
directory tr2make is invoked from:

    language: c++
    standard: 17
    files:
      - main.cpp
      - util.cpp
    target: app
    architecture: x64
    model:
      debug:
        targetdir: bin/debug
      release:
        targetdir: bin/release
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from tr2make.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".tr2make"


class BuildModel(Enum):
    """Build mode selected on the command line."""

    DEBUG = "debug"
    RELEASE = "release"

    @classmethod
    def from_name(cls, name: str) -> BuildModel:
        """Parse a mode name (case-insensitive).

        Raises:
            ValueError: If the name is not a known mode.
        """
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(
                f"invalid build model {name!r} (choose from {choices})"
            ) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ModelConfig:
    """Per-mode settings from the ``model`` table.

    Attributes:
        targetdir: Output directory declared for this mode.
    """

    targetdir: str


@dataclass(frozen=True)
class ProjectConfig:
    """In-memory description of a project.

    Attributes:
        language: Source language name ("c" or "c++").
        standard: Language standard version (e.g. 11, 17, 20).
        files: Source files, in declaration order.
        target: Base name of the binary to build.
        architecture: Target architecture identifier (e.g. "x64").
        models: Per-mode settings keyed by build mode.
        source: File the configuration was loaded from, if any.
    """

    language: str
    standard: int | float
    files: tuple[str, ...]
    target: str
    architecture: str
    models: Mapping[BuildModel, ModelConfig] = field(default_factory=dict)
    source: Path | str | None = field(default=None, compare=False)

    @classmethod
    def from_dict(
        cls, data: Any, source: Path | str | None = None
    ) -> ProjectConfig:
        """Validate a parsed document and build a ProjectConfig.

        Args:
            data: The deserialized configuration document.
            source: File the document came from, used in error messages.

        Raises:
            ConfigError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a mapping", source)

        language = _require_str(data, "language", source)
        standard = data.get("standard")
        if standard is None:
            raise ConfigError("missing field 'standard'", source)
        # bool is an int subclass; "standard: yes" is not a version
        if isinstance(standard, bool) or not isinstance(standard, (int, float)):
            raise ConfigError("field 'standard' must be a number", source)

        files = data.get("files")
        if files is None:
            raise ConfigError("missing field 'files'", source)
        if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
            raise ConfigError("field 'files' must be a list of strings", source)

        target = _require_str(data, "target", source)
        architecture = _require_str(data, "architecture", source)

        return cls(
            language=language,
            standard=standard,
            files=tuple(files),
            target=target,
            architecture=architecture,
            models=_parse_models(data.get("model"), source),
            source=source,
        )

    def model_config(self, model: BuildModel) -> ModelConfig:
        """Return the settings for a build mode.

        Raises:
            ConfigError: If the ``model`` table has no entry for the mode.
        """
        try:
            return self.models[model]
        except KeyError:
            raise ConfigError(f"missing field 'model.{model}'", self.source) from None


def _require_str(data: dict[str, Any], key: str, source: Path | str | None) -> str:
    if key not in data or data[key] is None:
        raise ConfigError(f"missing field '{key}'", source)
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"field '{key}' must be a string", source)
    return value


def _parse_models(
    raw: Any, source: Path | str | None
) -> dict[BuildModel, ModelConfig]:
    if raw is None:
        raise ConfigError("missing field 'model'", source)
    if not isinstance(raw, dict) or not raw:
        raise ConfigError("field 'model' must be a non-empty mapping", source)

    models: dict[BuildModel, ModelConfig] = {}
    for name, entry in raw.items():
        try:
            model = BuildModel(name)
        except ValueError:
            raise ConfigError(f"unknown build model 'model.{name}'", source) from None

        if not isinstance(entry, dict):
            raise ConfigError(f"field 'model.{name}' must be a mapping", source)
        targetdir = entry.get("targetdir")
        if targetdir is None:
            raise ConfigError(f"missing field 'model.{name}.targetdir'", source)
        if not isinstance(targetdir, str):
            raise ConfigError(
                f"field 'model.{name}.targetdir' must be a string", source
            )
        models[model] = ModelConfig(targetdir=targetdir)

    return models


def load_config(path: Path | str | None = None) -> ProjectConfig:
    """Load the project configuration.

    Args:
        path: Configuration file (default: ``.tr2make`` in the current directory).

    Returns:
        The validated project configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path) if path is not None else Path.cwd() / CONFIG_FILENAME

    if not config_path.is_file():
        raise ConfigError("configuration file not found", config_path)

    try:
        # yaml detects the encoding of raw bytes
        with open(config_path, "rb") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read configuration: {e}", config_path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", config_path) from e

    config = ProjectConfig.from_dict(data, config_path)
    logger.debug("Loaded %s: %s", config_path, config)
    return config

# SPDX-License-Identifier: MIT
"""Tests for tr2make.core.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from tr2make.core.config import (
    CONFIG_FILENAME,
    BuildModel,
    ModelConfig,
    ProjectConfig,
    load_config,
)
from tr2make.core.errors import ConfigError

VALID_YAML = """\
language: c
standard: 17
files:
  - a.c
  - b.cpp
  - c.c
target: app
architecture: x64
model:
  debug:
    targetdir: out
  release:
    targetdir: dist
"""


def valid_data() -> dict:
    return {
        "language": "c",
        "standard": 17,
        "files": ["a.c", "c.c"],
        "target": "app",
        "architecture": "x64",
        "model": {"debug": {"targetdir": "out"}},
    }


class TestBuildModel:
    def test_values(self):
        assert BuildModel.DEBUG.value == "debug"
        assert BuildModel.RELEASE.value == "release"

    def test_str(self):
        assert str(BuildModel.RELEASE) == "release"

    def test_from_name_case_insensitive(self):
        assert BuildModel.from_name("Debug") is BuildModel.DEBUG
        assert BuildModel.from_name("RELEASE") is BuildModel.RELEASE

    def test_from_name_invalid(self):
        with pytest.raises(ValueError, match="invalid build model"):
            BuildModel.from_name("profile")


class TestProjectConfigFromDict:
    def test_valid(self):
        config = ProjectConfig.from_dict(valid_data())
        assert config.language == "c"
        assert config.standard == 17
        assert config.files == ("a.c", "c.c")
        assert config.target == "app"
        assert config.architecture == "x64"
        assert config.models == {BuildModel.DEBUG: ModelConfig(targetdir="out")}

    def test_files_keep_order(self):
        data = valid_data()
        data["files"] = ["z.c", "a.c", "m.c"]
        config = ProjectConfig.from_dict(data)
        assert config.files == ("z.c", "a.c", "m.c")

    def test_float_standard(self):
        data = valid_data()
        data["standard"] = 2.5
        assert ProjectConfig.from_dict(data).standard == 2.5

    @pytest.mark.parametrize(
        "field", ["language", "standard", "files", "target", "architecture", "model"]
    )
    def test_missing_field(self, field):
        data = valid_data()
        del data[field]
        with pytest.raises(ConfigError, match=f"missing field '{field}'"):
            ProjectConfig.from_dict(data)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            ProjectConfig.from_dict(["language", "c"])

    def test_standard_must_be_number(self):
        data = valid_data()
        data["standard"] = "17"
        with pytest.raises(ConfigError, match="'standard' must be a number"):
            ProjectConfig.from_dict(data)

    def test_standard_rejects_bool(self):
        data = valid_data()
        data["standard"] = True
        with pytest.raises(ConfigError, match="'standard' must be a number"):
            ProjectConfig.from_dict(data)

    def test_files_must_be_strings(self):
        data = valid_data()
        data["files"] = ["a.c", 3]
        with pytest.raises(ConfigError, match="'files' must be a list of strings"):
            ProjectConfig.from_dict(data)

    def test_target_must_be_string(self):
        data = valid_data()
        data["target"] = ["app"]
        with pytest.raises(ConfigError, match="'target' must be a string"):
            ProjectConfig.from_dict(data)

    def test_language_not_checked_at_load(self):
        data = valid_data()
        data["language"] = "rust"
        assert ProjectConfig.from_dict(data).language == "rust"

    def test_model_empty(self):
        data = valid_data()
        data["model"] = {}
        with pytest.raises(ConfigError, match="non-empty mapping"):
            ProjectConfig.from_dict(data)

    def test_model_unknown_key(self):
        data = valid_data()
        data["model"]["profile"] = {"targetdir": "prof"}
        with pytest.raises(ConfigError, match="unknown build model 'model.profile'"):
            ProjectConfig.from_dict(data)

    def test_model_missing_targetdir(self):
        data = valid_data()
        data["model"] = {"debug": {}}
        with pytest.raises(ConfigError, match="'model.debug.targetdir'"):
            ProjectConfig.from_dict(data)

    def test_model_entry_not_mapping(self):
        data = valid_data()
        data["model"] = {"release": "dist"}
        with pytest.raises(ConfigError, match="'model.release' must be a mapping"):
            ProjectConfig.from_dict(data)

    def test_source_in_message(self):
        data = valid_data()
        del data["target"]
        with pytest.raises(ConfigError) as exc_info:
            ProjectConfig.from_dict(data, source="proj/.tr2make")
        assert str(exc_info.value) == "proj/.tr2make: missing field 'target'"


class TestModelConfig:
    def test_present(self):
        config = ProjectConfig.from_dict(valid_data())
        assert config.model_config(BuildModel.DEBUG).targetdir == "out"

    def test_absent(self):
        config = ProjectConfig.from_dict(valid_data())
        with pytest.raises(ConfigError, match="model.release"):
            config.model_config(BuildModel.RELEASE)

    def test_absent_names_loaded_file(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text(VALID_YAML.replace("  release:\n    targetdir: dist\n", ""))
        config = load_config(path)
        assert config.source == path

        with pytest.raises(ConfigError) as exc_info:
            config.model_config(BuildModel.RELEASE)
        assert exc_info.value.path == path
        assert str(exc_info.value) == f"{path}: missing field 'model.release'"

    def test_source_not_compared(self):
        assert ProjectConfig.from_dict(valid_data(), "a") == ProjectConfig.from_dict(
            valid_data(), "b"
        )


class TestLoadConfig:
    def test_load_explicit_path(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text(VALID_YAML)

        config = load_config(path)
        assert config.files == ("a.c", "b.cpp", "c.c")
        assert set(config.models) == {BuildModel.DEBUG, BuildModel.RELEASE}
        assert config.model_config(BuildModel.RELEASE).targetdir == "dist"

    def test_load_from_cwd(self, tmp_path: Path, monkeypatch):
        (tmp_path / CONFIG_FILENAME).write_text(VALID_YAML)
        monkeypatch.chdir(tmp_path)

        config = load_config()
        assert config.target == "app"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="configuration file not found"):
            load_config(tmp_path / CONFIG_FILENAME)

    def test_directory_is_not_a_file(self, tmp_path: Path):
        (tmp_path / CONFIG_FILENAME).mkdir()
        with pytest.raises(ConfigError, match="configuration file not found"):
            load_config(tmp_path / CONFIG_FILENAME)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("language: [c\nfiles: {")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(path)

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)

    def test_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_bytes(b"language: c\ntarget: \xff\xfe app\n")
        with pytest.raises(ConfigError, match="invalid YAML") as exc_info:
            load_config(path)
        assert exc_info.value.path == path

    def test_utf16_with_bom(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_bytes(VALID_YAML.encode("utf-16"))
        assert load_config(path).target == "app"

    def test_error_names_file(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text(VALID_YAML.replace("target: app\n", ""))
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

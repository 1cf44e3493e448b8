"""Tests for config loading, validation, and precedence."""

import pytest

from mint.config import (
    ConfigError,
    MintConfig,
    load_config,
    load_config_file,
    parse_when,
    validate_config_data,
)
from mint.parser import When


class TestConfigValidation:
    def test_valid_config(self):
        data = {"when": "always", "escape_input": True, "strip_ansi": False, "newline": True}
        assert validate_config_data(data) == []

    def test_not_a_mapping(self):
        errors = validate_config_data(["when", "always"])
        assert any("mapping" in e for e in errors)

    def test_unknown_key(self):
        errors = validate_config_data({"colour": "always"})
        assert any("unknown" in e for e in errors)

    def test_wrong_type(self):
        errors = validate_config_data({"newline": "yes"})
        assert any("newline" in e for e in errors)

    def test_invalid_when(self):
        errors = validate_config_data({"when": "sometimes"}, source="x.yaml")
        assert errors == [
            "x.yaml: invalid 'when' value 'sometimes' (expected one of: auto, always, never)"
        ]


class TestParseWhen:
    @pytest.mark.parametrize(
        "value,expected",
        [("auto", When.AUTO), ("ALWAYS", When.ALWAYS), (" never ", When.NEVER)],
    )
    def test_values(self, value, expected):
        assert parse_when(value) is expected

    def test_invalid(self):
        with pytest.raises(ConfigError, match="invalid 'when'"):
            parse_when("maybe")


class TestConfigFile:
    def test_load(self, tmp_path):
        path = tmp_path / "mint.yaml"
        path.write_text("when: never\nnewline: false\n")
        assert load_config_file(path) == {"when": "never", "newline": False}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "mint.yaml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_not_found(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("when: [always\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config_file(path)

    def test_validation_failure(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("when: always\nbogus: 1\n")
        with pytest.raises(ConfigError, match="validation failed"):
            load_config_file(path)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config(environ={})
        assert config == MintConfig()
        assert config.when is When.AUTO
        assert config.newline is True

    def test_file_layer(self, tmp_path):
        path = tmp_path / "mint.yaml"
        path.write_text("when: always\nstrip_ansi: true\n")
        config = load_config(path, environ={})
        assert config.when is When.ALWAYS
        assert config.strip_ansi is True
        assert config.source == path

    def test_config_path_from_env(self, tmp_path):
        path = tmp_path / "mint.yaml"
        path.write_text("escape_input: true\n")
        config = load_config(environ={"MINT_CONFIG": str(path)})
        assert config.escape_input is True

    def test_env_beats_file(self, tmp_path):
        path = tmp_path / "mint.yaml"
        path.write_text("when: always\n")
        config = load_config(path, environ={"MINT_WHEN": "never"})
        assert config.when is When.NEVER

    def test_override_beats_env(self):
        config = load_config(environ={"MINT_WHEN": "never"}, when="always")
        assert config.when is When.ALWAYS

    def test_none_overrides_ignored(self, tmp_path):
        path = tmp_path / "mint.yaml"
        path.write_text("newline: false\n")
        config = load_config(path, environ={}, newline=None, when=None)
        assert config.newline is False
        assert config.when is When.AUTO

    def test_bad_env_value(self):
        with pytest.raises(ConfigError, match="MINT_WHEN"):
            load_config(environ={"MINT_WHEN": "often"})

    def test_unknown_override(self):
        with pytest.raises(ConfigError, match="Unknown setting"):
            load_config(environ={}, colour=True)

"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from manifestcheck.config import (
    CONFIG_FILE_NAME,
    LogLevel,
    ManifestCheckConfig,
    ValidationConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestValidationConfig:
    """Test ValidationConfig model."""

    def test_defaults(self):
        config = ValidationConfig()
        assert config.rules_dir is None
        assert config.platforms == []
        assert config.base_format == "w3c"
        assert config.rule_timeout is None
        assert config.fail_on_warnings is False

    def test_aliases_and_field_names(self):
        by_alias = ValidationConfig(rulesDir="rules", ruleTimeout=2.5, failOnWarnings=True)
        by_name = ValidationConfig(rules_dir="rules", rule_timeout=2.5, fail_on_warnings=True)

        assert by_alias == by_name
        assert by_alias.rules_dir == "rules"

    def test_rule_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            ValidationConfig(ruleTimeout=0)

    def test_platform_tags_must_be_plain_names(self):
        with pytest.raises(ValueError):
            ValidationConfig(platforms=["../android"])

    def test_duplicate_platforms_collapse(self):
        assert ValidationConfig(platforms=["ios", "android", "ios"]).platforms == ["ios", "android"]


class TestManifestCheckConfig:
    """Test complete ManifestCheckConfig model."""

    def test_config_from_dict(self):
        config_data = {
            "validation": {
                "rulesDir": "custom-rules",
                "platforms": ["android", "web"],
                "failOnWarnings": True
            },
            "logging": {"level": "debug"}
        }

        config = ManifestCheckConfig(**config_data)
        assert config.validation.rules_dir == "custom-rules"
        assert config.validation.platforms == ["android", "web"]
        assert config.validation.fail_on_warnings is True
        assert config.logging.level == LogLevel.DEBUG.value

    def test_config_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            ManifestCheckConfig(invalid_field="should-fail")

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            ManifestCheckConfig(logging={"level": "verbose"})


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                json.dump({"validation": {"platforms": ["ios"]}}, f)

            config = load_config(config_file)
            assert config.validation.platforms == ["ios"]

    def test_load_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            config = load_config(Path(temp_dir) / "nonexistent.json")
            assert config == create_default_config()

    def test_load_config_invalid_json(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                f.write("{invalid json")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_structure(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            with open(config_file, "w") as f:
                json.dump({"invalid": "structure"}, f)

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_parent_dir(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            config_file = temp_path / CONFIG_FILE_NAME
            config_file.touch()

            sub_dir = temp_path / "a" / "b"
            sub_dir.mkdir(parents=True)

            assert find_config_file(sub_dir) == config_file.resolve()

    def test_zero_config_operation(self):
        with patch("manifestcheck.config.find_config_file", return_value=None):
            config = load_config()
            assert config.validation.platforms == []
            assert config.logging.level == LogLevel.WARN.value

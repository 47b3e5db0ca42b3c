"""Tests for configuration loading and validation."""

import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from solid_principles.config import (
    AppConfig,
    ConfigurationManager,
    LoggingConfig,
    ReadmeConfig,
    validate_config,
)
from solid_principles.config.manager import CONFIG_ENV_VAR
from solid_principles.domain.exceptions import ConfigurationError


@pytest.fixture
def write_config(tmp_path):
    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return str(path)
    return _write


class TestSchemas:
    """Test configuration schema defaults and validators."""

    def test_defaults(self):
        config = AppConfig()

        assert config.logging.level == "WARNING"
        assert config.logging.destination == "console"
        assert config.readme.path == "README.md"
        assert config.readme.language == "python"
        assert config.output_format == "json"

    def test_log_level_is_upper_cased(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")

    def test_invalid_destination(self):
        with pytest.raises(ValidationError):
            LoggingConfig(destination="syslog")

    def test_invalid_output_format(self):
        with pytest.raises(ValidationError):
            AppConfig(output_format="xml")

    def test_empty_readme_path_rejected(self):
        with pytest.raises(ValidationError):
            ReadmeConfig(path="  ")

    def test_validate_config_builds_nested_models(self):
        config = validate_config({"logging": {"level": "info"}, "readme": {"path": "docs/README.md"}})

        assert isinstance(config, AppConfig)
        assert config.logging.level == "INFO"
        assert config.readme.path == "docs/README.md"

    def test_validate_config_rejects_bad_values(self):
        with pytest.raises(ValidationError):
            validate_config({"output_format": "xml"})


class TestConfigurationManager:
    """Test ConfigurationManager loading."""

    def test_no_path_uses_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigurationManager()
            assert manager.config_path is None
            assert manager.get_config() == AppConfig()

    def test_loads_file(self, write_config):
        path = write_config({"output_format": "yaml", "readme": {"path": "docs/README.md"}})

        config = ConfigurationManager(path).get_config()

        assert config.output_format == "yaml"
        assert config.readme.path == "docs/README.md"

    def test_env_var_selects_file(self, write_config):
        path = write_config({"output_format": "table"})

        with patch.dict(os.environ, {CONFIG_ENV_VAR: path}):
            assert ConfigurationManager().get_config().output_format == "table"

    def test_expands_environment_variables(self, write_config):
        path = write_config({"readme": {"path": "${DOCS_DIR:docs}/README.md"}})

        with patch.dict(os.environ, {"DOCS_DIR": "/srv/docs"}):
            config = ConfigurationManager(path).get_config()

        assert config.readme.path == "/srv/docs/README.md"

    def test_get_dotted_key(self, write_config):
        path = write_config({"logging": {"level": "info"}})
        manager = ConfigurationManager(path)

        assert manager.get("logging.level") == "INFO"
        assert manager.get("logging.missing", "fallback") == "fallback"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager(str(tmp_path / "absent.json")).get_config()

    def test_malformed_json(self, write_config):
        path = write_config("{not json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigurationManager(path).get_config()

    def test_non_object_root(self, write_config):
        path = write_config([1, 2, 3])

        with pytest.raises(ConfigurationError, match="must be an object"):
            ConfigurationManager(path).get_config()

    def test_invalid_values(self, write_config):
        path = write_config({"logging": {"level": "LOUD"}})

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigurationManager(path).get_config()

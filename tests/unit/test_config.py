"""Unit tests for configuration management."""

import logging
from pathlib import Path

import pytest
import structlog

from stoic.config.defaults import LoggingParams, SanitizerParams, get_default_config
from stoic.config.loader import ConfigLoader
from stoic.config.validation import ConfigValidator
from stoic.core.sanitizer import Sanitizer
from stoic.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.sanitizer.failure_name_prefix == "Stoic"
        assert config.sanitizer.max_depth is None
        assert config.sanitizer.log_cycles is True
        assert config.logging.level == "INFO"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self, tmp_path: Path) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create(tmp_path)
        assert loader.config_dir == tmp_path

    def test_defaults_only(self, tmp_path: Path) -> None:
        """Missing stoic.yaml falls back to defaults."""
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["sanitizer"]["failure_name_prefix"] == "Stoic"
        assert config["logging"]["format_json"] is False

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        """stoic.yaml values take precedence over defaults."""
        (tmp_path / "stoic.yaml").write_text(
            "sanitizer:\n  failure_name_prefix: Frozen\n  max_depth: 10\n"
        )

        params = ConfigLoader.create(tmp_path).sanitizer_params()

        assert params.failure_name_prefix == "Frozen"
        assert params.max_depth == 10
        assert params.log_cycles is True

    def test_call_site_overrides_win(self, tmp_path: Path) -> None:
        """Call-site overrides beat the file and defaults."""
        (tmp_path / "stoic.yaml").write_text("sanitizer:\n  failure_name_prefix: Frozen\n")

        params = ConfigLoader.create(tmp_path).sanitizer_params(
            {"sanitizer": {"failure_name_prefix": "Inert"}}
        )

        assert params.failure_name_prefix == "Inert"

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / "stoic.yaml").write_text("")
        assert ConfigLoader.create(tmp_path).load_file_config() == {}

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        (tmp_path / "stoic.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_file_config()

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        (tmp_path / "stoic.yaml").write_text("sanitizer:\n  max_depth: -1\n  bogus: 1\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load()

        fields = {error.field for error in exc_info.value.errors}
        assert fields == {"max_depth", "bogus"}

    def test_sanitizer_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "stoic.yaml").write_text("sanitizer:\n  include_trace: false\n")

        sanitizer = Sanitizer.from_config(tmp_path, overrides={"failure_name_prefix": "X"})

        assert sanitizer.params == SanitizerParams(failure_name_prefix="X", include_trace=False)
        assert sanitizer.create(ValueError("v")).name == "XValueError"


class TestLoggingSection:
    """The logging section of stoic.yaml drives structlog configuration."""

    def setup_method(self) -> None:
        self.root_level = logging.getLogger().level

    def teardown_method(self) -> None:
        logging.getLogger().setLevel(self.root_level)
        structlog.reset_defaults()

    def test_logging_params_loaded(self, tmp_path: Path) -> None:
        (tmp_path / "stoic.yaml").write_text("logging:\n  level: ERROR\n  format_json: true\n")

        params = ConfigLoader.create(tmp_path).logging_params()

        assert params == LoggingParams(level="ERROR", format_json=True)

    def test_from_config_applies_logging_section(self, tmp_path: Path) -> None:
        (tmp_path / "stoic.yaml").write_text("logging:\n  level: ERROR\n  format_json: true\n")

        Sanitizer.from_config(tmp_path, setup_logging=True)

        assert logging.getLogger().level == logging.ERROR
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_logging_is_left_alone_by_default(self, tmp_path: Path) -> None:
        (tmp_path / "stoic.yaml").write_text("logging:\n  level: ERROR\n")

        Sanitizer.from_config(tmp_path)

        assert logging.getLogger().level == self.root_level


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_sanitizer_params(self) -> None:
        params = {"failure_name_prefix": "S", "max_depth": None, "log_cycles": False}
        assert ConfigValidator.validate_sanitizer_params(params) == []

    @pytest.mark.parametrize("value", [0, -3, 1.5, "10", True])
    def test_invalid_max_depth(self, value) -> None:
        errors = ConfigValidator.validate_sanitizer_params({"max_depth": value})
        assert len(errors) == 1
        assert errors[0].field == "max_depth"

    def test_invalid_flags(self) -> None:
        errors = ConfigValidator.validate_sanitizer_params(
            {"log_cycles": "yes", "include_trace": 1, "failure_name_prefix": 3}
        )
        assert {error.field for error in errors} == {"log_cycles", "include_trace", "failure_name_prefix"}

    def test_logging_params(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "no"})
        assert {error.field for error in errors} == {"level", "format_json"}

    def test_non_mapping_sections(self) -> None:
        errors = ConfigValidator.validate_config({"sanitizer": [1], "logging": "INFO"})
        assert {error.field for error in errors} == {"sanitizer", "logging"}

"""Unit tests for configuration management."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from state_manager.config.defaults import get_default_config
from state_manager.config.loader import ConfigLoader, load_config
from state_manager.config.validation import ConfigValidator
from state_manager.errors import ConfigurationError
from state_manager.state.machine import StateManager


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.sentinel.name == "dummyState"
        assert config.logging.level == "INFO"
        assert config.manager.machine_id == "state_manager"
        assert config.manager.log_runs is False


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_missing_default_file(self, tmp_path: Path) -> None:
        """No file means defaults only."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["sentinel"]["name"] == "dummyState"
        assert config["manager"]["log_runs"] is False

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        """An explicitly named file must exist."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load("absent.yaml")

        assert exc_info.value.source.endswith("absent.yaml")

    def test_yaml_file_and_overrides(self, tmp_path: Path) -> None:
        """Overrides beat the file, the file beats defaults."""
        (tmp_path / "state_manager.yaml").write_text(
            "sentinel:\n"
            "  name: idleFallback\n"
            "manager:\n"
            "  machine_id: arm\n"
            "  log_runs: true\n"
        )
        loader = ConfigLoader.create(tmp_path)

        config = loader.load(overrides={"manager": {"machine_id": "gripper"}})

        assert config.sentinel.name == "idleFallback"
        assert config.manager.machine_id == "gripper"
        assert config.manager.log_runs is True
        assert config.logging.level == "INFO"

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty YAML file yields defaults."""
        (tmp_path / "empty.yaml").write_text("")

        config = ConfigLoader.create(tmp_path).load("empty.yaml")

        assert config == get_default_config()

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """The root document must be a mapping."""
        (tmp_path / "list.yaml").write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load("list.yaml")

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Validation errors are collected on the exception."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load(overrides={"sentinel": {"name": ""}, "logging": {"level": "LOUD"}})

        fields = {e.field for e in exc_info.value.errors}
        assert fields == {"sentinel.name", "logging.level"}

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Unknown keys in a section are rejected."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load(overrides={"manager": {"colour": "blue"}})

    def test_load_config_builds_manager(self, tmp_path: Path) -> None:
        """Loaded configuration drives the manager."""
        config_file = tmp_path / "robot.yaml"
        config_file.write_text("sentinel:\n  name: parked\n")

        sm = StateManager.from_config(load_config(config_file))

        assert sm.get_active_state_name() == "parked"
        assert sm.run() is False

    def test_from_config_applies_logging_level(self, tmp_path: Path) -> None:
        """The logging section sets the root logger level."""
        config_file = tmp_path / "quiet.yaml"
        config_file.write_text("logging:\n  level: ERROR\n  format_json: true\n")
        root = logging.getLogger()
        previous = root.level

        try:
            StateManager.from_config(load_config(config_file))
            assert root.level == logging.ERROR
        finally:
            root.setLevel(previous)

    def test_plain_construction_leaves_logging_alone(self) -> None:
        """Only from_config touches logging configuration."""
        with patch("state_manager.state.machine.configure_logging_from") as mock_configure:
            StateManager(get_default_config())

        mock_configure.assert_not_called()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self) -> None:
        """Default values pass validation."""
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config(overrides={})) == []

    def test_invalid_sentinel_name(self) -> None:
        """Sentinel name must be a non-empty string."""
        errors = ConfigValidator.validate_sentinel_params({"name": 5})
        assert len(errors) == 1
        assert errors[0].field == "sentinel.name"

    def test_invalid_logging_flags(self) -> None:
        """Logging flags must be booleans."""
        errors = ConfigValidator.validate_logging_params({"format_json": "yes", "include_caller": 1})
        assert [e.field for e in errors] == ["logging.format_json", "logging.include_caller"]

    def test_lowercase_level_accepted(self) -> None:
        """Log levels are case-insensitive."""
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []

    def test_invalid_manager_params(self) -> None:
        """Manager parameters are type-checked."""
        errors = ConfigValidator.validate_manager_params({"machine_id": "", "log_runs": "no"})
        assert len(errors) == 2

    def test_section_must_be_mapping(self) -> None:
        """Sections other than mappings are rejected."""
        errors = ConfigValidator.validate_config({"manager": "fast"})
        assert errors[0].field == "manager"

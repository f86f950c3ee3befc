"""
Tests for Configuration Module

Tests for primer/core/config.py
"""

import pytest
import json
from pathlib import Path

from primer.core.config import (
    PrimerConfig,
    DemoConfig,
    GameConfig,
    ApiConfig,
    apply_env_overrides,
    get_config,
    load_config,
    save_config,
    set_config,
    get_default_config
)
from primer.core.exceptions import ConfigurationError, InvalidConfigError, MissingConfigError


class TestPrimerConfig:
    """Tests for PrimerConfig class."""

    def test_default_config(self):
        """Test default configuration creation."""
        config = get_default_config()

        assert config.app_name == "Python Primer"
        assert config.version == "1.0.0"
        assert config.demos.time_scale == 1.0
        assert config.game.computer_mark == "O"
        assert config.api.port == 8000
        assert config.api.demo_run_limit == "30/minute"
        assert config.api.game_create_limit == "60/minute"
        assert config.api.max_games == 100

    def test_config_from_dict(self, sample_config):
        """Test creating config from dictionary."""
        config = PrimerConfig.from_dict(sample_config)

        assert config.logs_dir == Path("custom_logs")
        assert config.demos.time_scale == 0.5
        assert config.demos.seed == 7
        assert config.game.vs_computer is True
        assert config.game.computer_mark == "X"
        assert config.api.host == "0.0.0.0"
        assert config.api.cors_origins == ["http://example.com"]
        assert config.api.max_games == 25
        assert config.api.game_create_limit == "10/minute"

    def test_partial_dict_keeps_defaults(self):
        config = PrimerConfig.from_dict({"demos": {"seed": 1}})

        assert config.demos.seed == 1
        assert config.demos.time_scale == 1.0
        assert config.api.port == 8000

    def test_config_to_dict_round_trip(self, sample_config):
        """Test converting config to dictionary and back."""
        config = PrimerConfig.from_dict(sample_config)
        restored = PrimerConfig.from_dict(config.to_dict())

        assert restored == config


class TestValidation:
    """Tests for sub-config validation."""

    def test_negative_time_scale_rejected(self):
        with pytest.raises(InvalidConfigError):
            DemoConfig(time_scale=-1).validate()

    def test_zero_time_scale_allowed(self):
        DemoConfig(time_scale=0).validate()

    def test_bad_computer_mark_rejected(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            GameConfig(computer_mark="Z").validate()
        assert exc_info.value.details == {"computer_mark": "Z"}

    def test_bad_port_rejected(self):
        with pytest.raises(InvalidConfigError):
            ApiConfig(port=70000).validate()

    def test_empty_game_store_rejected(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            ApiConfig(max_games=0).validate()
        assert exc_info.value.details == {"max_games": 0}


class TestLoadSaveConfig:
    """Tests for config loading and saving."""

    def test_load_config_from_file(self, temp_dir, sample_config):
        """Test loading config from JSON file."""
        config_path = temp_dir / "test_config.json"

        with open(config_path, 'w') as f:
            json.dump(sample_config, f)

        config = load_config(str(config_path))

        assert config.api.port == 9000
        assert config.demos.seed == 7

    def test_load_config_missing_file(self, temp_dir):
        """Test loading config from non-existent file returns default."""
        config = load_config(str(temp_dir / "nonexistent.json"))

        assert config.app_name == "Python Primer"
        assert config.demos.time_scale == 1.0

    def test_load_config_missing_required_file(self, temp_dir):
        missing = temp_dir / "nonexistent.json"

        with pytest.raises(MissingConfigError) as exc_info:
            load_config(missing, required=True)
        assert exc_info.value.details == {"path": str(missing)}

    def test_load_config_invalid_json(self, temp_dir):
        config_path = temp_dir / "broken.json"
        config_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidConfigError):
            load_config(config_path)

    def test_load_config_invalid_value(self, temp_dir):
        config_path = temp_dir / "bad.json"
        config_path.write_text(json.dumps({"demos": {"time_scale": -2}}), encoding="utf-8")

        with pytest.raises(InvalidConfigError):
            load_config(config_path)

    def test_load_config_non_numeric_value(self, temp_dir):
        config_path = temp_dir / "bad.json"
        config_path.write_text(json.dumps({"api": {"port": "eighty"}}), encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_save_config(self, temp_dir):
        """Test saving config to file."""
        config = get_default_config()
        config_path = temp_dir / "nested" / "saved_config.json"

        save_config(config, str(config_path))

        assert config_path.exists()
        with open(config_path) as f:
            data = json.load(f)
        assert data["app_name"] == "Python Primer"
        assert data["api"]["port"] == 8000


class TestEnvironmentOverrides:
    """Tests for PRIMER_* environment variables."""

    def test_overrides_applied(self, monkeypatch):
        monkeypatch.setenv("PRIMER_TIME_SCALE", "0.25")
        monkeypatch.setenv("PRIMER_SEED", "11")
        monkeypatch.setenv("PRIMER_API_PORT", "8123")

        config = apply_env_overrides(get_default_config())

        assert config.demos.time_scale == 0.25
        assert config.demos.seed == 11
        assert config.game.seed == 11
        assert config.api.port == 8123

    def test_invalid_override(self, monkeypatch):
        monkeypatch.setenv("PRIMER_SEED", "not-a-number")

        with pytest.raises(InvalidConfigError):
            apply_env_overrides(get_default_config())

    def test_load_config_applies_overrides(self, temp_dir, monkeypatch):
        monkeypatch.setenv("PRIMER_TIME_SCALE", "0")

        config = load_config(temp_dir / "missing.json")

        assert config.demos.time_scale == 0.0


class TestGlobalConfig:
    def test_set_and_get(self):
        config = get_default_config()
        config.app_name = "Custom"
        set_config(config)

        assert get_config() is config

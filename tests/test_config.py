"""Tests for Trainer Configuration System."""

import pytest
import yaml
from pydantic import ValidationError

from typetrainer.config import TrainerSettings, load_settings


def write_yaml(path, data) -> str:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestTrainerSettings:
    """Test trainer settings defaults and validation."""

    def test_default_settings(self):
        """Test default settings."""
        settings = TrainerSettings()

        assert settings.config_file is None
        assert settings.poll_interval_ms == 10
        assert settings.completion_pause_seconds == 1.0
        assert settings.log_file == "typetrainer.log"
        assert settings.log_level == "INFO"

    def test_custom_settings(self):
        """Test explicit parameters."""
        settings = TrainerSettings(
            poll_interval_ms=25,
            completion_pause_seconds=0.0,
            log_file=None,
            log_level="DEBUG",
        )

        assert settings.poll_interval_ms == 25
        assert settings.completion_pause_seconds == 0.0
        assert settings.log_file is None
        assert settings.log_level == "DEBUG"

    def test_poll_interval_in_seconds(self):
        """Test millisecond to second conversion."""
        assert TrainerSettings(poll_interval_ms=10).poll_interval == pytest.approx(0.01)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"poll_interval_ms": 0},
            {"completion_pause_seconds": -1.0},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test validation errors."""
        with pytest.raises(ValidationError):
            TrainerSettings(**overrides)


class TestEnvironmentSettings:
    """Test TYPETRAINER_* environment variables."""

    def test_env_override(self, monkeypatch):
        """Test environment variables are read."""
        monkeypatch.setenv("TYPETRAINER_POLL_INTERVAL_MS", "40")
        monkeypatch.setenv("TYPETRAINER_LOG_LEVEL", "WARNING")

        settings = TrainerSettings()

        assert settings.poll_interval_ms == 40
        assert settings.log_level == "WARNING"

    def test_explicit_beats_env(self, monkeypatch):
        """Test explicit parameters win over environment."""
        monkeypatch.setenv("TYPETRAINER_POLL_INTERVAL_MS", "40")

        assert TrainerSettings(poll_interval_ms=5).poll_interval_ms == 5


class TestYamlSettings:
    """Test YAML config file loading."""

    def test_load_from_file(self, tmp_path):
        """Test loading values from YAML."""
        config = write_yaml(
            tmp_path / "typetrainer.yaml",
            {"poll_interval_ms": 20, "completion_pause_seconds": 0.5},
        )

        settings = TrainerSettings(config_file=config)

        assert settings.config_file == config
        assert settings.poll_interval_ms == 20
        assert settings.completion_pause_seconds == 0.5

    def test_config_file_from_env(self, tmp_path, monkeypatch):
        """Test TYPETRAINER_CONFIG_FILE selects the YAML file."""
        config = write_yaml(tmp_path / "typetrainer.yaml", {"log_level": "ERROR"})
        monkeypatch.setenv("TYPETRAINER_CONFIG_FILE", config)

        settings = TrainerSettings()

        assert settings.log_level == "ERROR"
        assert settings.config_file == config

    def test_env_beats_file(self, tmp_path, monkeypatch):
        """Test environment variables win over the YAML file."""
        config = write_yaml(tmp_path / "typetrainer.yaml", {"poll_interval_ms": 20})
        monkeypatch.setenv("TYPETRAINER_POLL_INTERVAL_MS", "30")

        assert TrainerSettings(config_file=config).poll_interval_ms == 30

    def test_dotenv_beats_file(self, tmp_path, monkeypatch):
        """Test .env entries win over the YAML file."""
        config = write_yaml(tmp_path / "typetrainer.yaml", {"poll_interval_ms": 20})
        (tmp_path / ".env").write_text(
            "TYPETRAINER_POLL_INTERVAL_MS=30\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert TrainerSettings().poll_interval_ms == 30
        assert TrainerSettings(config_file=config).poll_interval_ms == 30

    def test_config_file_from_dotenv(self, tmp_path, monkeypatch):
        """Test TYPETRAINER_CONFIG_FILE may come from the .env file."""
        config = write_yaml(tmp_path / "typetrainer.yaml", {"log_level": "ERROR"})
        (tmp_path / ".env").write_text(
            f"TYPETRAINER_CONFIG_FILE={config}\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert TrainerSettings().log_level == "ERROR"

    def test_explicit_beats_file(self, tmp_path):
        """Test explicit parameters win over the YAML file."""
        config = write_yaml(tmp_path / "typetrainer.yaml", {"poll_interval_ms": 20})

        settings = TrainerSettings(config_file=config, poll_interval_ms=50)

        assert settings.poll_interval_ms == 50

    def test_empty_file(self, tmp_path):
        """Test an empty YAML file yields defaults."""
        config = tmp_path / "empty.yaml"
        config.write_text("", encoding="utf-8")

        assert TrainerSettings(config_file=str(config)).poll_interval_ms == 10

    def test_missing_file(self, tmp_path):
        """Test a missing YAML file is reported."""
        with pytest.raises(FileNotFoundError):
            TrainerSettings(config_file=str(tmp_path / "nope.yaml"))

    def test_non_mapping_file(self, tmp_path):
        """Test a YAML list at the top level is rejected."""
        config = tmp_path / "list.yaml"
        config.write_text("- a\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            TrainerSettings(config_file=str(config))

    def test_unknown_keys_are_ignored(self, tmp_path):
        """Test extra YAML keys do not fail validation."""
        config = write_yaml(tmp_path / "typetrainer.yaml", {"theme": "dark"})

        assert TrainerSettings(config_file=config).poll_interval_ms == 10


class TestLoadSettings:
    """Test the load_settings helper."""

    def test_load_settings_with_overrides(self, tmp_path):
        config = write_yaml(tmp_path / "typetrainer.yaml", {"log_level": "DEBUG"})

        settings = load_settings(config_file=config, completion_pause_seconds=0.0)

        assert settings.log_level == "DEBUG"
        assert settings.completion_pause_seconds == 0.0

    def test_summary(self):
        summary = TrainerSettings(log_file=None).summary()

        assert "Typing Trainer Configuration:" in summary
        assert "Poll interval: 10ms" in summary
        assert "Log file: -" in summary

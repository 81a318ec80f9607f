"""Trainer Configuration Module."""

from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    EnvSettingsSource,
    SettingsConfigDict,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TrainerSettings(BaseSettings):
    """
    Typing trainer configuration.

    Configuration can be loaded from:
    1. Environment variables (TYPETRAINER_*)
    2. .env file
    3. YAML config file (via config_file or TYPETRAINER_CONFIG_FILE)
    4. Direct instantiation with parameters

    Priority (highest to lowest):
    1. Explicitly passed parameters
    2. Environment variables
    3. .env file
    4. Config file
    5. Defaults

    Example usage:

        # From environment variables
        settings = TrainerSettings()

        # From config file
        settings = TrainerSettings(config_file="typetrainer.yaml")

        # Direct configuration
        settings = TrainerSettings(completion_pause_seconds=0.0)
    """

    config_file: Optional[str] = Field(
        default=None,
        description="Path to YAML config file",
    )
    poll_interval_ms: int = Field(
        default=10, ge=1, description="Input poll timeout in milliseconds"
    )
    completion_pause_seconds: float = Field(
        default=1.0, ge=0, description="Pause after the final render"
    )
    log_file: Optional[str] = Field(
        default="typetrainer.log",
        description="Log file path (None disables log output)",
    )
    log_level: LogLevel = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="TYPETRAINER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **data: Any):
        """
        Initialize settings.

        If config_file is provided, or TYPETRAINER_CONFIG_FILE is set in the
        environment or .env file, the YAML file is merged below both of them.
        """
        external = self._external_values()
        config_file = data.get("config_file") or external.get("config_file")
        if config_file:
            yaml_data = {
                key: value
                for key, value in self._load_yaml(config_file).items()
                if key not in external
            }
            super().__init__(**{**yaml_data, **data, "config_file": config_file})
        else:
            super().__init__(**data)

    @property
    def poll_interval(self) -> float:
        """Poll timeout in seconds."""
        return self.poll_interval_ms / 1000.0

    @classmethod
    def _external_values(cls) -> dict[str, Any]:
        """Return fields set through TYPETRAINER_* variables or the .env file."""
        values: dict[str, Any] = {}
        for source in (DotEnvSettingsSource(cls), EnvSettingsSource(cls)):
            values.update(source())
        return values

    @staticmethod
    def _load_yaml(file_path: str) -> dict[str, Any]:
        """
        Read a YAML settings file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
            ValueError: If the top level is not a mapping of setting names
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Config file {file_path} must contain a mapping, "
                f"got {type(data).__name__}"
            )

        return data

    def summary(self) -> str:
        """
        Get human-readable configuration summary.

        Returns:
            Formatted configuration summary
        """
        lines = [
            "Typing Trainer Configuration:",
            f"  Config file: {self.config_file or '-'}",
            f"  Poll interval: {self.poll_interval_ms}ms",
            f"  Completion pause: {self.completion_pause_seconds}s",
            f"  Log file: {self.log_file or '-'}",
            f"  Log level: {self.log_level}",
        ]
        return "\n".join(lines)


def load_settings(
    config_file: Optional[str] = None, **overrides: Any
) -> TrainerSettings:
    """
    Load trainer settings with optional overrides.

    Args:
        config_file: Optional path to YAML config file
        **overrides: Optional setting overrides

    Returns:
        TrainerSettings instance
    """
    if config_file:
        overrides["config_file"] = config_file

    return TrainerSettings(**overrides)

"""Configuration management for TaskTrack CLI."""

import json
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from tasktrack_cli.adapters import DEFAULT_TASK_FILE
from tasktrack_cli.utils.logger import get_logger


class StorageConfig(BaseModel):
    """Storage configuration."""

    file: str = Field(default=DEFAULT_TASK_FILE)


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)
    clear_screen: bool = Field(default=True)
    recent_count: int = Field(default=5, ge=1, le=50)


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def task_file(self) -> Path:
        """Task file path; relative paths resolve against the working directory."""
        return Path(self.storage.file).expanduser()


class ConfigManager:
    """Manages TaskTrack CLI configuration."""

    def __init__(self) -> None:
        self.config_dir = Path(user_config_dir("tasktrack-cli"))
        self.config_file = self.config_dir / "config.json"
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if not self.config_file.exists():
            return Config()
        try:
            with open(self.config_file, "r") as f:
                data = json.load(f)
            return Config(**data)
        except (OSError, ValueError, TypeError, ValidationError) as e:
            get_logger().warning("ignoring unreadable config %s: %s", self.config_file, e)
            return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)
        self._config = config

    def seed_config(self) -> None:
        """Write the current settings on first run so users have a file to edit."""
        if self.config_file.exists():
            return
        try:
            self.save_config()
        except OSError as e:
            get_logger().warning("cannot write default config %s: %s", self.config_file, e)
            return
        get_logger().info("wrote default config to %s", self.config_file)


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager

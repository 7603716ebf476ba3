"""Launcher configuration stored as YAML."""

from __future__ import annotations

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Default configuration and cache locations
CONFIG_DIR = Path.home() / ".config" / "launchbox"
CACHE_DIR = Path.home() / ".cache" / "launchbox"

DEFAULT_APP_DIRS = [
    "/usr/share/applications",
    "~/.local/share/applications",
]


class ConfigError(Exception):
    """Configuration file could not be read."""

    pass


class LaunchboxConfig(BaseModel):
    """Settings for one launcher.

    Only ``window_size`` is used by the search core; everything else is read
    by the loader, the executor and the terminal front end.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = "launchbox"
    window_size: int = Field(default=10, ge=1, alias="rows")
    terminal: str = "xterm"
    disable_cache: bool = False
    disable_apps: bool = False
    disable_icons: bool = False
    app_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_APP_DIRS))
    doc_dirs: list[str] | None = None
    doc_ext: list[str] | None = None
    bin_dirs: list[str] | None = None
    bin_ext: list[str] | None = None
    highlight_fg: str | None = None
    highlight_bg: str | None = None
    filter_display_seconds: float = Field(default=1.0, gt=0)

    def cache_file_name(self) -> str:
        """File name for the item cache, derived from the launcher name."""
        return "launchbox_" + re.sub(r"[^A-Za-z]", "x", self.name)


class ConfigManager:
    """Loads and saves the launcher configuration."""

    def __init__(self, config_dir: Path | None = None, cache_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Directory holding config.yaml. Defaults to ~/.config/launchbox.
            cache_dir: Directory for the item cache. Defaults to ~/.cache/launchbox.
        """
        self.config_dir = config_dir or CONFIG_DIR
        self.cache_dir = cache_dir or CACHE_DIR
        self.config_file = self.config_dir / "config.yaml"

    @classmethod
    def create(cls, config_dir: Path, cache_dir: Path | None = None) -> "ConfigManager":
        """Create a config manager with custom directories."""
        return cls(config_dir=config_dir, cache_dir=cache_dir)

    @classmethod
    def create_default(cls, cache_dir: Path | None = None) -> "ConfigManager":
        """Create a config manager with the default config directory."""
        return cls(cache_dir=cache_dir)

    def load(self) -> LaunchboxConfig:
        """Load the configuration from disk.

        Returns:
            The parsed configuration, or defaults if no file exists.

        Raises:
            ConfigError: If the file is not valid YAML or fails validation.
        """
        if not self.config_file.exists():
            return LaunchboxConfig()

        try:
            data = yaml.safe_load(self.config_file.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {self.config_file}")

        try:
            return LaunchboxConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_file}: {e}") from e

    def save(self, config: LaunchboxConfig) -> None:
        """Write the configuration to disk."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        data = config.model_dump(exclude_none=True)
        self.config_file.write_text(yaml.safe_dump(data, sort_keys=False))

    def cache_file(self, config: LaunchboxConfig) -> Path:
        """Path of the persisted item cache for ``config``."""
        return self.cache_dir / config.cache_file_name()

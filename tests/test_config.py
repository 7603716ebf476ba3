"""Tests for config module."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from launchbox.config import ConfigError, ConfigManager, LaunchboxConfig


@pytest.fixture
def manager(tmp_path: Path) -> ConfigManager:
    """Create a config manager in a temp directory."""
    return ConfigManager.create(tmp_path / "config", tmp_path / "cache")


class TestLaunchboxConfig:
    """Tests for LaunchboxConfig model."""

    def test_defaults(self) -> None:
        """Test default settings."""
        config = LaunchboxConfig()
        assert config.name == "launchbox"
        assert config.window_size == 10
        assert config.terminal == "xterm"
        assert config.doc_dirs is None
        assert config.filter_display_seconds == 1.0

    def test_rows_alias(self) -> None:
        """Test window_size can be given as rows."""
        assert LaunchboxConfig.model_validate({"rows": 4}).window_size == 4
        assert LaunchboxConfig(window_size=6).window_size == 6

    def test_window_size_must_be_positive(self) -> None:
        """Test a zero-row window is rejected."""
        with pytest.raises(ValueError):
            LaunchboxConfig(window_size=0)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("launchbox", "launchbox_launchbox"),
            ("my box 2", "launchbox_myxboxxx"),
            ("Apps", "launchbox_Apps"),
        ],
    )
    def test_cache_file_name(self, name: str, expected: str) -> None:
        """Test non-letters in the name are replaced."""
        assert LaunchboxConfig(name=name).cache_file_name() == expected


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_missing_file_gives_defaults(self, manager: ConfigManager) -> None:
        """Test loading without a file returns defaults."""
        assert manager.load() == LaunchboxConfig()

    def test_load(self, manager: ConfigManager) -> None:
        """Test loading settings from YAML."""
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text(
            "name: work\nrows: 5\ndoc_dirs:\n  - ~/Documents\n  - -~/Documents/old\n"
        )

        config = manager.load()

        assert config.name == "work"
        assert config.window_size == 5
        assert config.doc_dirs == ["~/Documents", "-~/Documents/old"]

    def test_empty_file_gives_defaults(self, manager: ConfigManager) -> None:
        """Test an empty file is treated as no settings."""
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text("")
        assert manager.load().name == "launchbox"

    def test_invalid_yaml(self, manager: ConfigManager) -> None:
        """Test malformed YAML raises ConfigError."""
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text("rows: [1, 2\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            manager.load()

    def test_non_mapping(self, manager: ConfigManager) -> None:
        """Test a top-level list raises ConfigError."""
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text("- rows\n")
        with pytest.raises(ConfigError, match="Expected a mapping"):
            manager.load()

    def test_invalid_value(self, manager: ConfigManager) -> None:
        """Test a failing field raises ConfigError."""
        manager.config_dir.mkdir(parents=True)
        manager.config_file.write_text("rows: 0\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            manager.load()

    def test_save_and_load(self, manager: ConfigManager) -> None:
        """Test saved settings load back unchanged."""
        config = LaunchboxConfig(name="work", window_size=7, bin_dirs=["/usr/bin"])

        manager.save(config)

        data = yaml.safe_load(manager.config_file.read_text())
        assert "doc_dirs" not in data
        assert manager.load() == config

    def test_cache_file(self, manager: ConfigManager, tmp_path: Path) -> None:
        """Test the cache path lives in the cache dir."""
        path = manager.cache_file(LaunchboxConfig(name="box"))
        assert path == tmp_path / "cache" / "launchbox_box"

    def test_default_directories(self, temp_home: Path) -> None:
        """Test the default manager uses the module-level locations."""
        from launchbox import config as config_module

        manager = ConfigManager.create_default()
        assert manager.config_dir == config_module.CONFIG_DIR
        assert manager.config_file.name == "config.yaml"

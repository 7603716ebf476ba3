"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands and
the terminal front end can be tested with test doubles in place of the
filesystem scanner and the process launcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from launchbox.config import ConfigManager, LaunchboxConfig
from launchbox.protocols import CatalogLoader, CommandExecutor
from launchbox.session import Session

if TYPE_CHECKING:
    from launchbox.protocols import RowRenderer


@dataclass
class AppContext:
    """Container for application dependencies.

    Dependencies are typed using Protocol interfaces, not concrete classes.
    """

    config: LaunchboxConfig
    loader: CatalogLoader
    executor: CommandExecutor
    config_manager: ConfigManager | None = None

    def create_session(self, renderer: RowRenderer | None = None) -> Session:
        """Build a session over a freshly loaded catalog.

        Raises:
            CatalogLoadError: If the initial item list cannot be loaded.
        """
        return Session(
            self.loader.load(),
            window_size=self.config.window_size,
            renderer=renderer,
            loader=self.loader,
            executor=self.executor,
            name=self.config.name,
        )


def create_context(
    config_dir: Path | None = None,
    cache_dir: Path | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_dir: Override configuration directory.
        cache_dir: Override item cache directory.

    Returns:
        Configured AppContext with all dependencies.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    from launchbox.discovery import CatalogProvider, Discovery
    from launchbox.item_cache import ItemCacheFile
    from launchbox.launcher import SubprocessLauncher

    manager = (
        ConfigManager.create(config_dir, cache_dir)
        if config_dir
        else ConfigManager.create_default(cache_dir)
    )
    config = manager.load()
    cache_file = None if config.disable_cache else ItemCacheFile(manager.cache_file(config))
    loader = CatalogProvider(Discovery.create(config), cache_file)

    return AppContext(
        config=config,
        loader=loader,
        executor=SubprocessLauncher(),
        config_manager=manager,
    )

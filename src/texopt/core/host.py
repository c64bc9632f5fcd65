"""Minimal plugin host.

Owns the server root directory and the data store under it, instantiates
plugins in load order, and fires their ``on_ready`` callback once.
"""

from pathlib import Path

from loguru import logger
from platformdirs import user_data_dir

from texopt.config.store import JsonFileStore
from texopt.core.logging import disable_debug_logs
from texopt.plugins.base import TexturePlugin


class PluginHost:
    """Loads texture plugins and signals server startup to them."""

    def __init__(self, root_dir: str | Path | None = None):
        if root_dir is None:
            self._root_dir = Path(user_data_dir("TextureOptimizer", "TextureOptimizer"))
        else:
            self._root_dir = Path(root_dir)

        self._store = JsonFileStore(self._root_dir / "oxide" / "data")
        self._plugins: list[TexturePlugin] = []
        self._initialized = False

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    @property
    def store(self) -> JsonFileStore:
        return self._store

    @property
    def plugins(self) -> list[TexturePlugin]:
        return list(self._plugins)

    def load(self, plugin_cls: type[TexturePlugin]) -> TexturePlugin:
        """Instantiate a plugin against this host's store."""
        plugin = plugin_cls(self._store, self._root_dir)
        self._plugins.append(plugin)
        logger.info(f"Loaded plugin {plugin.title} v{plugin.version} by {plugin.author}")
        return plugin

    def server_initialized(self):
        """Fire on_ready on every loaded plugin, once per host."""
        if self._initialized:
            logger.warning("Server already initialized, ignoring")
            return
        self._initialized = True

        for plugin in self._plugins:
            try:
                plugin.on_ready()
            except Exception:
                logger.exception(f"{plugin.title} failed during startup")

    def shutdown(self):
        """Close debug log files opened by the plugins."""
        disable_debug_logs()
        logger.info("Plugin host shut down")

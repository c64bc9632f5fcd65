"""Base class for texture settings plugins.

A plugin is loaded by the host and receives a single parameterless
``on_ready`` call once the server has started. It resolves the shared
texture_config document, then reports the active settings to the log.
"""

from pathlib import Path

from loguru import logger

from texopt.config.materializer import ConfigMaterializer, Resolution, ResolutionPolicy
from texopt.config.store import DataStore
from texopt.core.logging import enable_debug_log
from texopt.reporting.reporter import SettingsReporter


class TexturePlugin:
    """Resolve-then-report startup routine shared by the plugin variants."""

    title = "TexturePlugin"
    author = ""
    version = "0.0.0"
    description = ""
    policy = ResolutionPolicy.SKIP_REWRITE_ON_VALID_LOAD

    def __init__(self, store: DataStore, root_dir: str | Path):
        self._store = store
        self._root_dir = Path(root_dir)
        self._materializer = ConfigMaterializer(policy=self.policy, tag=self.title)
        self._reporter = SettingsReporter(tag=self.title)

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def on_ready(self):
        """Host callback fired once after server startup."""
        self.run()

    def run(self) -> Resolution:
        """Resolve settings, enable debug logging if requested, and report."""
        resolution = self._materializer.materialize(self._store)
        settings = resolution.settings

        enable_debug_log(settings.logging, self._root_dir, tag=self.title)
        self._reporter.emit(self._reporter.report(settings))

        logger.debug(f"{self.title} applied settings from {resolution.source.value} document")
        return resolution

    def __repr__(self):
        return f"<{type(self).__name__} {self.title} v{self.version}>"

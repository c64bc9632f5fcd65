"""Reporting of resolved settings as tagged log lines.

The reporter is a pure read of a Settings value: it returns the lines in a
fixed order and never touches the data. ``emit`` hands the lines to the log.
"""

from loguru import logger

from texopt.config.schema import Settings


class SettingsReporter:
    """Builds the ordered description lines for a Settings value."""

    def __init__(self, tag: str = "TextureOptimizer"):
        self._tag = tag

    @property
    def tag(self) -> str:
        return self._tag

    def report(self, settings: Settings) -> list[str]:
        """Return one line per reported setting, in a fixed order."""
        lines = []

        if settings.streaming_enabled:
            lines.append(f"Streaming enabled with priority {settings.streaming_priority}")

        lines.append(f"Max texture size: {settings.max_texture_size}px")
        lines.append(f"MipBias: {settings.mip_bias}")

        if settings.preload_critical_textures:
            if settings.critical_textures:
                for texture in settings.critical_textures:
                    lines.append(f"Preloading critical texture: {texture}")
            else:
                lines.append("No critical textures defined for preloading.")

        async_loading = settings.async_loading
        if async_loading.enabled:
            lines.append(
                f"Async loading enabled in batches of {async_loading.batch_size} "
                f"with {async_loading.delay_between_batches_ms}ms delay"
            )

        cache = settings.cache
        if cache.enable_disk_cache:
            lines.append(
                f"Cache enabled in folder {cache.cache_folder} "
                f"with {cache.max_cache_size_mb}MB limit"
            )

        if settings.fallback.low_res_placeholder:
            lines.append(
                f"Using placeholder color {settings.fallback.placeholder_color} "
                "while textures load."
            )

        if settings.logging.enable_debug_logs:
            lines.append(f"Detailed logs in {settings.logging.log_file}")

        return [f"[{self._tag}] {line}" for line in lines]

    def emit(self, lines: list[str]):
        """Write report lines to the log at INFO level."""
        for line in lines:
            logger.info(line)

"""TextureOptimizer entry point."""


def main():
    """Start the host, load both texture plugins and signal startup."""
    from texopt.core.logging import setup_logging
    from texopt.core.host import PluginHost
    from texopt.plugins.texture_optimizer import TextureOptimizer
    from texopt.plugins.texture_reapply import TextureReapply
    from texopt.version import __version_display__
    from loguru import logger

    # Console sink first so resolution messages are visible
    setup_logging()

    host = PluginHost()
    host.load(TextureOptimizer)
    host.load(TextureReapply)

    logger.info(f"{__version_display__} starting, server root: {host.root_dir}")
    host.server_initialized()
    host.shutdown()


if __name__ == "__main__":
    main()

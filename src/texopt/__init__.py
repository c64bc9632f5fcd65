"""
TextureOptimizer - texture-streaming settings for game server startup.

Loads the texture_config document from the server data directory, writes a
default one when it is missing or unreadable, and reports every active
setting to the server log.
"""

from texopt.version import __version__, __version_display__

__all__ = ["__version__", "__version_display__"]

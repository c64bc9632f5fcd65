"""TextureOptimizer plugin.

Creates texture_config.json in the server data directory when it is missing
and leaves an existing valid document exactly as it is.
"""

from texopt.config.materializer import ResolutionPolicy
from texopt.plugins.base import TexturePlugin
from texopt.version import __version__


class TextureOptimizer(TexturePlugin):
    title = "TextureOptimizer"
    author = "Jeremias"
    version = __version__
    description = "Creates and manages texture_config.json in oxide/data automatically."
    policy = ResolutionPolicy.SKIP_REWRITE_ON_VALID_LOAD

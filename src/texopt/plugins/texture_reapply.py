"""TextureReapply plugin.

Reapplies the texture configuration every time the server starts or
restarts. A valid stored document is written back in canonical form so the
file on disk always matches what was applied.
"""

from texopt.config.materializer import ResolutionPolicy
from texopt.plugins.base import TexturePlugin


class TextureReapply(TexturePlugin):
    title = "TextureReapply"
    author = "Jeremias"
    version = "0.1.0"
    description = "Reapplies the texture configuration automatically on server restart."
    policy = ResolutionPolicy.TRUST_LOADED_ALWAYS

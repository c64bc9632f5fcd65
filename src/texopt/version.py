"""Version information for TextureOptimizer."""

__version__ = "0.2.0"
__version_display__ = f"TextureOptimizer V{__version__}"

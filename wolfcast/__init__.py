"""Grid-map raycasting core: maps, ray casting, TNT explosions, shading and XPM textures."""

__version__ = "0.1.0"
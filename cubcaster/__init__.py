"""Grid raycasting engine: XPM textures, a pixel buffer, game state, rendering and movement."""

__version__ = "0.1.0"
__all__ = [
    "colors",
    "framebuffer",
    "movement",
    "raycast",
    "state",
    "xpm",
]
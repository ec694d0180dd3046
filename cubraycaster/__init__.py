"""Grid raycaster that loads .cub scene files and renders textured walls."""

__version__ = "0.1.0"

__all__ = ["app", "errors", "player", "raycast", "render", "scene", "textutil"]
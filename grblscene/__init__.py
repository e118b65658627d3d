"""Vertex geometry for CNC visualisation: tool, origin, border, height-map grid and surface drawers."""

__version__ = "0.8.1"

__all__ = [
    "border",
    "drawable",
    "grid",
    "interpolation",
    "interpolation_drawer",
    "origin",
    "tool",
    "util",
]
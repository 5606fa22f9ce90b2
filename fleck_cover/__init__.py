"""Fleck cover: seeded blob textures rendered to SVG/PNG."""

__version__ = "0.1.0"

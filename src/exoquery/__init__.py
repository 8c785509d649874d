"""Procedural surface textures for Solar System bodies."""

__version__ = "0.1.0"

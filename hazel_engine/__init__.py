"""Core of a small 2D game engine: layers, cameras, transform maths and batched 2D rendering."""

__version__ = "0.1.0"
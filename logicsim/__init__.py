"""A small simulator for digital logic circuits with three-valued signals."""

__version__ = "0.1.0"
__all__ = ["logic", "pins", "components", "circuit", "simulation", "cli"]
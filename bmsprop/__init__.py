"""Thermal propagation detection for battery packs from recorded sensor data."""

__version__ = "0.1.0"
__all__ = ["__version__"]
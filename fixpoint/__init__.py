"""Fixed-point numbers with 8 fractional bits, 2-D points, a point-in-triangle test and demo commands."""

__version__ = "1.0.0"
__all__ = ["bsp", "cli", "fixed", "point"]
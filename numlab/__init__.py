"""Numerical tools on NumPy arrays: statistics, interest formulas, gradient descent, interpolation, ODEs, fractals and expression nodes."""

__version__ = "0.1.0"
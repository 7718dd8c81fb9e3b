"""Adaptive drill trainer."""

__version__ = "1.0.0"

"""Exact integer and rational arithmetic, text parsing and formatting, and a menu calculator."""

__version__ = "0.1.0"
__all__ = ["integers", "rationals", "textio", "cli"]
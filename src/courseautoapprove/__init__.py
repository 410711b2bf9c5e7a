"""Automatic approval of pending course requests."""

__version__ = "0.1.0"

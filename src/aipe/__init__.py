"""Infinite progression stat engine."""

__version__ = "0.1.0"

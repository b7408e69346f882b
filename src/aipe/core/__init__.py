"""Core shared helpers."""

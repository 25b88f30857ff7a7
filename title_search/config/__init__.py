"""Configuration management for title search."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

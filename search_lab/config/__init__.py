"""Configuration management for the search lab service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

"""Configuration module for the posts & comments API."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

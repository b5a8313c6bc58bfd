"""Configuration module for KV-Repo."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]

"""Store module for KV-Repo."""

from .base import Database
from .memory import MemoryStore

__all__ = ["Database", "MemoryStore"]

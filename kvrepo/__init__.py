"""
KV-Repo: Versioned Key-Value Facade

An in-memory string-to-string store behind a pluggable ``Database``
capability, and a ``Repository`` that seeds and exposes a version key.
"""

from .repository import VERSION, VERSION_KEY, Repository
from .store import Database, MemoryStore

__version__ = "1.0.0"

__all__ = ["Database", "MemoryStore", "Repository", "VERSION", "VERSION_KEY"]

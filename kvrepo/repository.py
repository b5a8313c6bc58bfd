"""
Repository Module

Seeds a version string into a ``Database`` on construction and reads it
back on demand.
"""

import logging
from typing import Optional

from .store.base import Database

logger = logging.getLogger(__name__)

VERSION_KEY = "Version"
VERSION = "1.0.0"


class Repository:
    """
    Consumer of a ``Database`` that owns the version key.

    Construction always writes ``VERSION`` under ``VERSION_KEY``, even if
    the store already holds a value there or another repository has
    already seeded it. Reads are never cached: ``get_version`` reflects
    whatever the store reports at call time, including None when the key
    has been removed behind the repository's back.

    Usage:
        repo = Repository(MemoryStore())
        repo.get_version()  # "1.0.0"
    """

    def __init__(self, database: Database):
        """
        Initialize the repository and seed the version key.

        Args:
            database: Store to read and write; the caller keeps ownership
        """
        self._database = database
        logger.debug(f"Seeding {VERSION_KEY}={VERSION}")
        self._database.set(VERSION_KEY, VERSION)

    def get_version(self) -> Optional[str]:
        """
        Read the current version from the store.

        Returns:
            The stored value verbatim, or None if the key is absent
        """
        version = self._database.get(VERSION_KEY)
        logger.debug(f"Read {VERSION_KEY}={version!r}")
        return version

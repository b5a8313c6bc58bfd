"""
In-Memory Store Module

Reference implementation of the ``Database`` capability backed by a
plain dict. Single owner, no locking: callers sharing one instance
across threads must add their own synchronization.
"""

from typing import Dict, Optional


class MemoryStore:
    """
    In-memory key-value store.

    Provides O(1) average-case time complexity for:
    - set: Insert or update a key-value pair
    - get: Retrieve a value by key

    ``delete``, ``exists``, ``size`` and ``clear`` are conveniences for
    code that owns the store directly; they are not part of the
    ``Database`` contract and the repository never calls them.
    """

    def __init__(self) -> None:
        self._store: Dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to store
            value: The value to associate with the key
        """
        self._store[key] = value

    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The value if found, None otherwise
        """
        return self._store.get(key)

    def delete(self, key: str) -> bool:
        """
        Delete a key-value pair.

        Returns:
            True if key was deleted, False if key didn't exist
        """
        if key not in self._store:
            return False

        del self._store[key]
        return True

    def exists(self, key: str) -> bool:
        """Check if a key exists."""
        return key in self._store

    def size(self) -> int:
        """Get the current number of keys in the store."""
        return len(self._store)

    def clear(self) -> None:
        """Remove all keys from the store."""
        self._store.clear()

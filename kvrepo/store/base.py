"""
Database Capability

The minimal key-value contract the repository depends on. Any object
providing ``get`` and ``set`` with these signatures can be handed to a
``Repository``: the in-memory store, a recording test double, or an
adapter over some other backend.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Database(Protocol):
    """
    String-to-string key-value capability.

    The contract has no ordering, iteration, deletion or transactional
    guarantees.
    """

    def get(self, key: str) -> Optional[str]:
        """
        Look up the value stored under ``key``.

        Returns:
            The value if present, None if the key was never set
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any previous value."""
        ...

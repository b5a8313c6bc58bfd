"""
Pytest Configuration and Fixtures

This module provides shared fixtures and test doubles for all tests.
"""

from typing import Dict, List, Optional, Tuple
from unittest.mock import create_autospec

import pytest

from kvrepo.store.base import Database
from kvrepo.store.memory import MemoryStore


# ============================================================================
# Test Doubles
# ============================================================================

class RecordingDatabase:
    """
    Hand-written Database double that records every call.

    Implements the two-method capability directly, which is all a
    Repository needs. Values are kept so reads see earlier writes.

    Usage:
        db = RecordingDatabase()
        Repository(db)
        assert db.calls == [("set", "Version", "1.0.0")]
    """

    def __init__(self) -> None:
        self.data: Dict[str, str] = {}
        self.calls: List[Tuple] = []

    def get(self, key: str) -> Optional[str]:
        self.calls.append(("get", key))
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.calls.append(("set", key, value))
        self.data[key] = value


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> MemoryStore:
    """Create a fresh, empty MemoryStore."""
    return MemoryStore()


@pytest.fixture
def recording_db() -> RecordingDatabase:
    """Create a RecordingDatabase with no calls recorded."""
    return RecordingDatabase()


@pytest.fixture
def mock_db():
    """Create an autospecced mock of the Database capability."""
    return create_autospec(Database, instance=True)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .remote import MockRemoteProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockRemoteProvider",
    "build_test_container",
]

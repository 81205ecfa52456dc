"""Mock providers for testing."""

from .counter import MockCounterProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCounterProvider",
    "MockPersistenceProvider",
    "build_test_container",
]

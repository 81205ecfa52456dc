"""Dependency injection wiring for the board core."""

from typing import Type

from board.util.di.application import ProdApplicationProvider
from board.util.di.base import Component, ProviderBase
from board.util.di.core import ProdConfigProvider
from board.util.di.domain import ProdDomainProvider
from board.util.di.infrastructure import (
    CounterProvider,
    PersistenceProvider,
    ProdCounterProvider,
    ProdPersistenceProvider,
)

# Every container is assembled from exactly these providers; mockable
# components are resolved to one implementation by get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    CounterProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Concrete providers (no ``__mock_component__``) are returned as-is. For
    mockable components the subclass whose ``__is_mock__`` matches
    ``use_mock`` is chosen; mock subclasses only exist once the test
    providers are imported.

    Args:
        base: Entry from PROVIDERS
        use_mock: Whether the in-memory implementation is wanted

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If no matching implementation is registered
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "CounterProvider",
    "PersistenceProvider",
    "ProdCounterProvider",
    "ProdPersistenceProvider",
]

"""Mockable infrastructure providers.

Importing this package registers the production subclasses of each
component base so ``get_provider`` can find them.
"""

from .counter import CounterProvider, ProdCounterProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "CounterProvider",
    "PersistenceProvider",
    "ProdCounterProvider",
    "ProdPersistenceProvider",
]

"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable infrastructure: the relational store and the like counter store
Component = Literal["persistence", "counter"]


class ProviderBase(Provider):
    """Base for all board providers.

    Mockable infrastructure declares ``__mock_component__`` on an abstract
    provider class; its production and in-memory subclasses set
    ``__is_mock__`` accordingly. Concrete providers leave both at defaults.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services are built per request around that request's repositories and
    hold no state of their own between calls.
    """

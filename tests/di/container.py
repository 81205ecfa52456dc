"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from board.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Unmocked components need their backing services reachable with the
    connection settings from the environment (``DATABASE__URL``,
    ``REDIS__URL``).

    Args:
        unmock: Components to use production implementations for.
                All others use their in-memory mocks.

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real relational store, in-memory counters
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = base.__mock_component__
        if component_name is None:
            provider_class = get_provider(base, use_mock=False)
        else:
            provider_class = get_provider(base, use_mock=component_name not in unmock)

        provider_instances.append(provider_class())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are requested
    """
    known = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

"""Test container with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from modcomment.util.di import PROVIDERS, Component, ProviderBase, get_provider


def _swappable(base: type[ProviderBase]) -> bool:
    return bool(base.__subclasses__()) and base.__mock_component__ is not None


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container that mocks every swappable component.

    Settings come from the environment, so integration runs pick up
    DATABASE__URL.

    Args:
        unmock: Components to run with production implementations

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        build_test_container()                          # in-memory storage
        build_test_container(unmock={"persistence"})    # real PostgreSQL
    """
    unmock = unmock or set()

    known = {base.__mock_component__ for base in PROVIDERS if _swappable(base)}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = []
    for base in PROVIDERS:
        use_mock = _swappable(base) and base.__mock_component__ not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    # FastapiProvider lets the same container back a TestClient app
    return make_async_container(*providers, FastapiProvider())

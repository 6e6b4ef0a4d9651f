"""Dependency injection wiring.

``PROVIDERS`` lists provider bases. A base without subclasses is used as
is; a base with subclasses is a swappable component, and ``get_provider``
picks its production or mock implementation.
"""

from typing import Type

from modcomment.util.di.application import ProdApplicationProvider
from modcomment.util.di.base import Component, ProviderBase
from modcomment.util.di.core import ProdConfigProvider
from modcomment.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Raises:
        ValueError: If a swappable component lacks the requested variant
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    variant = "mock" if use_mock else "production"
    raise ValueError(
        f"No {variant} provider for component "
        f"{base.__mock_component__ or base.__name__!r}"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]

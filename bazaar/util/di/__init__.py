"""Dependency injection wiring for the ledger.

``PROVIDERS`` lists every provider the container is built from. Concrete
providers are used as they are; a swappable component (persistence) is
listed by its base class, and ``get_provider`` picks the production or
mock subclass registered under it.
"""

from typing import Type

from bazaar.util.di.application import ProdApplicationProvider
from bazaar.util.di.base import Component, ProviderBase
from bazaar.util.di.core import ProdConfigProvider
from bazaar.util.di.domain import ProdDomainProvider
from bazaar.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable: in-memory repositories replace PostgreSQL in tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Raises:
        ValueError: If ``base`` is swappable but has no implementation of
            the requested flavour loaded
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for candidate in implementations:
        if candidate.__is_mock__ is use_mock:
            return candidate

    flavour = "mock" if use_mock else "production"
    raise ValueError(
        f"No {flavour} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]

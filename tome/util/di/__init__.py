"""Dependency injection (dishka) wiring.

Providers come in two kinds. Concrete providers (config, domain services,
use cases) are used as they are. A swappable component such as persistence
has a base provider class with one production and one mock subclass, and
the container builder picks between them.
"""

from typing import Type

from tome.util.di.application import ProdApplicationProvider
from tome.util.di.base import Component, ProviderBase
from tome.util.di.core import ProdConfigProvider
from tome.util.di.domain import ProdDomainProvider
from tome.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from tome.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def is_swappable(base: Type[ProviderBase]) -> bool:
    """A provider with subclasses has alternative implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Select the mock implementation of a swappable component

    Returns:
        ``base`` itself when it is concrete, otherwise the matching subclass

    Raises:
        DependencyInjectionError: If no subclass matches ``use_mock``
    """
    if not is_swappable(base):
        return base

    for candidate in base.__subclasses__():
        if candidate.__is_mock__ == use_mock:
            return candidate

    component = base.__mock_component__ or base.__name__
    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(f"No {kind} provider registered for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "is_swappable",
]

"""Infrastructure providers."""

# Production subclasses must be imported so get_provider can find them
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]

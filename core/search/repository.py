#!/usr/bin/env python3
"""
Provider record store interface.

The search core depends only on this interface; the SQL implementation lives
in database.repositories.provider.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from core.search.models import Provider, ProviderStatus

logger = logging.getLogger(__name__)


class DuplicateProviderError(ValueError):
    """Raised when creating a provider whose id already exists."""
    pass


class ProviderRepository(ABC):
    """
    Record store consumed by the search core.

    Implementations hand out detached Provider snapshots: mutating a returned
    object never changes stored state, writes go through create/update.
    """

    @abstractmethod
    def find_all(self) -> List[Provider]:
        ...

    @abstractmethod
    def find_by_id(self, provider_id: str) -> Optional[Provider]:
        ...

    @abstractmethod
    def create(self, provider: Provider) -> Provider:
        ...

    @abstractmethod
    def update(self, provider: Provider) -> Optional[Provider]:
        """Replace a stored provider. Returns None when it does not exist."""
        ...

    def find_all_active(self) -> List[Provider]:
        return [p for p in self.find_all() if p.status == ProviderStatus.ACTIVE]

    def count(self) -> int:
        return len(self.find_all())


class InMemoryProviderRepository(ProviderRepository):
    """Dictionary-backed store, insertion ordered. Used for fixtures and local catalogs."""

    def __init__(self, providers: Optional[Iterable[Provider]] = None):
        self._providers: Dict[str, Provider] = {}
        for provider in providers or []:
            self.create(provider)

    def find_all(self) -> List[Provider]:
        return [p.model_copy(deep=True) for p in self._providers.values()]

    def find_by_id(self, provider_id: str) -> Optional[Provider]:
        provider = self._providers.get(provider_id)
        return provider.model_copy(deep=True) if provider else None

    def create(self, provider: Provider) -> Provider:
        if provider.id in self._providers:
            raise DuplicateProviderError(f"Provider {provider.id} already exists")
        self._providers[provider.id] = provider.model_copy(deep=True)
        return provider.model_copy(deep=True)

    def update(self, provider: Provider) -> Optional[Provider]:
        if provider.id not in self._providers:
            return None
        self._providers[provider.id] = provider.model_copy(deep=True)
        return provider.model_copy(deep=True)

    def count(self) -> int:
        return len(self._providers)

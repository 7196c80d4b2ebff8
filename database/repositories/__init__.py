from core.search.repository import (
    ProviderRepository,
    InMemoryProviderRepository,
    DuplicateProviderError,
)
from database.repositories.base import BaseRepository
from database.repositories.provider import SqlProviderRepository
from database.repositories.report import ReportRepository

__all__ = [
    'BaseRepository',
    'ProviderRepository',
    'InMemoryProviderRepository',
    'SqlProviderRepository',
    'DuplicateProviderError',
    'ReportRepository',
]

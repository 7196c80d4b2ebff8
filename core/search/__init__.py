#!/usr/bin/env python3
"""
Provider Search - filtering, trust ranking, sorting and pagination.

Public API:
- ProviderSearchService: search orchestrator over a ProviderRepository
- search_providers: one-shot search over an in-memory provider list
- SearchFilters / filter_providers: filter engine
- SortOption / sort_providers: sort engine
- trust_rank: trust ordering key
- paginate: paginator

Modules:
- models.py: Provider and trust profile models
- repository.py: record store interface and in-memory implementation
- trust.py: trust scoring
- filters.py: filter predicates and badge strategies
- sorting.py: sort strategies
- pagination.py: page slicing
- query_params.py: query-string parsing
- service.py: orchestrator
"""

from core.search.filters import BadgeMatch, SearchFilters, filter_providers, match_all_badges, match_any_badge
from core.search.models import (
    InclusiveTag,
    Provider,
    ProviderStatus,
    TrustBadgeId,
    VerificationLevel,
)
from core.search.pagination import Page, paginate
from core.search.query_params import SearchRequest, parse_search_params
from core.search.repository import InMemoryProviderRepository, ProviderRepository
from core.search.service import ProviderSearchService, SearchResult, search_providers
from core.search.sorting import SortOption, sort_providers
from core.search.trust import explain_trust, trust_rank, trust_score

__all__ = [
    'BadgeMatch',
    'SearchFilters',
    'filter_providers',
    'match_all_badges',
    'match_any_badge',
    'InclusiveTag',
    'Provider',
    'ProviderStatus',
    'TrustBadgeId',
    'VerificationLevel',
    'Page',
    'paginate',
    'SearchRequest',
    'parse_search_params',
    'InMemoryProviderRepository',
    'ProviderRepository',
    'ProviderSearchService',
    'SearchResult',
    'search_providers',
    'SortOption',
    'sort_providers',
    'explain_trust',
    'trust_rank',
    'trust_score',
]

#!/usr/bin/env python3
"""
Search Orchestrator - the composed provider search entry point.

Pipeline per call: active baseline -> filter engine -> sort engine ->
paginator. Each call reads a fresh snapshot from the repository and
allocates its own intermediate lists, so concurrent searches share no
mutable state and repeated calls over an unchanged store return identical
results.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from pydantic import Field

from core.search.filters import BadgeMatch, FilterInput, SearchFilters, as_filters, filter_providers
from core.search.models import CamelModel, Provider
from core.search.pagination import DEFAULT_PAGE_SIZE, paginate
from core.search.sorting import DEFAULT_SORT, SortOption, sort_providers
from core.search.repository import InMemoryProviderRepository, ProviderRepository

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 4


class SearchResult(CamelModel):
    """Search response envelope: {providers, total, page, pageSize, hasMore}."""
    providers: List[Provider] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    has_more: bool = False


class ProviderSearchService:
    """Read-only search and lookup over a provider repository."""

    def __init__(
        self,
        repository: ProviderRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        default_sort: Any = DEFAULT_SORT,
        featured_limit: int = DEFAULT_FEATURED_LIMIT
    ):
        self.repository = repository
        self.default_page_size = default_page_size
        self.default_sort = SortOption.parse(default_sort)
        self.featured_limit = featured_limit

    def search_providers(
        self,
        filters: FilterInput = None,
        sort: Any = None,
        page: Any = 1,
        page_size: Any = None
    ) -> SearchResult:
        """
        Search active providers.

        Args:
            filters: SearchFilters or a loosely typed mapping; malformed values are ignored.
            sort: Sort option; unset or unknown values use the configured default.
            page: 1-indexed page number.
            page_size: Items per page; unset or invalid uses the configured default.

        Returns:
            SearchResult envelope. An empty match is not an error.
        """
        filters = as_filters(filters)
        sort_option = SortOption.parse(sort) if sort is not None else self.default_sort

        candidates = self.repository.find_all_active()
        matched = filter_providers(candidates, filters)
        ordered = sort_providers(matched, sort_option)
        result_page = paginate(ordered, page, page_size, default_page_size=self.default_page_size)

        logger.debug(
            f"Search sort={sort_option.value} page={result_page.page} "
            f"matched={result_page.total} returned={len(result_page.items)}"
        )

        return SearchResult(
            providers=result_page.items,
            total=result_page.total,
            page=result_page.page,
            page_size=result_page.page_size,
            has_more=result_page.has_more,
        )

    def browse_by_badges(
        self,
        badges: Any,
        sort: Any = None,
        page: Any = 1,
        page_size: Any = None
    ) -> SearchResult:
        """Badge browsing: providers holding ANY of the requested badges."""
        filters = SearchFilters(badges=badges, badge_match=BadgeMatch.ANY)
        return self.search_providers(filters, sort=sort, page=page, page_size=page_size)

    def get_provider_by_id(self, provider_id: str) -> Optional[Provider]:
        """Look up any provider regardless of status. Public surfaces must check is_active."""
        return self.repository.find_by_id(provider_id)

    def get_providers_by_category(self, category_id: str) -> List[Provider]:
        return self.search_providers({'category': category_id}, page_size=self._all()).providers

    def get_providers_by_inclusive_tag(self, tag: Any) -> List[Provider]:
        filters = SearchFilters(inclusive_tags=[tag])
        if not filters.inclusive_tags:
            return []
        return self.search_providers(filters, page_size=self._all()).providers

    def get_featured_providers(self, limit: Optional[int] = None) -> List[Provider]:
        """Highest-trust active providers."""
        limit = limit if isinstance(limit, int) and limit > 0 else self.featured_limit
        return sort_providers(self.repository.find_all_active(), SortOption.TRUST)[:limit]

    def count_by_category(self) -> Dict[str, int]:
        """Active provider counts per category id."""
        return dict(Counter(p.category_id for p in self.repository.find_all_active()))

    def _all(self) -> int:
        # Page size large enough to return every active provider on one page
        return max(self.repository.count(), 1)


def search_providers(
    providers: Sequence[Provider],
    filters: FilterInput = None,
    sort: Any = None,
    page: Any = 1,
    page_size: Any = None
) -> SearchResult:
    """
    Run the search pipeline over an in-memory provider snapshot.

    Providers repeating an earlier id are skipped; the first occurrence wins.
    """
    unique: Dict[str, Provider] = {}
    for provider in providers:
        unique.setdefault(provider.id, provider)
    service = ProviderSearchService(InMemoryProviderRepository(unique.values()))
    return service.search_providers(filters, sort=sort, page=page, page_size=page_size)

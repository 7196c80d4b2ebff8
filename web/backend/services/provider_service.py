#!/usr/bin/env python3
"""
Provider service - public directory reads: search, browse, detail, catalog.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from core.catalog import catalog_as_dict
from core.search import (
    BadgeMatch,
    ProviderSearchService,
    SearchResult,
    explain_trust,
    parse_search_params,
)
from database.repositories import SqlProviderRepository
from ..config import get_config
from ..exceptions import ProviderNotFoundException
from ..models.responses import (
    CatalogResponse,
    FeaturedProvidersResponse,
    ProviderDetailResponse,
    TrustExplanation,
)

logger = logging.getLogger(__name__)


class ProviderService:
    """Service for the public provider directory."""

    def __init__(self, db: Session):
        self.db = db
        search_config = get_config().search
        self.search_service = ProviderSearchService(
            SqlProviderRepository(db),
            default_page_size=search_config.default_page_size,
            default_sort=search_config.default_sort,
            featured_limit=search_config.featured_limit,
        )

    def search(self, params: Optional[Mapping[str, Any]]) -> SearchResult:
        """
        Combined search from raw query parameters.

        Badges use the all-of strategy. Malformed parameters are ignored,
        so this never rejects a request.
        """
        request = parse_search_params(params, badge_match=BadgeMatch.ALL)
        return self.search_service.search_providers(
            request.filters,
            sort=request.sort,
            page=request.page,
            page_size=request.page_size,
        )

    def browse(self, params: Optional[Mapping[str, Any]]) -> SearchResult:
        """Badge browsing: any-of the requested badges, no other filters."""
        request = parse_search_params(params, badge_match=BadgeMatch.ANY)
        return self.search_service.browse_by_badges(
            request.filters.badges,
            sort=request.sort,
            page=request.page,
            page_size=request.page_size,
        )

    def get_featured(self, limit: Optional[int] = None) -> FeaturedProvidersResponse:
        providers = self.search_service.get_featured_providers(limit)
        return FeaturedProvidersResponse(providers=providers, total=len(providers))

    def get_provider_detail(self, provider_id: str) -> ProviderDetailResponse:
        """
        Get a publicly visible provider with its trust breakdown.

        Raises:
            ProviderNotFoundException: If the provider does not exist or is not active.
        """
        provider = self.search_service.get_provider_by_id(provider_id)
        if provider is None or not provider.is_active:
            raise ProviderNotFoundException(f"Provider not found: {provider_id}")

        return ProviderDetailResponse(
            provider=provider,
            trust=TrustExplanation(**explain_trust(provider)),
        )

    def get_catalog(self) -> CatalogResponse:
        return CatalogResponse(**catalog_as_dict(self.search_service.count_by_category()))

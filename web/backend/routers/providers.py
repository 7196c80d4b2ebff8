#!/usr/bin/env python3
"""
Provider endpoints - search, badge browsing, featured and detail.
"""

import logging
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from core.search import SearchResult
from ..dependencies import get_db
from ..services.provider_service import ProviderService
from ..models.responses import FeaturedProvidersResponse, ProviderDetailResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/providers", tags=["providers"])


@router.get("", response_model=SearchResult)
def search_providers(request: Request, db: Session = Depends(get_db)):
    """
    Search active providers.

    Query parameters: q, category, subcategory, location, virtual, badges,
    tags, verificationLevel, lgbtqOwned, sort, page, pageSize. Lists are
    comma separated. Badges must all be held. Unknown or malformed values
    are ignored rather than rejected.
    """
    return ProviderService(db).search(dict(request.query_params))


@router.get("/browse", response_model=SearchResult)
def browse_by_badges(request: Request, db: Session = Depends(get_db)):
    """
    Browse active providers holding any of the requested badges.

    Accepts badges, sort, page and pageSize. With no valid badges every
    active provider is returned.
    """
    return ProviderService(db).browse(dict(request.query_params))


@router.get("/featured", response_model=FeaturedProvidersResponse)
def get_featured_providers(
    limit: int = Query(default=None, ge=1, le=50, description="Number of providers to return"),
    db: Session = Depends(get_db)
):
    """Highest-trust active providers for the landing page."""
    return ProviderService(db).get_featured(limit)


@router.get("/{provider_id}", response_model=ProviderDetailResponse)
def get_provider(provider_id: str, db: Session = Depends(get_db)):
    """
    Get a provider with its trust breakdown.

    Providers that are not active are reported as not found.
    """
    return ProviderService(db).get_provider_detail(provider_id)

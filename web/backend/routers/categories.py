#!/usr/bin/env python3
"""
Catalog endpoint - categories, badges, tags, verification levels, report reasons.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.provider_service import ProviderService
from ..models.responses import CatalogResponse

router = APIRouter(prefix="/api/categories", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
def get_catalog(db: Session = Depends(get_db)):
    """Reference data with the number of active providers in each category."""
    return ProviderService(db).get_catalog()

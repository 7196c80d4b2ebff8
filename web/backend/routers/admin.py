#!/usr/bin/env python3
"""
Admin endpoints - moderation actions, lifecycle transitions, badges and vouches.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from ..dependencies import get_db
from ..services.moderation_service import ModerationService
from ..models.requests import (
    BadgeDecisionRequest,
    ModerationActionRequest,
    StatusTransitionRequest,
)
from ..models.responses import (
    ModerationActionResponse,
    ModerationHistoryResponse,
    ProviderAdminResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/providers/{provider_id}/actions", response_model=ModerationActionResponse)
def apply_moderation_action(
    provider_id: str,
    request: ModerationActionRequest,
    db: Session = Depends(get_db)
):
    """
    Warn, suspend or reinstate a provider.

    Suspended providers drop out of search immediately. Passing a report id
    resolves that report.
    """
    return ModerationService(db).apply_action(provider_id, request)


@router.post("/providers/{provider_id}/status", response_model=ProviderAdminResponse)
def transition_provider_status(
    provider_id: str,
    request: StatusTransitionRequest,
    db: Session = Depends(get_db)
):
    """Move a provider through the listing lifecycle."""
    return ModerationService(db).transition_status(provider_id, request)


@router.post("/providers/{provider_id}/badges", response_model=ProviderAdminResponse)
def decide_badge(
    provider_id: str,
    request: BadgeDecisionRequest,
    db: Session = Depends(get_db)
):
    """Grant or revoke a trust badge."""
    return ModerationService(db).decide_badge(provider_id, request)


@router.post("/providers/{provider_id}/endorsements", response_model=ProviderAdminResponse)
def record_endorsement(
    provider_id: str,
    withdraw: bool = Query(default=False, description="Withdraw a previously counted vouch"),
    db: Session = Depends(get_db)
):
    """Count an approved community vouch."""
    return ModerationService(db).record_endorsement(provider_id, withdraw=withdraw)


@router.get("/actions", response_model=ModerationHistoryResponse)
def get_moderation_history(
    provider_id: Optional[str] = Query(default=None, description="Limit to one provider"),
    db: Session = Depends(get_db)
):
    """Audit trail of moderation actions, newest first."""
    actions = ModerationService(db).get_history(provider_id)
    return ModerationHistoryResponse(success=True, count=len(actions), actions=actions)

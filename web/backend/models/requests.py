#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Literal, Optional

from core.moderation import ModerationActionType
from core.search.models import ProviderStatus, TrustBadgeId


class CamelRequest(BaseModel):
    """Accepts camelCase keys from the frontend as well as snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReportCreateRequest(CamelRequest):
    """Safety report filed by a community member."""
    provider_id: str = Field(..., description="Provider the report concerns")
    reason: str = Field(..., description="Report reason id, see /api/categories")
    description: str = Field(..., description="What happened")


class ReportUpdateRequest(CamelRequest):
    """Moderator update to a report's review status."""
    status: Literal["pending", "reviewing", "resolved", "dismissed"]
    moderator_notes: Optional[str] = Field(None, max_length=2000)
    resolution: Optional[str] = Field(None, max_length=2000)


class ModerationActionRequest(CamelRequest):
    """Moderator action against a provider."""
    action: ModerationActionType
    reason: str = Field(..., min_length=1, max_length=2000)
    performed_by: str = Field(..., min_length=1, description="Moderator id")
    report_id: Optional[str] = Field(None, description="Report that prompted the action")


class StatusTransitionRequest(CamelRequest):
    """Move a provider through the listing lifecycle."""
    status: ProviderStatus
    performed_by: str = Field(..., min_length=1)
    reason: Optional[str] = None


class BadgeDecisionRequest(CamelRequest):
    """Grant or revoke a trust badge."""
    badge: TrustBadgeId
    granted: bool = True
    performed_by: str = Field(..., min_length=1)

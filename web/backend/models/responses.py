#!/usr/bin/env python3
"""
Response models for API endpoints.

Search results and provider payloads are camelCase on the wire; moderation
endpoints use the snake_case envelope with a success flag.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any

from core.search.models import CamelModel, Provider


class TrustExplanation(CamelModel):
    """Breakdown of the values the trust ordering ranks on."""
    verification_level: str
    trust_score: int = Field(ge=0)
    community_endorsements: int = Field(ge=0)
    badge_count: int = Field(ge=0)
    badges: List[str]
    lgbtq_owned: bool
    verified_at: Optional[str] = None
    verification_method: Optional[str] = None


class ProviderDetailResponse(CamelModel):
    """A single provider with its trust breakdown."""
    provider: Provider
    trust: TrustExplanation


class FeaturedProvidersResponse(CamelModel):
    providers: List[Provider]
    total: int = Field(ge=0)


class CatalogResponse(CamelModel):
    """Reference data for building search UIs."""
    categories: List[Dict[str, Any]]
    trust_badges: List[Dict[str, Any]]
    inclusive_tags: List[Dict[str, Any]]
    verification_levels: List[Dict[str, Any]]
    report_reasons: List[Dict[str, Any]]


class ReportSummary(BaseModel):
    """A stored safety report."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "provider_id": "3",
                "reason": "discrimination",
                "description": "Misgendered repeatedly after being corrected.",
                "status": "pending",
                "created_at": "2026-02-01T12:00:00+00:00",
                "updated_at": "2026-02-01T12:00:00+00:00",
                "resolved_at": None,
                "moderator_notes": None,
                "resolution": None
            }
        }
    )

    id: str
    provider_id: str
    reason: str
    description: str
    status: str
    created_at: Optional[str]
    updated_at: Optional[str]
    resolved_at: Optional[str] = None
    moderator_notes: Optional[str] = None
    resolution: Optional[str] = None


class ReportCreatedResponse(BaseModel):
    """Response after a report is filed."""
    success: bool
    report_id: str
    status: str
    message: str


class ReportResponse(BaseModel):
    success: bool
    report: ReportSummary


class ReportsResponse(BaseModel):
    """Response containing list of reports."""
    success: bool
    count: int
    reports: List[ReportSummary]


class ReportStatsResponse(BaseModel):
    """Report counts by status and reason."""
    success: bool
    stats: Dict[str, Any]


class ModerationActionSummary(BaseModel):
    id: str
    provider_id: str
    report_id: Optional[str] = None
    action: str
    reason: str
    performed_by: str
    performed_at: Optional[str]


class ModerationActionResponse(BaseModel):
    """Response after a moderation action is applied."""
    success: bool
    action: ModerationActionSummary
    provider_status: str


class ModerationHistoryResponse(BaseModel):
    success: bool
    count: int
    actions: List[ModerationActionSummary]


class ProviderAdminResponse(BaseModel):
    """Provider state after an administrative change."""
    success: bool
    provider_id: str
    status: str
    trust_badges: List[str]
    community_endorsements: int

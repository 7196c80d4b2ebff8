#!/usr/bin/env python3
"""
Provider domain models.

Pydantic models for the searchable provider entity and its embedded trust
profile. Attributes are snake_case; the wire format (seed data, JSON API)
uses camelCase aliases.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class VerificationLevel(str, Enum):
    """Verification levels, ordered by trust strength."""
    NONE = "none"
    SELF = "self"
    CREDENTIAL = "credential"
    COMMUNITY = "community"
    ARCUS_VERIFIED = "arcus_verified"

    @property
    def trust_score(self) -> int:
        return _LEVEL_ORDER.index(self)

    def __ge__(self, other):
        if not isinstance(other, VerificationLevel):
            return NotImplemented
        return self.trust_score >= other.trust_score

    def __gt__(self, other):
        if not isinstance(other, VerificationLevel):
            return NotImplemented
        return self.trust_score > other.trust_score

    def __le__(self, other):
        if not isinstance(other, VerificationLevel):
            return NotImplemented
        return self.trust_score <= other.trust_score

    def __lt__(self, other):
        if not isinstance(other, VerificationLevel):
            return NotImplemented
        return self.trust_score < other.trust_score


_LEVEL_ORDER = [
    VerificationLevel.NONE,
    VerificationLevel.SELF,
    VerificationLevel.CREDENTIAL,
    VerificationLevel.COMMUNITY,
    VerificationLevel.ARCUS_VERIFIED,
]


class TrustBadgeId(str, Enum):
    VERIFIED = "verified"
    AFFIRMING = "affirming"
    OWNED = "owned"
    TRAINED = "trained"


class InclusiveTag(str, Enum):
    """Specific affirming capabilities used for fine-grained filtering."""
    TRANS_AFFIRMING = "trans-affirming"
    NONBINARY_AFFIRMING = "nonbinary-affirming"
    HIV_INFORMED = "hiv-informed"
    PREP_PROVIDER = "prep-provider"
    GENDER_AFFIRMING_CARE = "gender-affirming-care"
    LGBTQ_FAMILIES = "lgbtq-families"
    ELDER_LGBTQ = "elder-lgbtq"
    YOUTH_LGBTQ = "youth-lgbtq"
    BIPOC_AFFIRMING = "bipoc-affirming"
    DISABILITY_AFFIRMING = "disability-affirming"
    NEURODIVERGENT_AFFIRMING = "neurodivergent-affirming"
    TRAUMA_INFORMED = "trauma-informed"
    SLIDING_SCALE = "sliding-scale"
    ACCEPTS_INSURANCE = "accepts-insurance"


class ProviderStatus(str, Enum):
    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class ContactMethod(str, Enum):
    EMAIL = "email"
    PHONE = "phone"
    WEBSITE = "website"
    RELAY = "relay"


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _unique(values: list) -> list:
    # Set semantics, first occurrence wins so serialization stays stable
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VerificationRecord(CamelModel):
    level: VerificationLevel = VerificationLevel.NONE
    verified_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    verified_by: Optional[str] = None
    method: Optional[str] = None

    @field_validator("verified_at", "expires_at")
    @classmethod
    def _normalize_tz(cls, value):
        return _as_utc(value)


class TrustProfile(CamelModel):
    verification: VerificationRecord = Field(default_factory=VerificationRecord)
    trust_badges: List[TrustBadgeId] = Field(default_factory=list)
    inclusive_tags: List[InclusiveTag] = Field(default_factory=list)
    lgbtq_owned: bool = False
    affirmation_statement: Optional[str] = None
    community_endorsements: int = Field(default=0, ge=0)
    report_count: int = Field(default=0, ge=0)

    @field_validator("trust_badges", "inclusive_tags")
    @classmethod
    def _dedupe(cls, value):
        return _unique(value)


class ProviderLocation(CamelModel):
    city: str
    state: str
    zip_code: Optional[str] = None
    virtual: bool = False
    service_area: List[str] = Field(default_factory=list)


class ProviderContact(CamelModel):
    """Privacy-safe contact summary. Raw email/phone are never stored here."""
    has_email: bool = False
    has_phone: bool = False
    has_website: bool = False
    preferred_method: ContactMethod = ContactMethod.RELAY
    response_time: Optional[str] = None


class Provider(CamelModel):
    """A searchable service provider."""
    id: str
    name: str
    business_name: Optional[str] = None
    category_id: str
    subcategory: str = ""
    description: str = ""
    short_bio: str = ""
    location: ProviderLocation
    contact: ProviderContact = Field(default_factory=ProviderContact)

    trust: TrustProfile = Field(default_factory=TrustProfile)
    status: ProviderStatus = ProviderStatus.DRAFT

    specialties: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    pronouns: Optional[str] = None
    year_established: Optional[int] = None

    rating: Optional[float] = Field(default=None, ge=0, le=5)
    review_count: Optional[int] = Field(default=None, ge=0)

    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _normalize_tz(cls, value):
        return _as_utc(value)

    @property
    def is_active(self) -> bool:
        return self.status == ProviderStatus.ACTIVE

    @property
    def trust_badges(self) -> List[TrustBadgeId]:
        """Badges displayed on the provider card (mirrors the trust profile)."""
        return self.trust.trust_badges

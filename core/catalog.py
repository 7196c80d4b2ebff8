#!/usr/bin/env python3
"""
Reference data for the directory: service categories, trust badges,
inclusive care tags, verification levels and report reasons.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

from core.search.models import InclusiveTag, TrustBadgeId, VerificationLevel


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str
    description: str
    subcategories: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class TrustBadgeInfo:
    id: TrustBadgeId
    name: str
    description: str
    icon: Optional[str] = None


@dataclass(frozen=True)
class InclusiveTagInfo:
    id: InclusiveTag
    name: str
    description: str
    category: str  # identity|health|accessibility|financial


@dataclass(frozen=True)
class VerificationLevelInfo:
    level: VerificationLevel
    name: str
    description: str

    @property
    def trust_score(self) -> int:
        return self.level.trust_score


@dataclass(frozen=True)
class ReportReasonInfo:
    id: str
    label: str
    description: str
    severity: str  # low|medium|high|critical


CATEGORIES: List[Category] = [
    Category(
        id="healthcare",
        name="Healthcare",
        icon="Heart",
        description="Find affirming healthcare providers who understand your needs",
        subcategories=[
            "Therapy & Counseling",
            "Primary Care",
            "Gender-Affirming Care",
            "Mental Health",
            "Psychiatry",
            "Dental",
            "Dermatology",
            "HIV/STI Care",
            "Fertility & Family Planning",
        ],
    ),
    Category(
        id="legal",
        name="Legal",
        icon="Scale",
        description="Legal professionals experienced with LGBTQIA+ matters",
        subcategories=[
            "Family Law",
            "Name & Gender Changes",
            "Immigration",
            "Employment Law",
            "Estate Planning",
            "Civil Rights",
            "Discrimination Cases",
        ],
    ),
    Category(
        id="financial",
        name="Financial",
        icon="Banknote",
        description="Financial services that understand your unique needs",
        subcategories=[
            "Financial Planning",
            "Tax Services",
            "Insurance",
            "Banking",
            "Real Estate",
            "Retirement Planning",
            "Student Loan Assistance",
        ],
    ),
    Category(
        id="career",
        name="Career",
        icon="Briefcase",
        description="Career support from professionals who get it",
        subcategories=[
            "Career Coaching",
            "Resume Services",
            "LGBTQIA+ Recruiting",
            "DEI Consulting",
            "Executive Coaching",
            "Interview Preparation",
        ],
    ),
    Category(
        id="lifestyle",
        name="Lifestyle",
        icon="Sparkles",
        description="Life services in welcoming, affirming spaces",
        subcategories=[
            "Wedding & Events",
            "Travel",
            "Fitness & Wellness",
            "Beauty & Grooming",
            "Photography",
            "Personal Styling",
            "Pet Services",
        ],
    ),
]

TRUST_BADGES: List[TrustBadgeInfo] = [
    TrustBadgeInfo(
        id=TrustBadgeId.VERIFIED,
        name="Verified Provider",
        description="Identity and credentials verified through ArcusPath's multi-step process",
        icon="ShieldCheck",
    ),
    TrustBadgeInfo(
        id=TrustBadgeId.AFFIRMING,
        name="LGBTQIA+ Affirming",
        description="Demonstrated commitment to affirming, inclusive care through training or community feedback",
        icon="Heart",
    ),
    TrustBadgeInfo(
        id=TrustBadgeId.OWNED,
        name="LGBTQIA+ Owned",
        description="Business is owned by an LGBTQIA+ community member",
        icon="Star",
    ),
    TrustBadgeInfo(
        id=TrustBadgeId.TRAINED,
        name="Competency Trained",
        description="Completed recognized LGBTQIA+ cultural competency training program",
        icon="GraduationCap",
    ),
]

INCLUSIVE_TAGS: List[InclusiveTagInfo] = [
    # Identity
    InclusiveTagInfo(InclusiveTag.TRANS_AFFIRMING, "Trans Affirming",
                     "Specifically trained and experienced in providing affirming care for transgender individuals", "identity"),
    InclusiveTagInfo(InclusiveTag.NONBINARY_AFFIRMING, "Nonbinary Affirming",
                     "Understands and respects nonbinary identities, uses appropriate language and practices", "identity"),
    InclusiveTagInfo(InclusiveTag.LGBTQ_FAMILIES, "LGBTQ+ Families",
                     "Experience with diverse family structures including same-sex parents and chosen families", "identity"),
    InclusiveTagInfo(InclusiveTag.ELDER_LGBTQ, "Elder LGBTQ+ Friendly",
                     "Understands unique needs of older LGBTQIA+ individuals, including generational experiences", "identity"),
    InclusiveTagInfo(InclusiveTag.YOUTH_LGBTQ, "Youth LGBTQ+ Friendly",
                     "Safe and affirming services for LGBTQIA+ youth and their families", "identity"),
    InclusiveTagInfo(InclusiveTag.BIPOC_AFFIRMING, "BIPOC Affirming",
                     "Culturally competent care that acknowledges intersectionality of race and LGBTQIA+ identity", "identity"),
    # Health
    InclusiveTagInfo(InclusiveTag.HIV_INFORMED, "HIV Informed",
                     "Knowledgeable about HIV care, prevention, and destigmatized support", "health"),
    InclusiveTagInfo(InclusiveTag.PREP_PROVIDER, "PrEP Provider",
                     "Provides or supports access to PrEP (Pre-Exposure Prophylaxis) services", "health"),
    InclusiveTagInfo(InclusiveTag.GENDER_AFFIRMING_CARE, "Gender-Affirming Care",
                     "Offers hormone therapy, surgical referrals, or other gender-affirming medical care", "health"),
    InclusiveTagInfo(InclusiveTag.TRAUMA_INFORMED, "Trauma-Informed",
                     "Uses trauma-informed approaches, understanding LGBTQIA+ specific traumas", "health"),
    # Accessibility
    InclusiveTagInfo(InclusiveTag.DISABILITY_AFFIRMING, "Disability Affirming",
                     "Accessible services for people with physical, sensory, or cognitive disabilities", "accessibility"),
    InclusiveTagInfo(InclusiveTag.NEURODIVERGENT_AFFIRMING, "Neurodivergent Affirming",
                     "Understanding and accommodating of autism, ADHD, and other neurodivergent conditions", "accessibility"),
    # Financial
    InclusiveTagInfo(InclusiveTag.SLIDING_SCALE, "Sliding Scale",
                     "Offers sliding scale fees based on income", "financial"),
    InclusiveTagInfo(InclusiveTag.ACCEPTS_INSURANCE, "Accepts Insurance",
                     "Accepts major insurance plans", "financial"),
]

VERIFICATION_LEVELS: List[VerificationLevelInfo] = [
    VerificationLevelInfo(VerificationLevel.NONE, "Not Verified",
                          "This provider has not yet completed verification"),
    VerificationLevelInfo(VerificationLevel.SELF, "Self-Reported",
                          "Information provided by the provider, not independently verified"),
    VerificationLevelInfo(VerificationLevel.CREDENTIAL, "Credentials Verified",
                          "Professional licenses and credentials have been independently verified"),
    VerificationLevelInfo(VerificationLevel.COMMUNITY, "Community Verified",
                          "Verified through community reviews and endorsements"),
    VerificationLevelInfo(VerificationLevel.ARCUS_VERIFIED, "ArcusPath Verified",
                          "Completed full ArcusPath verification including credentials, references, "
                          "and affirming care assessment"),
]

REPORT_REASONS: List[ReportReasonInfo] = [
    ReportReasonInfo("discrimination", "Discrimination",
                     "Provider discriminated against me based on my identity", "critical"),
    ReportReasonInfo("unsafe-practices", "Unsafe Practices",
                     "Provider engaged in practices that put my health or safety at risk", "critical"),
    ReportReasonInfo("false-credentials", "False Credentials",
                     "Provider's credentials or qualifications appear to be misrepresented", "high"),
    ReportReasonInfo("harassment", "Harassment",
                     "Provider engaged in harassment or inappropriate behavior", "critical"),
    ReportReasonInfo("privacy-violation", "Privacy Violation",
                     "Provider disclosed my information without consent or violated confidentiality", "high"),
    ReportReasonInfo("misrepresentation", "Misrepresentation",
                     "Provider's services or identity are significantly different than advertised", "medium"),
    ReportReasonInfo("other", "Other Concern", "Another issue not covered above", "low"),
]

REPORT_REASON_IDS = [reason.id for reason in REPORT_REASONS]


def get_category_by_id(category_id: str) -> Optional[Category]:
    return next((c for c in CATEGORIES if c.id == category_id), None)


def get_trust_badge_by_id(badge_id: str) -> Optional[TrustBadgeInfo]:
    return next((b for b in TRUST_BADGES if b.id.value == badge_id), None)


def get_inclusive_tag_by_id(tag_id: str) -> Optional[InclusiveTagInfo]:
    return next((t for t in INCLUSIVE_TAGS if t.id.value == tag_id), None)


def get_inclusive_tags_by_category(category: str) -> List[InclusiveTagInfo]:
    return [t for t in INCLUSIVE_TAGS if t.category == category]


def get_verification_info(level: str) -> Optional[VerificationLevelInfo]:
    return next((v for v in VERIFICATION_LEVELS if v.level.value == level), None)


def get_report_reason(reason_id: str) -> Optional[ReportReasonInfo]:
    return next((r for r in REPORT_REASONS if r.id == reason_id), None)


def catalog_as_dict(category_counts: Optional[Dict[str, int]] = None) -> Dict[str, list]:
    """Serialize the catalog for the categories endpoint, with live provider counts."""
    counts = category_counts or {}
    categories = []
    for category in CATEGORIES:
        item = asdict(category)
        item['provider_count'] = counts.get(category.id, 0)
        categories.append(item)

    return {
        'categories': categories,
        'trust_badges': [{**asdict(b), 'id': b.id.value} for b in TRUST_BADGES],
        'inclusive_tags': [{**asdict(t), 'id': t.id.value} for t in INCLUSIVE_TAGS],
        'verification_levels': [
            {'level': v.level.value, 'name': v.name, 'description': v.description, 'trust_score': v.trust_score}
            for v in VERIFICATION_LEVELS
        ],
        'report_reasons': [asdict(r) for r in REPORT_REASONS],
    }

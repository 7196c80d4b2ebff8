#!/usr/bin/env python3
"""
Filter Engine - reduces the provider collection to those matching a filter set.

Filters combine as a conjunction of independently optional predicates. A
predicate whose filter field is absent or empty is skipped. Values that
cannot be interpreted (unknown badge ids, non-string queries, ...) are
treated as absent rather than raising, so malformed query strings never
break search.

Badge matching has two named strategies:
- match_all_badges: provider holds every requested badge. Used by the
  combined multi-filter search (/api/providers, search page).
- match_any_badge: provider holds at least one requested badge. Used by the
  simple badge browsing surface (/api/providers/browse).
"""

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from core.search.models import (
    InclusiveTag,
    Provider,
    TrustBadgeId,
    VerificationLevel,
)

logger = logging.getLogger(__name__)

TRUTHY_VALUES = {"true", "1", "yes", "on"}


class BadgeMatch(str, Enum):
    ALL = "all"
    ANY = "any"


def _clean_str(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _coerce_flag(value: Any) -> Optional[bool]:
    """Only an explicit true enables a flag filter; anything else means don't care."""
    if value is True:
        return True
    if isinstance(value, str) and value.strip().lower() in TRUTHY_VALUES:
        return True
    return None


def _coerce_enum(value: Any, enum_cls):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip())
        except ValueError:
            logger.debug(f"Ignoring unknown {enum_cls.__name__} value: {value!r}")
    return None


def _coerce_enum_list(values: Any, enum_cls) -> List:
    if values is None:
        return []
    if isinstance(values, str):
        values = values.split(",")
    elif not isinstance(values, (list, tuple, set, frozenset)):
        return []

    result = []
    for value in values:
        member = _coerce_enum(value, enum_cls)
        if member is not None and member not in result:
            result.append(member)
    return result


@dataclass
class SearchFilters:
    """Optional search predicates. Construction normalizes every field."""
    query: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    location: Optional[str] = None
    virtual: Optional[bool] = None
    badges: List[TrustBadgeId] = field(default_factory=list)
    inclusive_tags: List[InclusiveTag] = field(default_factory=list)
    verification_level: Optional[VerificationLevel] = None
    lgbtq_owned: Optional[bool] = None
    badge_match: BadgeMatch = BadgeMatch.ALL

    def __post_init__(self):
        self.query = _clean_str(self.query)
        self.category = _clean_str(self.category)
        self.subcategory = _clean_str(self.subcategory)
        self.location = _clean_str(self.location)
        self.virtual = _coerce_flag(self.virtual)
        self.badges = _coerce_enum_list(self.badges, TrustBadgeId)
        self.inclusive_tags = _coerce_enum_list(self.inclusive_tags, InclusiveTag)
        self.verification_level = _coerce_enum(self.verification_level, VerificationLevel)
        self.lgbtq_owned = _coerce_flag(self.lgbtq_owned)
        self.badge_match = _coerce_enum(self.badge_match, BadgeMatch) or BadgeMatch.ALL

    # Accepted spellings for each field when building from loosely typed input
    _ALIASES = {
        'query': ('query', 'q'),
        'category': ('category', 'categoryId', 'category_id'),
        'subcategory': ('subcategory',),
        'location': ('location',),
        'virtual': ('virtual',),
        'badges': ('badges',),
        'inclusive_tags': ('inclusive_tags', 'inclusiveTags', 'tags'),
        'verification_level': ('verification_level', 'verificationLevel'),
        'lgbtq_owned': ('lgbtq_owned', 'lgbtqOwned'),
        'badge_match': ('badge_match', 'badgeMatch'),
    }

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "SearchFilters":
        """Build filters from a loosely typed mapping (JSON body, query dict)."""
        if not isinstance(raw, Mapping):
            return cls()
        kwargs = {}
        for name, keys in cls._ALIASES.items():
            for key in keys:
                if key in raw:
                    kwargs[name] = raw[key]
                    break
        return cls(**kwargs)

    def is_empty(self) -> bool:
        defaults = SearchFilters()
        return all(
            getattr(self, f.name) == getattr(defaults, f.name)
            for f in fields(self)
        )


FilterInput = Union[SearchFilters, Mapping[str, Any], None]


def as_filters(filters: FilterInput) -> SearchFilters:
    if isinstance(filters, SearchFilters):
        return filters
    return SearchFilters.from_dict(filters)


# Predicates

def is_active(provider: Provider) -> bool:
    return provider.is_active


def matches_query(provider: Provider, query: str) -> bool:
    """Case-insensitive substring match on name, business name, description or any specialty."""
    q = query.lower()
    haystacks = [provider.name, provider.business_name or "", provider.description]
    haystacks.extend(provider.specialties)
    return any(q in text.lower() for text in haystacks)


def matches_location(provider: Provider, location: str) -> bool:
    loc = location.lower()
    return loc in provider.location.city.lower() or loc in provider.location.state.lower()


def match_all_badges(provider: Provider, badges: Iterable[TrustBadgeId]) -> bool:
    held = set(provider.trust.trust_badges)
    return all(badge in held for badge in badges)


def match_any_badge(provider: Provider, badges: Iterable[TrustBadgeId]) -> bool:
    held = set(provider.trust.trust_badges)
    return any(badge in held for badge in badges)


def has_all_tags(provider: Provider, tags: Iterable[InclusiveTag]) -> bool:
    held = set(provider.trust.inclusive_tags)
    return all(tag in held for tag in tags)


def matches_filters(provider: Provider, filters: SearchFilters) -> bool:
    """Whether a single provider passes the active baseline and every supplied predicate."""
    if not is_active(provider):
        return False
    if filters.query and not matches_query(provider, filters.query):
        return False
    if filters.category and provider.category_id != filters.category:
        return False
    if filters.subcategory and provider.subcategory != filters.subcategory:
        return False
    if filters.location and not matches_location(provider, filters.location):
        return False
    if filters.virtual and not provider.location.virtual:
        return False
    if filters.badges:
        badge_matcher = match_any_badge if filters.badge_match == BadgeMatch.ANY else match_all_badges
        if not badge_matcher(provider, filters.badges):
            return False
    if filters.inclusive_tags and not has_all_tags(provider, filters.inclusive_tags):
        return False
    if filters.verification_level and provider.trust.verification.level != filters.verification_level:
        return False
    if filters.lgbtq_owned and not provider.trust.lgbtq_owned:
        return False
    return True


def filter_providers(providers: Sequence[Provider], filters: FilterInput = None) -> List[Provider]:
    """
    Apply the active-status baseline and the filter conjunction.

    Args:
        providers: Candidate providers (not modified).
        filters: SearchFilters, a loosely typed mapping, or None.

    Returns:
        New list of matching providers in input order.
    """
    filters = as_filters(filters)
    results = [p for p in providers if matches_filters(p, filters)]
    logger.debug(f"Filtered {len(providers)} providers down to {len(results)}")
    return results

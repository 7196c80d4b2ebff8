#!/usr/bin/env python3
"""
Sort Engine - orders filtered providers by one of the supported strategies.

Every strategy ends with a provider id tie-break, and Python's sort is
stable, so repeated queries over the same snapshot return identical order.
Inputs are never mutated; a new list is returned.
"""

import logging
import unicodedata
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence

from core.search.models import Provider
from core.search.trust import trust_rank

logger = logging.getLogger(__name__)


class SortOption(str, Enum):
    TRUST = "trust"
    RATING = "rating"
    NEWEST = "newest"
    ALPHABETICAL = "alphabetical"

    @classmethod
    def parse(cls, value: Any) -> "SortOption":
        """Resolve a sort option, falling back to trust for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        if value is not None:
            logger.debug(f"Unknown sort option {value!r}, using trust")
        return cls.TRUST


DEFAULT_SORT = SortOption.TRUST


def _char_weight(ch: str) -> tuple:
    # Spaces, punctuation and symbols sort before digits, digits before letters
    category = unicodedata.category(ch)[0]
    if category in ("Z", "P", "S", "C"):
        return (0, ch)
    if category == "N":
        return (1, ch)
    return (2, ch)


def collation_key(name: str) -> tuple:
    """
    Locale-style collation key for provider names.

    Compares base letters first (accents and case ignored), then accents,
    then case with lowercase ahead of uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple(_char_weight(ch) for ch in base.casefold())
    return (primary, decomposed.casefold(), decomposed.swapcase())


def _rating_key(provider: Provider) -> tuple:
    return (-(provider.rating or 0.0), provider.id)


def _newest_key(provider: Provider) -> tuple:
    return (-provider.created_at.timestamp(), provider.id)


def _alphabetical_key(provider: Provider) -> tuple:
    return (collation_key(provider.name), provider.id)


SORT_KEYS: Dict[SortOption, Callable[[Provider], tuple]] = {
    SortOption.TRUST: trust_rank,
    SortOption.RATING: _rating_key,
    SortOption.NEWEST: _newest_key,
    SortOption.ALPHABETICAL: _alphabetical_key,
}


def sort_providers(providers: Sequence[Provider], sort: Any = DEFAULT_SORT) -> List[Provider]:
    """
    Order providers by the given sort option.

    Args:
        providers: Providers to order (not modified).
        sort: SortOption or its string value; unknown values fall back to trust.

    Returns:
        New, ordered list.
    """
    option = SortOption.parse(sort)
    return sorted(providers, key=SORT_KEYS[option])

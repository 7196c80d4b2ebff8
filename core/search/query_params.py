#!/usr/bin/env python3
"""
Query parameter parsing for the search page and API.

Turns a raw query-string mapping into validated search inputs. Unknown or
malformed values are dropped (treated as "not specified"); parsing never
raises.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from core.search.filters import BadgeMatch, SearchFilters
from core.search.sorting import SortOption

logger = logging.getLogger(__name__)


@dataclass
class SearchRequest:
    filters: SearchFilters = field(default_factory=SearchFilters)
    sort: SortOption = SortOption.TRUST
    page: int = 1
    page_size: Optional[int] = None


def _parse_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        logger.debug(f"Ignoring non-integer query parameter value: {value!r}")
        return None


def _get(params: Mapping[str, Any], key: str) -> Any:
    value = params.get(key)
    # Repeated keys arrive as lists from some frameworks; the first one wins
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value


def parse_search_params(
    params: Optional[Mapping[str, Any]],
    badge_match: BadgeMatch = BadgeMatch.ALL,
) -> SearchRequest:
    """
    Parse search query parameters.

    Recognized keys: q, category, subcategory, location, virtual, badges,
    tags, verificationLevel, lgbtqOwned, sort, page, pageSize.

    Args:
        params: Query-string mapping.
        badge_match: Badge strategy for the calling surface.

    Returns:
        SearchRequest with normalized filters, sort and paging values.
    """
    params = params or {}

    filters = SearchFilters(
        query=_get(params, "q"),
        category=_get(params, "category"),
        subcategory=_get(params, "subcategory"),
        location=_get(params, "location"),
        virtual=_get(params, "virtual"),
        badges=_get(params, "badges"),
        inclusive_tags=_get(params, "tags"),
        verification_level=_get(params, "verificationLevel"),
        lgbtq_owned=_get(params, "lgbtqOwned"),
        badge_match=badge_match,
    )

    page = _parse_int(_get(params, "page"))
    page_size = _parse_int(_get(params, "pageSize"))
    if page_size is not None and page_size < 1:
        page_size = None

    return SearchRequest(
        filters=filters,
        sort=SortOption.parse(_get(params, "sort")),
        page=max(page or 1, 1),
        page_size=page_size,
    )

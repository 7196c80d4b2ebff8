#!/usr/bin/env python3
"""
Paginator - slices an ordered sequence into 1-indexed pages.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


def normalize_page(page: Any) -> int:
    """Pages are 1-indexed; anything below 1 or non-integer clamps to 1."""
    if isinstance(page, bool) or not isinstance(page, int):
        return 1
    return max(page, 1)


def normalize_page_size(page_size: Any, default: int = DEFAULT_PAGE_SIZE) -> int:
    """Unset or invalid page sizes fall back to the default. No upper bound."""
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        return default
    return page_size


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total: int = 0
    has_more: bool = False


def paginate(
    items: Sequence[T],
    page: Any = 1,
    page_size: Any = None,
    default_page_size: Optional[int] = None,
) -> Page[T]:
    """
    Slice an ordered sequence into a page.

    Args:
        items: Full ordered sequence.
        page: 1-indexed page number.
        page_size: Items per page.
        default_page_size: Fallback when page_size is unset or invalid.

    Returns:
        Page with the slice, the normalized page/page_size, the pre-slice
        total and whether later pages exist. A page past the end is empty.
    """
    page = normalize_page(page)
    page_size = normalize_page_size(page_size, default_page_size or DEFAULT_PAGE_SIZE)
    total = len(items)
    start = (page - 1) * page_size

    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total=total,
        has_more=page * page_size < total,
    )

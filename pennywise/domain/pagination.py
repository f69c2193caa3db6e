"""Pure functions for paging through expense lists.

Records are expected to be sorted by the caller (newest first); nothing
here reorders them.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 5


@dataclass(frozen=True)
class Page:
    """Immutable page of records with navigation state."""

    items: list
    number: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def total_pages(count: int, page_size: int) -> int:
    """Calculate the number of pages.

    Args:
        count: Number of records.
        page_size: Records per page.

    Returns:
        Page count; 0 when there are no records.

    Raises:
        ValueError: If page_size is not positive.
    """
    if page_size <= 0:
        raise ValueError("Page size must be positive")
    return math.ceil(count / page_size)


def paginate(records: Sequence[T], page_size: int, page_number: int) -> list[T]:
    """Slice out one page of records.

    Args:
        records: Records in display order.
        page_size: Records per page.
        page_number: Page to return, 1-based.

    Returns:
        Records on the page; empty if page_number is past the last page.

    Raises:
        ValueError: If page_size or page_number is not positive.
    """
    if page_size <= 0:
        raise ValueError("Page size must be positive")
    if page_number < 1:
        raise ValueError("Page number must be at least 1")

    start = (page_number - 1) * page_size
    return list(records[start : start + page_size])


def build_page(records: Sequence[T], page_size: int, page_number: int) -> Page:
    """Build a Page with its items and navigation state."""
    return Page(
        items=paginate(records, page_size, page_number),
        number=page_number,
        total_pages=total_pages(len(records), page_size),
    )

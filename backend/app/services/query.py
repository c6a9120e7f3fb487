"""
Roster API - Search and Pagination Helpers
==========================================

What:  Pure functions for the search (lesson 7) and pagination (lesson 10) endpoints.
How:   Both operate on plain sequences, so they are tested without HTTP
       or a repository.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

from app.models.user import User

T = TypeVar("T")


def filter_by_name(users: Sequence[User], query: Optional[str]) -> List[User]:
    """
    Case-insensitive substring match on the user name.

    A missing or empty query returns every user unchanged.
    """
    if not query:
        return list(users)
    needle = query.casefold()
    return [user for user in users if needle in user.name.casefold()]


@dataclass
class Page(Generic[T]):
    """One slice of a collection plus the metadata needed to request the next."""

    items: List[T]
    total: int
    page: int
    page_size: int


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """
    Offset pagination: skip (page - 1) * page_size items, take page_size.

    Pages past the end yield an empty slice; `total` is always the full count.
    Callers are expected to pass page >= 1 and page_size >= 1.
    """
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total=len(items),
        page=page,
        page_size=page_size,
    )

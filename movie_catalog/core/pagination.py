"""
Offset/limit pagination for the movie listing.

Query parameters arrive as raw strings (or not at all). They are resolved
into a clamped page window, an allow-listed sort column and a direction,
and the navigation links are derived from the total row count.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 5
MAX_PER_PAGE = 5

SORT_FIELDS = ("price", "duration")


@dataclass(frozen=True)
class PageParams:
    """Resolved pagination parameters for one listing request."""

    page: int
    per_page: int
    sort: Optional[str]
    order: str

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


@dataclass(frozen=True)
class Page:
    """A page window plus its navigation links."""

    offset: int
    limit: int
    sort: Optional[str]
    order: str
    prev_page: Optional[str]
    next_page: Optional[str]


def _to_int(value: Any) -> Optional[int]:
    """Parse a query value as an integer, or None when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def resolve_page_params(
    page: Any = None,
    per_page: Any = None,
    sort: Any = None,
    order: Any = None,
) -> PageParams:
    """
    Resolve raw query values into a valid page window.

    - page: missing, unparsable or <= 0 becomes 1
    - per_page: missing, unparsable or 0 becomes 5; < 0 or > 5 becomes 5
    - sort: only "price" or "duration", anything else means unsorted
    - order: "DESC" only when given exactly, otherwise "ASC"
    """
    page_number = _to_int(page) or DEFAULT_PAGE
    if page_number <= 0:
        page_number = DEFAULT_PAGE

    size = _to_int(per_page) or DEFAULT_PER_PAGE
    if size < 0 or size > MAX_PER_PAGE:
        size = DEFAULT_PER_PAGE

    return PageParams(
        page=page_number,
        per_page=size,
        sort=sort if sort in SORT_FIELDS else None,
        order="DESC" if order == "DESC" else "ASC",
    )


def _page_url(base_url: str, page: int, per_page: int) -> str:
    return f"{base_url}?page={page}&perPage={per_page}"


def build_page_links(
    base_url: str,
    page: int,
    per_page: int,
    total_rows: int,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Compute (prev_page, next_page) links for a page.

    prev is None on the first page, or when page - 1 lies past the last
    page. next is None once page reaches the last page.
    """
    number_of_pages = math.ceil(total_rows / per_page)

    if page <= 1:
        prev_page = None
    elif number_of_pages >= page - 1:
        prev_page = _page_url(base_url, page - 1, per_page)
    else:
        prev_page = None

    if number_of_pages <= page:
        next_page = None
    else:
        next_page = _page_url(base_url, page + 1, per_page)

    return prev_page, next_page


def paginate(
    page: Any,
    per_page: Any,
    total_rows: int,
    sort: Any = None,
    order: Any = None,
    base_url: str = "/movies",
) -> Page:
    """Resolve the window for a listing and its navigation links."""
    params = resolve_page_params(page, per_page, sort, order)
    prev_page, next_page = build_page_links(
        base_url, params.page, params.per_page, total_rows
    )
    return Page(
        offset=params.offset,
        limit=params.limit,
        sort=params.sort,
        order=params.order,
        prev_page=prev_page,
        next_page=next_page,
    )

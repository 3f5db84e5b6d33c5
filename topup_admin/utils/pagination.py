# File: topup_admin/utils/pagination.py
# Page-window computation and pagination state for the dashboard tables.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from flask import current_app, request, url_for

ELLIPSIS = "..."
DEFAULT_MAX_VISIBLE = 5
JUMP_THRESHOLD = 10

PageEntry = Union[int, str]


def compute_page_window(current_page: int, total_pages: int, max_visible: int = DEFAULT_MAX_VISIBLE) -> tuple[PageEntry, ...]:
    """
    Compute the page buttons to show for a paginated table.

    Returns a tuple of page numbers and ELLIPSIS markers. The first and last
    page are always present, as is the current page. An out-of-range
    current_page is clamped into [1, total_pages] rather than rejected.

    Examples (max_visible=5):
        compute_page_window(1, 10)  -> (1, 2, 3, 4, '...', 10)
        compute_page_window(5, 10)  -> (1, '...', 4, 5, 6, '...', 10)
        compute_page_window(10, 10) -> (1, '...', 7, 8, 9, 10)
    """
    if max_visible < 3:
        raise ValueError("max_visible must be at least 3, got %r" % (max_visible,))
    if total_pages <= 0:
        return ()

    current = min(max(current_page, 1), total_pages)

    if total_pages <= max_visible:
        return tuple(range(1, total_pages + 1))

    half = max_visible // 2

    if current <= half + 1:
        return (*range(1, max_visible), ELLIPSIS, total_pages)

    if current >= total_pages - half:
        return (1, ELLIPSIS, *range(total_pages - max_visible + 2, total_pages + 1))

    middle = max_visible - 2
    start = current - middle // 2
    return (1, ELLIPSIS, *range(start, start + middle), ELLIPSIS, total_pages)


@dataclass(frozen=True)
class PageState:
    """Everything a table needs to render its pagination controls."""

    page: int
    per_page: int
    total_items: int
    total_pages: int
    max_visible: int = DEFAULT_MAX_VISIBLE

    @classmethod
    def build(cls, page: int, per_page: int, total_items: int, total_pages: int | None = None,
              max_visible: int | None = None) -> "PageState":
        per_page = max(per_page, 1)
        total_items = max(total_items, 0)
        if total_pages is None:
            total_pages = math.ceil(total_items / per_page) if total_items else 0
        if max_visible is None:
            max_visible = _configured_max_visible()
        page = min(max(page, 1), max(total_pages, 1))
        return cls(page=page, per_page=per_page, total_items=total_items,
                   total_pages=total_pages, max_visible=max_visible)

    @classmethod
    def from_meta(cls, meta, per_page: int | None = None) -> "PageState":
        """Build the state from a backend ListMeta."""
        return cls.build(
            page=meta.current_page,
            per_page=per_page or meta.items_per_page,
            total_items=meta.total_items,
            total_pages=meta.total_pages,
        )

    @classmethod
    def from_items(cls, items: Sequence, page: int, per_page: int) -> tuple["PageState", list]:
        """Paginate a list the backend returned in one piece."""
        state = cls.build(page=page, per_page=per_page, total_items=len(items))
        start = (state.page - 1) * state.per_page
        return state, list(items[start:start + state.per_page])

    @property
    def window(self) -> tuple[PageEntry, ...]:
        return compute_page_window(self.page, self.total_pages, self.max_visible)

    @property
    def should_render(self) -> bool:
        # A single page needs no navigation
        return self.total_pages > 1

    @property
    def start_item(self) -> int:
        return (self.page - 1) * self.per_page + 1 if self.total_items > 0 else 0

    @property
    def end_item(self) -> int:
        return min(self.page * self.per_page, self.total_items)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def previous_page(self) -> int:
        return max(self.page - 1, 1)

    @property
    def next_page(self) -> int:
        return min(self.page + 1, max(self.total_pages, 1))

    @property
    def show_jump(self) -> bool:
        return self.total_pages > JUMP_THRESHOLD


def _configured_max_visible() -> int:
    try:
        return int(current_app.config.get('PAGINATION_MAX_VISIBLE', DEFAULT_MAX_VISIBLE))
    except RuntimeError:
        # Outside an application context
        return DEFAULT_MAX_VISIBLE


def parse_page_args(args: Mapping[str, str]) -> tuple[int, int]:
    """Read the page number and page size from query arguments."""
    default_limit = current_app.config.get('ITEMS_PER_PAGE', 25)
    allowed = current_app.config.get('PAGE_SIZE_OPTIONS', (25, 50, 100, 200))

    try:
        page = int(args.get('page', 1))
    except (TypeError, ValueError):
        page = 1

    try:
        limit = int(args.get('limit', default_limit))
    except (TypeError, ValueError):
        limit = default_limit
    if limit not in allowed:
        limit = default_limit

    return max(page, 1), limit


def page_url(page: int, **overrides) -> str:
    """URL of the current listing at another page, keeping the other query args."""
    args = request.args.to_dict()
    args.update({key: value for key, value in overrides.items()})
    args['page'] = page
    return url_for(request.endpoint, **(request.view_args or {}), **args)

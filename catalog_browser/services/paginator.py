"""Pagination state for a single listing screen."""

from __future__ import annotations

import logging
from typing import List, Sequence, TypeVar

from catalog_browser.config import DEFAULT_PAGE_SIZE, MAX_VISIBLE_PAGES
from catalog_browser.utils.helpers import coerce_page_number
from catalog_browser.utils.pagination import (
    MIN_VISIBLE_PAGES,
    PageEntry,
    clamp_page_number,
    compute_page_window,
    compute_total_pages,
    page_bounds,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _at_least(value: int, minimum: int, name: str) -> int:
    if value < minimum:
        logger.warning("%s=%r is below %d; using %d", name, value, minimum, minimum)
        return minimum
    return value


class Paginator:
    """Tracks the current page of a list whose length may change at any time.

    Out-of-range input is clamped rather than rejected, and every derived read
    re-clamps the current page so a shrinking total never strands the view on
    a page that no longer exists.
    """

    def __init__(
        self,
        total_count: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_visible_pages: int = MAX_VISIBLE_PAGES,
        initial_page: int = 1,
    ):
        self._total_count = _at_least(int(total_count), 0, "total_count")
        self._page_size = _at_least(int(page_size), 1, "page_size")
        self.max_visible_pages = _at_least(int(max_visible_pages), MIN_VISIBLE_PAGES, "max_visible_pages")
        self._current_page = clamp_page_number(int(initial_page), self.total_pages)

    @property
    def total_count(self) -> int:
        """Number of records being paginated."""
        return self._total_count

    @property
    def page_size(self) -> int:
        """Number of records per page."""
        return self._page_size

    @property
    def total_pages(self) -> int:
        """Page count, never below one."""
        return compute_total_pages(self._total_count, self._page_size)

    @property
    def current_page(self) -> int:
        """Current page, clamped into range on every read."""
        self._current_page = clamp_page_number(self._current_page, self.total_pages)
        return self._current_page

    @property
    def start_index(self) -> int:
        """Zero-based index of the first record on the current page."""
        return page_bounds(self.current_page, self._page_size, self._total_count)[0]

    @property
    def end_index(self) -> int:
        """Zero-based inclusive index of the last record on the current page."""
        return page_bounds(self.current_page, self._page_size, self._total_count)[1]

    @property
    def visible_pages(self) -> List[PageEntry]:
        """Page numbers and ellipsis markers for the navigation controls."""
        return compute_page_window(self.current_page, self.total_pages, self.max_visible_pages)

    @property
    def has_previous(self) -> bool:
        """Whether a page exists before the current one."""
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        """Whether a page exists after the current one."""
        return self.current_page < self.total_pages

    def set_page(self, page_number: object) -> int:
        """Move to ``page_number`` clamped to the available pages."""
        requested = coerce_page_number(page_number)
        if requested is None:
            logger.warning("Ignoring non-numeric page %r", page_number)
            return self.current_page
        self._current_page = clamp_page_number(requested, self.total_pages)
        return self._current_page

    def next_page(self) -> int:
        """Advance one page, staying on the last page at the end."""
        return self.set_page(self.current_page + 1)

    def prev_page(self) -> int:
        """Go back one page, staying on the first page at the start."""
        return self.set_page(self.current_page - 1)

    def reset_pagination(self) -> int:
        """Return to the first page."""
        self._current_page = 1
        return self._current_page

    def set_total_count(self, total_count: int) -> int:
        """Update the item count and clamp the current page into the new range."""
        self._total_count = max(int(total_count), 0)
        return self.current_page

    def set_page_size(self, page_size: object) -> int:
        """Change the page size, keeping the first visible item on screen."""
        requested = coerce_page_number(page_size)
        if requested is None:
            logger.warning("Ignoring non-numeric page size %r", page_size)
            return self.current_page
        first_visible = self.start_index
        self._page_size = _at_least(requested, 1, "page_size")
        return self.set_page(first_visible // self._page_size + 1)

    def page_slice(self, records: Sequence[T]) -> List[T]:
        """Return the records that belong to the current page."""
        return list(records[self.start_index:self.end_index + 1])

    def page_info(self) -> str:
        """Describe the visible range, e.g. ``Showing 9-16 of 20``."""
        if self._total_count == 0:
            return "Showing 0 of 0"
        return f"Showing {self.start_index + 1}-{self.end_index + 1} of {self._total_count}"

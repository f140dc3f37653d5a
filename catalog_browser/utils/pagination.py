"""Pagination helpers for page slicing and page-number windows."""

from __future__ import annotations

import math
from typing import List, Tuple, Union

ELLIPSIS = "ellipsis"
MIN_VISIBLE_PAGES = 3

PageEntry = Union[int, str]


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(max(total_rows, 0) / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_bounds(page_number: int, page_size: int, total_rows: int) -> Tuple[int, int]:
    """Return inclusive start/end row indexes for the selected page.

    An empty collection yields ``(0, -1)`` so that ``rows[start:end + 1]`` is
    empty.
    """
    if total_rows <= 0:
        return 0, -1
    start = (page_number - 1) * page_size
    end = min(start + page_size - 1, total_rows - 1)
    return start, end


def compute_page_window(current_page: int, total_pages: int, max_visible_pages: int) -> List[PageEntry]:
    """Build the compressed list of page numbers shown in navigation controls.

    The first and last pages are always present. A band of
    ``max_visible_pages - 2`` pages is centred on the current page and shifted
    to stay within the page range; gaps between the band and either anchor
    are marked with ``ELLIPSIS``. Fewer than three visible pages cannot hold
    both anchors and a band, so smaller values are raised to three.
    """
    total_pages = max(total_pages, 1)
    max_visible_pages = max(max_visible_pages, MIN_VISIBLE_PAGES)
    current_page = clamp_page_number(current_page, total_pages)

    if total_pages <= max_visible_pages:
        return list(range(1, total_pages + 1))

    band_size = max_visible_pages - 2
    band_start = current_page - (band_size - 1) // 2
    band_start = max(1, min(band_start, total_pages - band_size + 1))
    band_end = band_start + band_size - 1

    window: List[PageEntry] = [1]
    if band_start > 2:
        window.append(ELLIPSIS)
    window.extend(page for page in range(band_start, band_end + 1) if 1 < page < total_pages)
    if band_end < total_pages - 1:
        window.append(ELLIPSIS)
    window.append(total_pages)
    return window

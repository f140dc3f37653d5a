"""Catalog browser configuration constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_PAGE_SIZE = 8
PAGE_SIZE_OPTIONS = [4, 8, 12, 16]
MAX_VISIBLE_PAGES = 5

VIEW_MODES = ("grid", "list")
DEFAULT_VIEW_MODE = "grid"

LOW_STOCK_THRESHOLD = 10
STOCK_BAR_CAPACITY = 50

CATEGORY_LABELS = {
    "FOOD": "Food",
    "DRINK": "Drink",
}

SNACK_COLUMNS = [
    "id",
    "name",
    "description",
    "category",
    "price",
    "quantity",
    "size",
    "status",
    "img",
]

COMBO_COLUMNS = [
    "id",
    "name",
    "description",
    "price",
    "status",
    "img",
]

NUMERIC_COLUMNS = ["id", "price", "quantity"]

SNACK_SORT_FIELDS = ["name", "price", "quantity"]
COMBO_SORT_FIELDS = ["name"]

SNACK_FILTER_FIELDS = ["category", "status", "size"]


@dataclass
class ListViewConfig:
    """Settings owned by a single listing screen."""

    page_size: int = DEFAULT_PAGE_SIZE
    max_visible_pages: int = MAX_VISIBLE_PAGES
    view_mode: str = DEFAULT_VIEW_MODE
    sortable_fields: Optional[List[str]] = field(default=None)

"""Stock classification derived from snack records."""

from __future__ import annotations

from enum import Enum

from catalog_browser.config import CATEGORY_LABELS, LOW_STOCK_THRESHOLD, STOCK_BAR_CAPACITY
from catalog_browser.models import Snack
from catalog_browser.utils.helpers import normalize_text


class StockLevel(str, Enum):
    UNAVAILABLE = "UNAVAILABLE"
    SOLD_OUT = "SOLD_OUT"
    LOW = "LOW"
    AVAILABLE = "AVAILABLE"


def stock_level(snack: Snack) -> StockLevel:
    """Classify a snack by its status flag first, then by quantity on hand."""
    if snack.status == "UNAVAILABLE":
        return StockLevel.UNAVAILABLE
    if snack.status == "SOLD_OUT" or snack.quantity <= 0:
        return StockLevel.SOLD_OUT
    if snack.quantity < LOW_STOCK_THRESHOLD:
        return StockLevel.LOW
    return StockLevel.AVAILABLE


def is_out_of_stock(snack: Snack) -> bool:
    return stock_level(snack) in (StockLevel.UNAVAILABLE, StockLevel.SOLD_OUT)


def stock_fill_ratio(quantity: int) -> float:
    """Fraction of the stock bar to fill, capped at a full bar."""
    if quantity <= 0:
        return 0.0
    return min(quantity / STOCK_BAR_CAPACITY, 1.0)


def category_label(category: object) -> str:
    """Return the display label for a category, or the raw value when unknown."""
    raw_category = normalize_text(category)
    return CATEGORY_LABELS.get(raw_category.upper(), raw_category)

"""Helper utilities for record field access and value normalization."""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from datetime import date, datetime
from numbers import Number
from typing import Any, Callable, Optional, Tuple

import pandas as pd

FieldAccessor = Callable[[Any, str], Any]


def read_field(record: Any, field_name: str) -> Any:
    """Read a field from a mapping or an object, returning None when absent."""
    if isinstance(record, Mapping):
        return record.get(field_name)
    return getattr(record, field_name, None)


def is_missing(value: object) -> bool:
    """Return True for None and pandas/numpy null markers."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if is_missing(value):
        return ""
    if isinstance(value, pd.Timestamp):
        return value.date().isoformat()
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value).strip()


def text_sort_key(value: str) -> str:
    """Return a locale-independent collation key for text."""
    return unicodedata.normalize("NFKD", value).casefold()


def natural_sort_key(value: object) -> Tuple[int, Any]:
    """Rank a non-null value by type group, then by its natural order.

    Numbers compare numerically, text by ``text_sort_key`` and everything else
    natively within its own type. The group rank keeps mixed-type columns
    comparable.
    """
    if isinstance(value, Number):
        return 0, value
    if isinstance(value, str):
        return 1, text_sort_key(value)
    return 2, (type(value).__name__, value)


def coerce_page_number(value: object) -> Optional[int]:
    """Convert a UI-supplied page value to int, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None

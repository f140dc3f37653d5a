"""Filtering utilities for catalog list dimensions."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, TypeVar

from catalog_browser.utils.helpers import FieldAccessor, normalize_text, read_field, text_sort_key

T = TypeVar("T")


def get_filter_options(
    records: Iterable[T],
    fields: Sequence[str],
    accessor: FieldAccessor = read_field,
) -> Dict[str, List[str]]:
    """Build sorted non-empty options for each filterable field."""
    rows = list(records)
    options: Dict[str, List[str]] = {}
    for field_name in fields:
        values = {normalize_text(accessor(row, field_name)) for row in rows}
        options[field_name] = sorted((value for value in values if value), key=text_sort_key)
    return options


def apply_filters(
    records: Iterable[T],
    selected_filters: Dict[str, List[str]],
    accessor: FieldAccessor = read_field,
) -> List[T]:
    """Apply AND logic across filter dimensions with OR inside each dimension."""
    active = {
        field_name: {normalize_text(value) for value in values}
        for field_name, values in selected_filters.items()
        if values
    }
    return [
        row
        for row in records
        if all(normalize_text(accessor(row, field_name)) in values for field_name, values in active.items())
    ]


def filters_signature(selected_filters: Dict[str, List[str]]) -> tuple:
    """Build a hashable signature used to detect filter changes."""
    return tuple(
        (key, tuple(sorted(values))) for key, values in sorted(selected_filters.items()) if values
    )

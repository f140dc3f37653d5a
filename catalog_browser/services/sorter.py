"""Sort state and stable record sorting for listing screens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, List, Optional, TypeVar

import pandas as pd

from catalog_browser.utils.helpers import FieldAccessor, is_missing, natural_sort_key, read_field

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class SortState:
    key: Optional[str] = None
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def is_active(self) -> bool:
        """Whether a sort key is set."""
        return self.key is not None

    def toggled(self, field_name: str) -> "SortState":
        """Return the state after a sort request on ``field_name``.

        A new field sorts ascending, a second request on the same field sorts
        descending and a third clears the sort.
        """
        if self.key != field_name:
            return SortState(field_name, SortDirection.ASCENDING)
        if self.direction is SortDirection.ASCENDING:
            return SortState(field_name, SortDirection.DESCENDING)
        return SortState()


def sort_records(
    records: Iterable[T],
    sort_state: SortState,
    accessor: FieldAccessor = read_field,
) -> List[T]:
    """Return records ordered by the sort state; missing values always go last."""
    rows = list(records)
    if sort_state.key is None:
        return rows

    present: List[T] = []
    missing: List[T] = []
    for row in rows:
        (missing if is_missing(accessor(row, sort_state.key)) else present).append(row)

    # sorted() stays stable with reverse=True, so equal keys keep input order.
    ordered = sorted(
        present,
        key=lambda row: natural_sort_key(accessor(row, sort_state.key)),
        reverse=sort_state.direction is SortDirection.DESCENDING,
    )
    return ordered + missing


def sort_frame(dataframe: pd.DataFrame, sort_state: SortState) -> pd.DataFrame:
    """Sort a dataframe with the same stable semantics as ``sort_records``."""
    if sort_state.key is None or sort_state.key not in dataframe.columns:
        return dataframe.copy()

    column = dataframe[sort_state.key]
    if column.dtype == object or pd.api.types.is_string_dtype(column):
        # Object columns may mix numbers and text, so order rows by position
        # through the record sort instead of pandas' comparison.
        values = column.tolist()
        positions = sort_records(range(len(values)), sort_state, lambda position, _: values[position])
        return dataframe.iloc[positions].copy()

    return dataframe.sort_values(
        by=sort_state.key,
        ascending=sort_state.direction is SortDirection.ASCENDING,
        kind="mergesort",
        na_position="last",
    )


class Sorter(Generic[T]):
    """Holds the sort state of one listing screen."""

    def __init__(self, accessor: FieldAccessor = read_field, sortable_fields: Optional[Iterable[str]] = None):
        self._accessor = accessor
        self._sortable_fields = set(sortable_fields) if sortable_fields is not None else None
        self.state = SortState()

    def request_sort(self, field_name: str) -> SortState:
        """Toggle the sort on ``field_name``; non-sortable fields leave the state unchanged."""
        if self._sortable_fields is not None and field_name not in self._sortable_fields:
            logger.debug("Ignoring sort request on non-sortable field %r", field_name)
            return self.state
        self.state = self.state.toggled(field_name)
        return self.state

    def sort(self, records: Iterable[T]) -> List[T]:
        """Return records ordered by the current sort state."""
        return sort_records(records, self.state, self._accessor)

    def sort_props(self, field_name: str) -> dict:
        """Describe the sort button state for ``field_name``."""
        active = self.state.key == field_name
        return {
            "field": field_name,
            "active": active,
            "direction": self.state.direction.value if active else None,
        }

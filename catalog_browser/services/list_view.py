"""Sorted, filtered and paginated view over one catalog listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from catalog_browser.config import VIEW_MODES, ListViewConfig
from catalog_browser.services.filter_service import apply_filters, filters_signature
from catalog_browser.services.paginator import Paginator
from catalog_browser.services.sorter import Sorter, SortState
from catalog_browser.utils.helpers import FieldAccessor, read_field
from catalog_browser.utils.pagination import PageEntry

T = TypeVar("T")


@dataclass(frozen=True)
class PageView(Generic[T]):
    """Everything the rendering layer needs for one pass."""

    current_page_slice: List[T]
    visible_pages: List[PageEntry]
    current_page: int
    total_pages: int
    total_count: int
    page_info: str
    view_mode: str
    sort_state: SortState

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0

    @property
    def show_controls(self) -> bool:
        return self.total_pages > 1


class CatalogListView(Generic[T]):
    """Holds sort, filter, page and view-mode state for one listing screen.

    Records are never mutated. Each call to ``snapshot`` filters, sorts and
    then paginates, so the paginator always sees the count of the list it
    slices.
    """

    def __init__(
        self,
        records: Iterable[T] = (),
        config: Optional[ListViewConfig] = None,
        accessor: FieldAccessor = read_field,
    ):
        self.config = config or ListViewConfig()
        self._accessor = accessor
        self._records: List[T] = list(records)
        self._selected_filters: Dict[str, List[str]] = {}
        self._filter_signature: tuple = tuple()
        self.sorter: Sorter[T] = Sorter(accessor, self.config.sortable_fields)
        self.paginator = Paginator(
            total_count=len(self._records),
            page_size=self.config.page_size,
            max_visible_pages=self.config.max_visible_pages,
        )
        self.view_mode = self.config.view_mode
        if self.view_mode not in VIEW_MODES:
            self.set_view_mode(self.view_mode)

    @property
    def sort_state(self) -> SortState:
        return self.sorter.state

    def set_records(self, records: Iterable[T]) -> None:
        self._records = list(records)
        self.paginator.reset_pagination()
        self._sync_total()

    def set_filters(self, selected_filters: Dict[str, List[str]]) -> bool:
        """Store filter selections; return True when they changed and pagination was reset."""
        signature = filters_signature(selected_filters)
        self._selected_filters = {key: list(values) for key, values in selected_filters.items()}
        if signature == self._filter_signature:
            return False
        self._filter_signature = signature
        self.paginator.reset_pagination()
        return True

    def request_sort(self, field_name: str) -> SortState:
        previous = self.sorter.state
        state = self.sorter.request_sort(field_name)
        if state != previous:
            self.paginator.reset_pagination()
        return state

    def sort_props(self, field_name: str) -> dict:
        return self.sorter.sort_props(field_name)

    def set_view_mode(self, view_mode: str) -> None:
        if view_mode not in VIEW_MODES:
            raise ValueError(f"view_mode must be one of {', '.join(VIEW_MODES)}, got {view_mode!r}")
        self.view_mode = view_mode

    def set_page(self, page_number: object) -> int:
        self._sync_total()
        return self.paginator.set_page(page_number)

    def next_page(self) -> int:
        self._sync_total()
        return self.paginator.next_page()

    def prev_page(self) -> int:
        self._sync_total()
        return self.paginator.prev_page()

    def reset_pagination(self) -> int:
        return self.paginator.reset_pagination()

    def set_page_size(self, page_size: object) -> int:
        self._sync_total()
        return self.paginator.set_page_size(page_size)

    def visible_records(self) -> List[T]:
        """Return the filtered records in the current sort order."""
        filtered = apply_filters(self._records, self._selected_filters, self._accessor)
        return self.sorter.sort(filtered)

    def snapshot(self) -> PageView[T]:
        ordered = self.visible_records()
        self.paginator.set_total_count(len(ordered))
        return PageView(
            current_page_slice=self.paginator.page_slice(ordered),
            visible_pages=self.paginator.visible_pages,
            current_page=self.paginator.current_page,
            total_pages=self.paginator.total_pages,
            total_count=self.paginator.total_count,
            page_info=self.paginator.page_info(),
            view_mode=self.view_mode,
            sort_state=self.sorter.state,
        )

    def _sync_total(self) -> None:
        if self._selected_filters:
            total = len(apply_filters(self._records, self._selected_filters, self._accessor))
        else:
            total = len(self._records)
        self.paginator.set_total_count(total)

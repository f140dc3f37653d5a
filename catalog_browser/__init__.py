"""Pagination and sorting core for the snack/combo admin catalog screens."""

from catalog_browser.config import ListViewConfig
from catalog_browser.services.list_view import CatalogListView, PageView
from catalog_browser.services.paginator import Paginator
from catalog_browser.services.sorter import SortDirection, Sorter, SortState
from catalog_browser.utils.pagination import ELLIPSIS

__all__ = [
    "CatalogListView",
    "ELLIPSIS",
    "ListViewConfig",
    "PageView",
    "Paginator",
    "SortDirection",
    "SortState",
    "Sorter",
]

import unittest

from catalog_browser import ELLIPSIS, CatalogListView, ListViewConfig, SortDirection, SortState
from catalog_browser.config import COMBO_SORT_FIELDS, PAGE_SIZE_OPTIONS, SNACK_SORT_FIELDS
from catalog_browser.models import Combo, Snack


def make_combos(count):
    return [Combo(index, f"Combo {index:03d}", price=float(index)) for index in range(1, count + 1)]


class TestCatalogListView(unittest.TestCase):
    def test_first_snapshot(self):
        view = CatalogListView(make_combos(20))
        page = view.snapshot()

        self.assertEqual([combo.id for combo in page.current_page_slice], list(range(1, 9)))
        self.assertEqual(page.current_page, 1)
        self.assertEqual(page.total_pages, 3)
        self.assertEqual(page.visible_pages, [1, 2, 3])
        self.assertEqual(page.page_info, "Showing 1-8 of 20")
        self.assertEqual(page.view_mode, "grid")
        self.assertTrue(page.show_controls)

    def test_navigation(self):
        view = CatalogListView(make_combos(20))
        view.next_page()
        view.next_page()
        view.next_page()
        page = view.snapshot()
        self.assertEqual(page.current_page, 3)
        self.assertEqual([combo.id for combo in page.current_page_slice], [17, 18, 19, 20])
        self.assertEqual(page.page_info, "Showing 17-20 of 20")

        view.prev_page()
        self.assertEqual(view.snapshot().current_page, 2)

    def test_sort_request_resets_and_reorders(self):
        view = CatalogListView(make_combos(20))
        view.set_page(3)

        self.assertEqual(view.request_sort("name"), SortState("name", SortDirection.ASCENDING))
        view.request_sort("name")
        page = view.snapshot()
        self.assertEqual(page.current_page, 1)
        self.assertEqual(page.current_page_slice[0].id, 20)
        self.assertEqual(page.sort_state, SortState("name", SortDirection.DESCENDING))

        view.request_sort("name")
        self.assertEqual(view.snapshot().current_page_slice[0].id, 1)

    def test_ignored_sort_request_keeps_page(self):
        config = ListViewConfig(sortable_fields=COMBO_SORT_FIELDS)
        view = CatalogListView(make_combos(20), config)
        view.set_page(2)
        view.request_sort("price")
        self.assertEqual(view.snapshot().current_page, 2)

    def test_filters_reset_pagination_only_when_changed(self):
        snacks = [
            Snack(index, f"Snack {index}", category="FOOD" if index % 2 else "DRINK", quantity=index)
            for index in range(1, 41)
        ]
        view = CatalogListView(snacks, ListViewConfig(sortable_fields=SNACK_SORT_FIELDS))
        view.set_page(4)

        self.assertTrue(view.set_filters({"category": ["FOOD"]}))
        page = view.snapshot()
        self.assertEqual(page.current_page, 1)
        self.assertEqual(page.total_count, 20)
        self.assertTrue(all(snack.category == "FOOD" for snack in page.current_page_slice))

        view.set_page(2)
        self.assertFalse(view.set_filters({"category": ["FOOD"], "size": []}))
        self.assertEqual(view.snapshot().current_page, 2)

    def test_set_records_resets(self):
        view = CatalogListView(make_combos(40))
        view.set_page(5)
        view.set_records(make_combos(3))
        page = view.snapshot()
        self.assertEqual(page.current_page, 1)
        self.assertEqual(page.total_pages, 1)
        self.assertFalse(page.show_controls)

    def test_page_size_change_keeps_first_item_visible(self):
        view = CatalogListView(make_combos(40), ListViewConfig(page_size=4))
        view.set_page(5)
        self.assertEqual(view.snapshot().current_page_slice[0].id, 17)

        view.set_page_size(12)
        page = view.snapshot()
        self.assertEqual(page.current_page, 2)
        self.assertIn(17, [combo.id for combo in page.current_page_slice])

    def test_every_page_size_option_covers_all_items(self):
        combos = make_combos(30)
        view = CatalogListView(combos)
        for page_size in PAGE_SIZE_OPTIONS:
            view.set_page_size(page_size)
            view.reset_pagination()
            seen = []
            for page_number in range(1, view.snapshot().total_pages + 1):
                view.set_page(page_number)
                seen.extend(view.snapshot().current_page_slice)
            self.assertEqual(seen, combos)

    def test_empty_catalog(self):
        page = CatalogListView([]).snapshot()
        self.assertTrue(page.is_empty)
        self.assertEqual(page.current_page_slice, [])
        self.assertEqual(page.total_pages, 1)
        self.assertEqual(page.page_info, "Showing 0 of 0")

    def test_long_catalog_window(self):
        view = CatalogListView(make_combos(160))
        view.set_page(10)
        self.assertEqual(view.snapshot().visible_pages, [1, ELLIPSIS, 9, 10, 11, ELLIPSIS, 20])

    def test_sort_props(self):
        view = CatalogListView(make_combos(3))
        view.request_sort("name")
        self.assertTrue(view.sort_props("name")["active"])
        self.assertFalse(view.sort_props("price")["active"])

    def test_view_mode(self):
        view = CatalogListView(make_combos(3), ListViewConfig(view_mode="list"))
        self.assertEqual(view.snapshot().view_mode, "list")
        view.set_view_mode("grid")
        self.assertEqual(view.view_mode, "grid")
        with self.assertRaises(ValueError):
            view.set_view_mode("table")
        with self.assertRaises(ValueError):
            CatalogListView([], ListViewConfig(view_mode="cards"))

    def test_views_do_not_share_state(self):
        first = CatalogListView(make_combos(20))
        second = CatalogListView(make_combos(20))
        first.set_page(3)
        first.request_sort("name")
        self.assertEqual(second.snapshot().current_page, 1)
        self.assertEqual(second.sort_state, SortState())


if __name__ == "__main__":
    unittest.main()

"""Unit tests for build_navigation."""

from pager.paging.navigation import build_navigation
from pager.paging.page_calculator import PageCalculator


class TestBuildNavigation:
    def test_single_page_has_no_items(self, make_calculator) -> None:
        navigation = build_navigation(make_calculator(total_records=15))

        assert navigation.items == []
        assert navigation.is_empty is True
        assert navigation.total_pages == 1

    def test_empty_data_set_has_no_items(self) -> None:
        navigation = build_navigation(PageCalculator(0, 15))

        assert navigation.is_empty is True

    def test_first_page(self, make_calculator) -> None:
        first, previous, current, next_, last = build_navigation(make_calculator(1)).items

        assert (first.active, first.url, first.page) == (False, None, 1)
        assert (previous.active, previous.url) == (False, None)
        assert current.label == "Page 1 of 4"
        assert current.title == "Viewing 1 - 15 of 50 entries"
        assert (next_.active, next_.url, next_.page) == (True, "?page=2", 2)
        assert (last.active, last.url, last.page) == (True, "?page=4", 4)

    def test_middle_page(self, make_calculator) -> None:
        items = build_navigation(make_calculator(2), base_url="/articles/").items

        assert [item.active for item in items] == [True, True, False, True, True]
        assert [item.url for item in items] == [
            "/articles/?page=1",
            "/articles/?page=1",
            None,
            "/articles/?page=3",
            "/articles/?page=4",
        ]
        assert items[2].title == "Viewing 16 - 30 of 50 entries"

    def test_last_page(self, make_calculator) -> None:
        first, previous, current, next_, last = build_navigation(make_calculator(4)).items

        assert first.active is True
        assert (previous.active, previous.page) == (True, 3)
        assert current.label == "Page 4 of 4"
        assert current.title == "Viewing 46 - 50 of 50 entries"
        assert (next_.active, next_.url) == (False, None)
        assert (last.active, last.url) == (False, None)

    def test_labels(self, make_calculator) -> None:
        items = build_navigation(make_calculator(2)).items

        assert [item.label for item in items] == [
            "First",
            "← Previous",
            "Page 2 of 4",
            "Next →",
            "Last",
        ]

    def test_links_use_page_key_and_keep_query(self, make_calculator) -> None:
        pager = make_calculator(2, page_key="p")
        items = build_navigation(pager, base_url="/list?sort=desc&p=2").items

        assert items[0].url == "/list?sort=desc&p=1"
        assert items[3].url == "/list?sort=desc&p=3"

    def test_translated_labels(self, make_calculator, german_translator) -> None:
        items = build_navigation(make_calculator(2), translate=german_translator).items

        assert items[0].label == "Erste"
        assert items[2].label == "Seite 2 von 4"
        assert items[2].title == "Einträge 16 - 30 von 50"
        assert items[4].label == "Letzte"

    def test_navigation_metadata(self, make_calculator) -> None:
        navigation = build_navigation(make_calculator(3))

        assert navigation.current_page == 3
        assert navigation.total_pages == 4
        assert navigation.per_page == 15
        assert navigation.total_records == 50
        assert navigation.page_key == "page"

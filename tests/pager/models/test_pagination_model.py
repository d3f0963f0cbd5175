"""Unit tests for the PageInfo and navigation models."""

import pytest
from pydantic import ValidationError

from pager.models.navigation import Navigation, NavigationItem
from pager.models.pagination import PageInfo


def _page_info(**overrides) -> PageInfo:
    values = {
        "total_records": 50,
        "per_page": 15,
        "page_key": "page",
        "total_pages": 4,
        "current_page": 1,
        "offset": 0,
        "limit": 15,
        "first_record": 1,
        "last_record": 15,
        "has_previous": False,
        "has_next": True,
    }
    values.update(overrides)
    return PageInfo(**values)


class TestPageInfo:
    def test_create_page_info_success(self) -> None:
        info = _page_info()

        assert info.total_pages == 4
        assert info.has_next is True

    def test_invalid_int_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            _page_info(per_page="15")

    def test_zero_per_page_raises(self) -> None:
        with pytest.raises(ValidationError):
            _page_info(per_page=0)

    def test_invalid_bool_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            _page_info(has_next="true")

    def test_page_info_is_frozen(self) -> None:
        info = _page_info()

        with pytest.raises(ValidationError):
            info.current_page = 2


class TestNavigationModels:
    def test_item_defaults(self) -> None:
        item = NavigationItem(role="current", label="Page 1 of 2")

        assert item.page is None
        assert item.url is None
        assert item.active is False
        assert item.title is None

    def test_unknown_role_raises(self) -> None:
        with pytest.raises(ValidationError):
            NavigationItem(role="middle", label="x")

    def test_empty_navigation(self) -> None:
        navigation = Navigation(
            current_page=1,
            total_pages=1,
            per_page=10,
            total_records=0,
            page_key="page",
        )

        assert navigation.is_empty is True

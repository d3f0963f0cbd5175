"""
Construction of the page-navigation description.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pager.models.navigation import Navigation, NavigationItem, NavigationRole
from pager.utils.constants import (
    MSG_FIRST,
    MSG_LAST,
    MSG_NEXT,
    MSG_PAGE_OF,
    MSG_PREVIOUS,
    MSG_VIEWING,
    NAV_ROLE_CURRENT,
    NAV_ROLE_FIRST,
    NAV_ROLE_LAST,
    NAV_ROLE_NEXT,
    NAV_ROLE_PREVIOUS,
)
from pager.utils.request import build_page_url
from pager.utils.translation import TranslateFunc, default_translator

if TYPE_CHECKING:
    from pager.paging.page_calculator import PageCalculator


def _link_item(
    role: NavigationRole,
    label: str,
    *,
    page: int,
    active: bool,
    base_url: str,
    page_key: str,
) -> NavigationItem:
    return NavigationItem(
        role=role,
        label=label,
        page=page,
        url=build_page_url(base_url, page_key, page) if active else None,
        active=active,
    )


def build_navigation(
    calculator: PageCalculator,
    *,
    base_url: str = "",
    translate: TranslateFunc | None = None,
) -> Navigation:
    """
    Describe the navigation bar for the calculator's current page.

    Produces, in order: First, Previous, "Page X of Y", Next, Last.
    First/Previous are inert on the first page and Next/Last are inert on
    the last page. No items are produced when there is a single page.

    Args:
        calculator: Paging state to describe
        base_url: URL the page links point at; the page key is set in its
            query string
        translate: Localization function for labels, English by default

    Returns:
        Navigation model ready for a NavigationRenderer
    """
    translate = translate or default_translator
    current = calculator.current_page
    total = calculator.total_pages
    page_key = calculator.page_key

    items: list[NavigationItem] = []

    if total > 1:
        at_first = current == 1
        at_last = current == total

        items = [
            _link_item(
                NAV_ROLE_FIRST,
                translate(MSG_FIRST),
                page=1,
                active=not at_first,
                base_url=base_url,
                page_key=page_key,
            ),
            _link_item(
                NAV_ROLE_PREVIOUS,
                translate(MSG_PREVIOUS),
                page=max(current - 1, 1),
                active=not at_first,
                base_url=base_url,
                page_key=page_key,
            ),
            NavigationItem(
                role=NAV_ROLE_CURRENT,
                label=translate(MSG_PAGE_OF, current=current, total=total),
                title=translate(
                    MSG_VIEWING,
                    first=calculator.first_record,
                    last=calculator.last_record,
                    total=calculator.total_records,
                ),
            ),
            _link_item(
                NAV_ROLE_NEXT,
                translate(MSG_NEXT),
                page=min(current + 1, total),
                active=not at_last,
                base_url=base_url,
                page_key=page_key,
            ),
            _link_item(
                NAV_ROLE_LAST,
                translate(MSG_LAST),
                page=total,
                active=not at_last,
                base_url=base_url,
                page_key=page_key,
            ),
        ]

    return Navigation(
        items=items,
        current_page=current,
        total_pages=total,
        per_page=calculator.per_page,
        total_records=calculator.total_records,
        page_key=page_key,
    )

"""
Page calculation for offset/limit pagination.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from aws_lambda_powertools import Logger

from pager.config import PagerSettings, load_settings
from pager.models.errors import InvalidArgumentError
from pager.models.pagination import PageInfo
from pager.paging.navigation import build_navigation
from pager.rendering.base import NavigationRenderer
from pager.rendering.html_renderer import HtmlNavigationRenderer
from pager.utils.constants import DEFAULT_PAGE_KEY, LIMIT_CLAUSE_FORMAT
from pager.utils.request import coerce_page_number, read_requested_page
from pager.utils.translation import TranslateFunc

logger = Logger(UTC=True)

ItemT = TypeVar("ItemT")


def _to_int(value: Any, *, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        logger.warning(
            "Pager argument is not an integer",
            extra={"field": field, "value": repr(value)},
        )
        raise InvalidArgumentError(
            message=f"{field} must be an integer",
            details={"field": field, "value": repr(value)},
        ) from exc


class PageCalculator:
    """
    Pagination helper for a data set of known size.

    Given the total number of records, the page size and the page requested
    by the client, this class works out how many pages exist, which page is
    being viewed and which rows to fetch for it.

    Typical usage:
        pager = PageCalculator.from_params(50, 15, event["queryStringParameters"])
        offset, limit = pager.get_limit()
        rows = fetch_rows(offset=offset, limit=limit)
        html = pager.render(base_url="/articles/")

    All derived values are computed once at construction, so an instance
    never changes after it is built.
    """

    def __init__(
        self,
        total_records: Any,
        per_page: Any,
        page_key: str = DEFAULT_PAGE_KEY,
        requested_page: Any = None,
    ) -> None:
        total_records = _to_int(total_records, field="total_records")
        per_page = _to_int(per_page, field="per_page")

        if per_page <= 0:
            logger.warning("Rejected non-positive page size", extra={"per_page": per_page})
            raise InvalidArgumentError(
                message="per_page must be a positive integer",
                details={"field": "per_page", "value": per_page},
            )

        if total_records < 0:
            logger.warning(
                "Rejected negative record count",
                extra={"total_records": total_records},
            )
            raise InvalidArgumentError(
                message="total_records must be zero or a positive integer",
                details={"field": "total_records", "value": total_records},
            )

        self._total_records = total_records
        self._per_page = per_page
        self._page_key = page_key

        # An empty data set still has one (empty) page.
        self._total_pages = max(1, -(-total_records // per_page))
        self._current_page = self._clamp(requested_page)

    @classmethod
    def from_params(
        cls,
        total_records: Any,
        per_page: Any,
        params: Mapping[str, Any] | None,
        page_key: str = DEFAULT_PAGE_KEY,
    ) -> PageCalculator:
        """Build a calculator reading the requested page from query parameters."""
        return cls(
            total_records,
            per_page,
            page_key=page_key,
            requested_page=read_requested_page(params, page_key),
        )

    @classmethod
    def from_settings(
        cls,
        total_records: Any,
        params: Mapping[str, Any] | None,
        settings: PagerSettings | None = None,
    ) -> PageCalculator:
        """Build a calculator using the configured page key and page size."""
        settings = settings or load_settings()
        return cls.from_params(
            total_records,
            settings.per_page,
            params,
            page_key=settings.page_key,
        )

    def _clamp(self, requested_page: Any) -> int:
        page = coerce_page_number(requested_page)

        if page > self._total_pages:
            logger.debug(
                "Requested page above range, clamped to last page",
                extra={"requested_page": page, "total_pages": self._total_pages},
            )
            return self._total_pages

        if page < 1:
            logger.debug(
                "Requested page below range, clamped to first page",
                extra={"requested_page": page},
            )
            return 1

        return page

    @property
    def total_records(self) -> int:
        return self._total_records

    @property
    def per_page(self) -> int:
        return self._per_page

    @property
    def page_key(self) -> str:
        return self._page_key

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def has_previous(self) -> bool:
        return self._current_page > 1

    @property
    def has_next(self) -> bool:
        return self._current_page < self._total_pages

    def get_total_pages(self) -> int:
        """Return the number of pages, never less than 1."""
        return self._total_pages

    def get_current_page(self) -> int:
        """Return the requested page clamped to [1, total_pages]."""
        return self._current_page

    def get_start(self) -> int:
        """Return the zero-based row offset of the current page."""
        if self._current_page > 1:
            return (self._current_page - 1) * self._per_page
        return 0

    def get_limit(self, as_string: bool = False) -> tuple[int, int] | str:
        """
        Return the offset and row limit for the current page.

        Args:
            as_string: Return a SQL fragment ("LIMIT {offset}, {limit}")
                instead of a tuple

        Returns:
            (offset, per_page) tuple, or the formatted LIMIT clause
        """
        if as_string:
            return LIMIT_CLAUSE_FORMAT.format(offset=self.get_start(), limit=self._per_page)
        return self.get_start(), self._per_page

    @property
    def first_record(self) -> int:
        """1-based index of the first record on the current page (0 if none)."""
        if self._total_records == 0:
            return 0
        return self.get_start() + 1

    @property
    def last_record(self) -> int:
        """1-based index of the last record on the current page (0 if none)."""
        if self._current_page != self._total_pages:
            return self._current_page * self._per_page
        return self._total_records

    def paginate(self, items: Sequence[ItemT]) -> list[ItemT]:
        """Return the slice of an in-memory sequence shown on the current page."""
        start = self.get_start()
        return list(items[start : start + self._per_page])

    def page_info(self) -> PageInfo:
        """Return the paging state as a serialisable model."""
        return PageInfo(
            total_records=self._total_records,
            per_page=self._per_page,
            page_key=self._page_key,
            total_pages=self._total_pages,
            current_page=self._current_page,
            offset=self.get_start(),
            limit=self._per_page,
            first_record=self.first_record,
            last_record=self.last_record,
            has_previous=self.has_previous,
            has_next=self.has_next,
        )

    def render(
        self,
        renderer: NavigationRenderer | None = None,
        *,
        base_url: str = "",
        translate: TranslateFunc | None = None,
    ) -> Any:
        """Render the navigation bar with `renderer` (HTML by default)."""
        navigation = build_navigation(self, base_url=base_url, translate=translate)
        return (renderer or HtmlNavigationRenderer()).render(navigation)

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(total_records={self._total_records}, "
            f"per_page={self._per_page}, page_key={self._page_key!r}, "
            f"current_page={self._current_page}, total_pages={self._total_pages})"
        )

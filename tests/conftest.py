"""
Pytest configuration and fixtures for pager tests.
Provides calculator factories, query parameter sets and translators.
"""

from collections.abc import Callable
from typing import Any

import pytest

from pager.paging.page_calculator import PageCalculator
from pager.utils.translation import Translator

# 50 records at 15 per page: pages of 15, 15, 15 and 5 records
SAMPLE_TOTAL_RECORDS = 50
SAMPLE_PER_PAGE = 15


@pytest.fixture
def make_calculator() -> Callable[..., PageCalculator]:
    """
    Factory building a calculator over the sample data set.

    Usage:
        pager = make_calculator(requested_page=3)
    """

    def _make(
        requested_page: Any = None,
        *,
        total_records: Any = SAMPLE_TOTAL_RECORDS,
        per_page: Any = SAMPLE_PER_PAGE,
        page_key: str = "page",
    ) -> PageCalculator:
        return PageCalculator(
            total_records,
            per_page,
            page_key=page_key,
            requested_page=requested_page,
        )

    return _make


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Fifty records matching the sample total."""
    return [{"id": i, "title": f"Article {i}"} for i in range(SAMPLE_TOTAL_RECORDS)]


@pytest.fixture
def query_params() -> dict[str, Any]:
    """Query string parameters as delivered by API Gateway."""
    return {"page": "3", "sort": "desc"}


@pytest.fixture
def german_translator() -> Translator:
    """Translator with a German catalogue for the navigation labels."""
    return Translator(
        {
            "First": "Erste",
            "← Previous": "← Zurück",
            "Next →": "Weiter →",
            "Last": "Letzte",
            "Page {current} of {total}": "Seite {current} von {total}",
            "Viewing {first} - {last} of {total} entries": "Einträge {first} - {last} von {total}",
        }
    )

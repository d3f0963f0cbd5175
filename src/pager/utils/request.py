"""
Helpers for reading the requested page and building page links.
"""

import math
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, unquote_plus, urlsplit, urlunsplit

from aws_lambda_powertools import Logger

from pager.utils.constants import DEFAULT_PAGE, MAX_PAGE_DIGITS

logger = Logger(UTC=True)

_LEADING_INT = re.compile(r"^\s*([+-]?)(\d+)")


def coerce_page_number(value: Any) -> int:
    """Coerce a raw page value to an integer.

    Strings are read up to the first non-digit character, so "3abc" gives 3
    and "2.9" gives 2. Exponent forms are not read, so "1e3" gives 1.
    Digit runs longer than MAX_PAGE_DIGITS saturate to the largest value of
    that length, keeping their sign. Values without a leading integer give 0,
    which the calculator later clamps to the first page.

    Example:
        coerce_page_number("7") → 7
        coerce_page_number("abc") → 0
    """
    if value is None:
        return DEFAULT_PAGE

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")

    match = _LEADING_INT.match(str(value))
    if not match:
        logger.warning(
            "Requested page is not numeric",
            extra={"requested_page": str(value)[:64]},
        )
        return 0

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"

    if len(digits) > MAX_PAGE_DIGITS:
        logger.warning(
            "Requested page is out of integer range",
            extra={"requested_page": str(value)[:64], "digits": len(digits)},
        )
        digits = "9" * MAX_PAGE_DIGITS

    page = int(digits)
    return -page if sign == "-" else page


def read_requested_page(params: Mapping[str, Any] | None, page_key: str) -> Any:
    """Return the raw requested page from query parameters.

    Missing params or a missing key yields None. When the host supplies a
    multi-valued parameter as a list, the last value wins.
    """
    if not params:
        return None

    value = params.get(page_key)

    if isinstance(value, (list, tuple)):
        return value[-1] if value else None

    return value


def build_page_url(base_url: str, page_key: str, page: int) -> str:
    """Return `base_url` with `page_key` set to `page` in its query string.

    Other query parameters are kept byte for byte; every existing `page_key`
    pair is dropped and the new pair is appended.

    Example:
        build_page_url("/articles/?sort=asc", "page", 3)
        → "/articles/?sort=asc&page=3"
    """
    parts = urlsplit(base_url)
    pairs = [
        pair
        for pair in parts.query.split("&")
        if pair and unquote_plus(pair.split("=", 1)[0]) != page_key
    ]
    pairs.append(quote(page_key, safe="") + f"={page}")

    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, "&".join(pairs), parts.fragment)
    )

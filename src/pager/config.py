"""
Pager configuration loaded from the environment.
"""

import os

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field, ValidationError

from pager.models.errors import InvalidArgumentError
from pager.utils.constants import (
    DEFAULT_PAGE_KEY,
    DEFAULT_PER_PAGE,
    ENV_PAGER_PAGE_KEY,
    ENV_PAGER_PER_PAGE,
    MAX_PER_PAGE,
    MIN_PER_PAGE,
)

logger = Logger(UTC=True)


class PagerSettings(BaseModel):
    """Defaults applied when a caller does not pass its own page key or size."""

    page_key: str = Field(default=DEFAULT_PAGE_KEY, min_length=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=MIN_PER_PAGE, le=MAX_PER_PAGE)


def load_settings() -> PagerSettings:
    """Read pager settings from environment variables.

    Unset variables fall back to the PagerSettings defaults.

    Raises:
        InvalidArgumentError: If a variable is set to an unusable value
    """
    values: dict[str, str] = {}

    page_key = os.getenv(ENV_PAGER_PAGE_KEY)
    if page_key is not None:
        values["page_key"] = page_key.strip()

    per_page = os.getenv(ENV_PAGER_PER_PAGE)
    if per_page is not None:
        values["per_page"] = per_page.strip()

    try:
        return PagerSettings(**values)
    except ValidationError as exc:
        logger.error("Invalid pager settings", extra={"errors": exc.errors()})
        raise InvalidArgumentError(
            message="Invalid pager settings in environment",
            details={"settings": sorted(values)},
        ) from exc

"""Global constants used throughout the pager.

This module centralizes the defaults, limits, message templates and
environment variable names so they can be changed in one place.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_INVALID_ARGUMENT = "INVALID_ARGUMENT"

# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_PAGE_KEY = "page"
DEFAULT_PER_PAGE = 20
DEFAULT_PAGE = 1
# Longer digit runs in a requested page saturate instead of being converted
MAX_PAGE_DIGITS = 18
MIN_PER_PAGE = 1
MAX_PER_PAGE = 1000

# Format of the SQL fragment returned by PageCalculator.get_limit(as_string=True)
LIMIT_CLAUSE_FORMAT = "LIMIT {offset}, {limit}"

# ============================================================================
# Navigation
# ============================================================================

NAV_ROLE_FIRST = "first"
NAV_ROLE_PREVIOUS = "previous"
NAV_ROLE_CURRENT = "current"
NAV_ROLE_NEXT = "next"
NAV_ROLE_LAST = "last"

NAV_LIST_CLASS = "page"

# Message templates, looked up by the translator and formatted with str.format
MSG_FIRST: Final[str] = "First"
MSG_PREVIOUS: Final[str] = "← Previous"
MSG_NEXT: Final[str] = "Next →"
MSG_LAST: Final[str] = "Last"
MSG_PAGE_OF: Final[str] = "Page {current} of {total}"
MSG_VIEWING: Final[str] = "Viewing {first} - {last} of {total} entries"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_PAGER_PAGE_KEY = "PAGER_PAGE_KEY"
ENV_PAGER_PER_PAGE = "PAGER_PER_PAGE"

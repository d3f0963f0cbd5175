"""Pagination model."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class PageInfo(BaseModel):
    """Snapshot of the calculated paging state for one request."""

    model_config = ConfigDict(frozen=True)

    total_records: StrictInt = Field(..., ge=0, description="Number of items in the data set")
    per_page: StrictInt = Field(..., ge=1, description="Number of items shown per page")
    page_key: StrictStr = Field(..., description="Query parameter carrying the page number")
    total_pages: StrictInt = Field(..., ge=1, description="Number of pages, at least 1")
    current_page: StrictInt = Field(..., ge=1, description="Page being viewed, 1-based")
    offset: StrictInt = Field(..., ge=0, description="Zero-based row offset of the current page")
    limit: StrictInt = Field(..., ge=1, description="Maximum rows fetched for the current page")
    first_record: StrictInt = Field(..., ge=0, description="1-based index of the first record shown")
    last_record: StrictInt = Field(..., ge=0, description="1-based index of the last record shown")
    has_previous: StrictBool = Field(..., description="Whether a page exists before this one")
    has_next: StrictBool = Field(..., description="Whether a page exists after this one")

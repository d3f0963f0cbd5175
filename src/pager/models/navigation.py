"""
Pydantic models describing a page-navigation bar.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

NavigationRole = Literal["first", "previous", "current", "next", "last"]


class NavigationItem(BaseModel):
    """One entry of the navigation bar.

    Active items are rendered as links to `url`; inactive items are plain text.
    """

    model_config = ConfigDict(frozen=True)

    role: NavigationRole
    label: str
    page: int | None = Field(
        None,
        description="Target page number, None for the current-page item",
    )
    url: str | None = Field(None, description="Link target when the item is active")
    active: bool = False
    title: str | None = Field(None, description="Tooltip text")


class Navigation(BaseModel):
    """Five-item navigation description: First, Previous, Page X of Y, Next, Last.

    `items` is empty when there is only one page.
    """

    model_config = ConfigDict(frozen=True)

    items: list[NavigationItem] = Field(default_factory=list)
    current_page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=1)
    per_page: int = Field(..., ge=1)
    total_records: int = Field(..., ge=0)
    page_key: str

    @property
    def is_empty(self) -> bool:
        return not self.items

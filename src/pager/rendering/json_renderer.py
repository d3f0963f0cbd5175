"""JSON-ready rendering of the navigation bar."""

from typing import Any

from pager.models.navigation import Navigation
from pager.rendering.base import NavigationRenderer


class JsonNavigationRenderer(NavigationRenderer):
    """Render navigation as a plain dict for API response bodies."""

    def render(self, navigation: Navigation) -> dict[str, Any]:
        return navigation.model_dump()

"""Abstract contract for navigation rendering."""

from abc import ABC, abstractmethod
from typing import Any

from pager.models.navigation import Navigation


class NavigationRenderer(ABC):
    """Contract for turning a navigation description into host output.

    Implementations could produce HTML, XML, JSON, terminal text, etc.
    The page calculator depends on this interface, not the implementation.
    """

    @abstractmethod
    def render(self, navigation: Navigation) -> Any:
        """Render navigation.

        Args:
            navigation: Navigation description built for the current page

        Returns:
            Host-specific representation of the navigation bar
        """

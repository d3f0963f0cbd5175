"""HTML rendering of the navigation bar."""

from markupsafe import Markup

from pager.models.navigation import Navigation, NavigationItem
from pager.rendering.base import NavigationRenderer
from pager.utils.constants import NAV_LIST_CLASS


class HtmlNavigationRenderer(NavigationRenderer):
    """Render navigation as an HTML list.

    Output for a multi-page set looks like:

        <ul class="page"><li><a href="?page=1">First</a></li>...</ul>

    A single-page set renders as an empty `<ul></ul>`.
    """

    def __init__(self, list_class: str = NAV_LIST_CLASS) -> None:
        self.list_class = list_class

    def render(self, navigation: Navigation) -> Markup:
        if navigation.is_empty:
            return Markup("<ul></ul>")

        items = Markup("").join(self._render_item(item) for item in navigation.items)
        return Markup('<ul class="{}">{}</ul>').format(self.list_class, items)

    @staticmethod
    def _render_item(item: NavigationItem) -> Markup:
        if item.active and item.url is not None:
            content = Markup('<a href="{}">{}</a>').format(item.url, item.label)
        else:
            content = Markup("{}").format(item.label)

        if item.title:
            return Markup('<li title="{}">{}</li>').format(item.title, content)

        return Markup("<li>{}</li>").format(content)

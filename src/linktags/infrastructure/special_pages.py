"""Route-table special page resolver.

Implements the ``SpecialPageResolver`` port from a static mapping of
special page names to the slugs of the pages serving them.
"""

from __future__ import annotations

from collections.abc import Mapping

from linktags.domain.rules import SPECIAL_PAGE_PREFIX


class RouteTableSpecialPageResolver:
    """Resolve ``Special:{Name}`` links through a name -> page slug table.

    Names are matched case-insensitively.  Unknown names resolve to the
    literal ``Special:{Name}`` form.
    """

    def __init__(self, routes: Mapping[str, str]) -> None:
        self._routes = {name.lower(): route for name, route in routes.items()}

    def resolve_special_page(self, name: str) -> str:
        route = self._routes.get(name.lower())
        if route is None:
            return f"{SPECIAL_PAGE_PREFIX}{name}"
        return route

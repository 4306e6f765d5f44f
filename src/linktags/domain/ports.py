"""Port definitions for the resolver's collaborators.

The resolver depends only on these Protocols, never on concrete page
stores or routing tables.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from linktags.domain.entities import PageRef


@runtime_checkable
class PageLookup(Protocol):
    """Read-only page index keyed by slug.

    Returns ``None`` for a page that does not exist.  Failures to reach the
    index raise ``PageLookupError`` instead.
    """

    def find_by_slug(self, slug: str) -> PageRef | None: ...


@runtime_checkable
class SpecialPageResolver(Protocol):
    """Maps a special page name to the slug of the page that serves it.

    The resolver looks the returned slug up through ``PageLookup`` to build
    ``{wiki}/{id}/{slug}``.
    """

    def resolve_special_page(self, name: str) -> str: ...

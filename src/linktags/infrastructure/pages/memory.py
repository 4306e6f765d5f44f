"""In-memory page index.

Keeps pages in a dict keyed by slug.  Implements the ``PageLookup`` port
and is safe for concurrent readers once populated.
"""

from __future__ import annotations

from collections.abc import Iterable

from linktags.domain.entities import PageRef


class InMemoryPageIndex:
    """Slug-keyed page index held in memory."""

    def __init__(self, pages: Iterable[PageRef] = ()) -> None:
        self._by_slug: dict[str, PageRef] = {}
        for page in pages:
            self._by_slug[page.slug] = page

    def __len__(self) -> int:
        return len(self._by_slug)

    def add_page(self, id: int | str, title: str) -> PageRef:
        """Index a page; a page with the same slug is replaced."""
        page = PageRef(id=id, title=title)
        self._by_slug[page.slug] = page
        return page

    def remove_page(self, id: int | str) -> bool:
        """Remove the page with *id*.  Returns True if it was indexed."""
        for slug, page in list(self._by_slug.items()):
            if page.id == id:
                del self._by_slug[slug]
                return True
        return False

    def find_by_slug(self, slug: str) -> PageRef | None:
        return self._by_slug.get(slug.lower())

    def all_pages(self) -> list[PageRef]:
        return list(self._by_slug.values())

"""Dependency wiring for the link resolver.

Builds a ``LinkResolver`` from ``Settings``, choosing page index and
special page adapters from configuration unless they are passed in.
"""

from __future__ import annotations

from linktags.application.link_resolver import LinkResolver
from linktags.config.logging import get_logger
from linktags.config.settings import Settings, get_settings
from linktags.domain.ports import PageLookup, SpecialPageResolver
from linktags.infrastructure.pages import InMemoryPageIndex, JsonFilePageIndex
from linktags.infrastructure.special_pages import RouteTableSpecialPageResolver

logger = get_logger(__name__)


def create_resolver(
    settings: Settings | None = None,
    page_lookup: PageLookup | None = None,
    special_pages: SpecialPageResolver | None = None,
) -> LinkResolver:
    """Create a resolver, raising ``ConfigurationError`` for bad base paths."""
    settings = settings or get_settings()

    if page_lookup is None:
        if settings.page_index_path:
            page_lookup = JsonFilePageIndex(settings.page_index_path)
        else:
            page_lookup = InMemoryPageIndex()

    if special_pages is None and settings.special_page_routes:
        special_pages = RouteTableSpecialPageResolver(settings.special_page_routes)

    resolver = LinkResolver(page_lookup, settings, special_pages)
    logger.debug(
        "resolver_created",
        page_lookup=type(page_lookup).__name__,
        special_pages=type(special_pages).__name__ if special_pages else None,
        wiki_base_path=resolver.wiki_base_path,
        attachments_base_path=resolver.attachments_base_path,
    )
    return resolver

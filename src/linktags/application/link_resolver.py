"""Link resolver — classifies a link tag and rewrites its destination.

Runs after markup parsing and before HTML is emitted.  ``parse`` is a
total function: every href matches exactly one rule, and the last rule
(internal page) accepts anything.

Rule order::

    anchor -> unsafe scheme -> external -> attachment -> special -> internal
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from linktags.config.logging import get_logger
from linktags.config.settings import Settings
from linktags.domain import rules as href_rules
from linktags.domain.entities import LinkTag, PageRef
from linktags.domain.enums import CssClass, LinkKind
from linktags.domain.ports import PageLookup, SpecialPageResolver
from linktags.exceptions import ConfigurationError, PageLookupError

logger = get_logger(__name__)


@dataclass(frozen=True)
class LinkRule:
    """One classification step: a predicate on the original href and the
    rewrite applied when it matches."""

    kind: LinkKind
    matches: Callable[[str], bool]
    apply: Callable[[LinkTag], LinkTag]


class LinkResolver:
    """Resolves ``LinkTag`` values against a page index and routing settings.

    Usage::

        resolver = LinkResolver(page_index, settings)
        tag = resolver.parse(LinkTag.from_href("my-page#intro", text="My page"))
        tag.href       # "/wiki/7/my-page#intro"
        tag.css_class  # CssClass.NONE
    """

    def __init__(
        self,
        page_lookup: PageLookup,
        settings: Settings,
        special_page_resolver: SpecialPageResolver | None = None,
    ) -> None:
        self._pages = page_lookup
        self._special_pages = special_page_resolver
        self._wiki_base = _required_path(settings.wiki_base_path, "wiki_base_path")
        self._attachments_base = _required_path(
            settings.attachments_base_path, "attachments_base_path"
        )
        self._rules: tuple[LinkRule, ...] = (
            LinkRule(LinkKind.ANCHOR, href_rules.is_anchor, self._resolve_anchor),
            LinkRule(LinkKind.UNSAFE, href_rules.is_unsafe_scheme, self._resolve_unsafe),
            LinkRule(LinkKind.EXTERNAL, href_rules.is_external, self._resolve_external),
            LinkRule(LinkKind.ATTACHMENT, href_rules.is_attachment, self._resolve_attachment),
            LinkRule(LinkKind.SPECIAL, href_rules.is_special_page, self._resolve_special_page),
            LinkRule(LinkKind.INTERNAL, lambda href: True, self._resolve_internal),
        )

    @property
    def rules(self) -> tuple[LinkRule, ...]:
        return self._rules

    @property
    def wiki_base_path(self) -> str:
        return self._wiki_base

    @property
    def attachments_base_path(self) -> str:
        return self._attachments_base

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify(self, tag: LinkTag) -> LinkKind:
        """Return the kind of the first rule matching ``tag.original_href``."""
        return self._match(tag.original_href).kind

    def parse(self, tag: LinkTag) -> LinkTag:
        """Return a resolved copy of *tag*.

        Raises ``PageLookupError`` only when the page index itself fails;
        malformed hrefs resolve to a missing-page link instead.
        """
        rule = self._match(tag.original_href)
        resolved = rule.apply(tag)
        logger.debug(
            "link_resolved",
            kind=rule.kind.value,
            original_href=tag.original_href,
            href=resolved.href,
            css_class=resolved.css_class.value,
        )
        return resolved

    def parse_all(self, tags: Iterable[LinkTag]) -> list[LinkTag]:
        """Resolve every tag of a rendered page, preserving order."""
        return [self.parse(tag) for tag in tags]

    def _match(self, href: str) -> LinkRule:
        for rule in self._rules:
            if rule.matches(href):
                return rule
        # Unreachable: the internal rule accepts every href.
        raise AssertionError(f"no link rule matched {href!r}")

    # ------------------------------------------------------------------
    # Rewrites
    # ------------------------------------------------------------------

    def _resolve_anchor(self, tag: LinkTag) -> LinkTag:
        return tag.with_href(tag.original_href)

    def _resolve_unsafe(self, tag: LinkTag) -> LinkTag:
        logger.warning("unsafe_link_neutralised", original_href=tag.original_href)
        return tag.with_href("#")

    def _resolve_external(self, tag: LinkTag) -> LinkTag:
        return tag.with_href(tag.original_href).with_css_class(CssClass.EXTERNAL)

    def _resolve_attachment(self, tag: LinkTag) -> LinkTag:
        path = href_rules.strip_attachment_prefix(tag.original_href)
        return tag.with_href(f"{self._attachments_base}/{path}")

    def _resolve_special_page(self, tag: LinkTag) -> LinkTag:
        """Route ``Special:{Name}`` through the special page resolver.

        The resolver returns the slug (or slug-form suffix) of the page that
        serves the special page; its id is looked up like any internal link
        to build ``{wiki}/{id}/{suffix}``.  Without a resolver, or when no
        page serves the suffix, the literal ``{wiki}/Special:{Name}`` is used.
        """
        name = href_rules.special_page_name(tag.original_href)
        literal = f"{self._wiki_base}/{href_rules.SPECIAL_PAGE_PREFIX}{name}"
        if self._special_pages is None:
            return tag.with_href(literal)

        suffix = self._special_pages.resolve_special_page(name).lstrip("/")
        parts = href_rules.split_href(suffix)
        page = self._find_page(parts.path) if parts.path else None
        if page is None:
            logger.debug("special_page_unrouted", name=name, suffix=suffix)
            return tag.with_href(literal)

        return tag.with_href(f"{self._wiki_base}/{page.id}/{suffix}")

    def _resolve_internal(self, tag: LinkTag) -> LinkTag:
        parts = href_rules.split_href(tag.original_href)
        if not parts.path:
            return _missing_page(tag)

        page = self._find_page(parts.path)
        if page is None:
            return _missing_page(tag)

        return tag.with_href(
            f"{self._wiki_base}/{page.id}/{parts.path}{parts.query}{parts.fragment}"
        )

    def _find_page(self, path: str) -> PageRef | None:
        """Look *path* up by its lowercased slug form.

        Index failures surface as ``PageLookupError``, never as ``None``.
        """
        slug = path.lower()
        try:
            return self._pages.find_by_slug(slug)
        except PageLookupError as e:
            logger.error("page_lookup_failed", slug=slug, error=str(e))
            raise
        except OSError as e:
            logger.error("page_lookup_failed", slug=slug, error=str(e))
            raise PageLookupError(
                f"Page lookup failed for slug '{slug}'", {"slug": slug}
            ) from e


def _required_path(value: str | None, name: str) -> str:
    """Normalise a configured base path, rejecting empty values."""
    path = (value or "").strip().rstrip("/")
    if not path:
        raise ConfigurationError(
            f"'{name}' must be a non-empty path", {"setting": name, "value": value}
        )
    return path


def _missing_page(tag: LinkTag) -> LinkTag:
    return tag.with_href(tag.original_href).with_css_class(CssClass.MISSING_PAGE)

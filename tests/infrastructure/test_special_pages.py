"""Tests for linktags.infrastructure.special_pages."""

from linktags.application.link_resolver import LinkResolver
from linktags.domain.entities import LinkTag
from linktags.domain.ports import SpecialPageResolver
from linktags.infrastructure.special_pages import RouteTableSpecialPageResolver


class TestRouteTableSpecialPageResolver:
    def test_implements_port(self):
        assert isinstance(RouteTableSpecialPageResolver({}), SpecialPageResolver)

    def test_known_name(self):
        routes = RouteTableSpecialPageResolver({"AllPages": "all-pages"})
        assert routes.resolve_special_page("AllPages") == "all-pages"

    def test_names_are_case_insensitive(self):
        routes = RouteTableSpecialPageResolver({"AllPages": "all-pages"})
        assert routes.resolve_special_page("allpages") == "all-pages"

    def test_unknown_name_falls_back_to_literal(self):
        routes = RouteTableSpecialPageResolver({"AllPages": "all-pages"})
        assert routes.resolve_special_page("Random") == "Special:Random"

    def test_with_resolver(self, page_index, settings):
        page_index.add_page(3, "random page")
        routes = RouteTableSpecialPageResolver({"Random": "/random-page"})
        resolver = LinkResolver(page_index, settings, routes)

        assert resolver.parse(LinkTag.from_href("Special:Random")).href == "/wiki/3/random-page"
        assert resolver.parse(LinkTag.from_href("Special:Foo")).href == "/wiki/Special:Foo"

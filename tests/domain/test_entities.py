"""Tests for linktags.domain.entities."""

import pydantic
import pytest

from linktags.domain.entities import LinkTag, PageRef
from linktags.domain.enums import CssClass


class TestLinkTag:
    def test_from_href_copies_href_to_original(self):
        tag = LinkTag.from_href("my-page", text="My page", target="_blank")
        assert tag.original_href == "my-page"
        assert tag.href == "my-page"
        assert tag.text == "My page"
        assert tag.target == "_blank"
        assert tag.css_class == CssClass.NONE

    def test_frozen(self):
        tag = LinkTag.from_href("my-page")
        with pytest.raises(pydantic.ValidationError):
            tag.href = "other"

    def test_with_href_returns_new_tag(self):
        tag = LinkTag.from_href("my-page")
        rewritten = tag.with_href("/wiki/1/my-page")
        assert rewritten.href == "/wiki/1/my-page"
        assert rewritten.original_href == "my-page"
        assert tag.href == "my-page"

    def test_with_css_class(self):
        tag = LinkTag.from_href("x").with_css_class(CssClass.MISSING_PAGE)
        assert tag.css_class == "missing-page-link"

    def test_css_class_serialises_as_string(self):
        tag = LinkTag.from_href("http://x").with_css_class(CssClass.EXTERNAL)
        assert tag.model_dump(mode="json")["css_class"] == "external-link"


class TestPageRef:
    def test_slug_from_title(self):
        assert PageRef(id=1, title="my page on engineering").slug == "my-page-on-engineering"

    def test_string_ids_allowed(self):
        assert PageRef(id="a1b2", title="Home").id == "a1b2"

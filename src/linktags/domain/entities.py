"""Domain entities for link-tag resolution.

All entities are frozen Pydantic BaseModels: a resolver never mutates the
tag it was given, it returns a new one.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from linktags.domain.enums import CssClass
from linktags.domain.rules import slugify_title


class LinkTag(BaseModel):
    """An anchor extracted from rendered markup.

    ``original_href`` is the href exactly as written and is never
    rewritten; ``href`` is the routable destination.
    """

    model_config = ConfigDict(frozen=True)

    original_href: str
    href: str
    text: str = ""
    target: str = ""
    css_class: CssClass = CssClass.NONE

    @classmethod
    def from_href(cls, href: str, text: str = "", target: str = "") -> LinkTag:
        """Build an unresolved tag whose ``href`` equals its original."""
        return cls(original_href=href, href=href, text=text, target=target)

    def with_href(self, href: str) -> LinkTag:
        return self.model_copy(update={"href": href})

    def with_css_class(self, css_class: CssClass) -> LinkTag:
        return self.model_copy(update={"css_class": css_class})


class PageRef(BaseModel):
    """A read-only reference to a stored wiki page."""

    model_config = ConfigDict(frozen=True)

    id: int | str
    title: str

    @property
    def slug(self) -> str:
        return slugify_title(self.title)

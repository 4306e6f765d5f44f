"""Domain enumerations for link-tag resolution."""

from __future__ import annotations

from enum import Enum


class LinkKind(str, Enum):
    """The kinds of link a resolver can classify an href as.

    Declared in resolution order: the first kind whose rule matches wins,
    and ``INTERNAL`` is the catch-all.
    """

    ANCHOR = "anchor"
    UNSAFE = "unsafe"
    EXTERNAL = "external"
    ATTACHMENT = "attachment"
    SPECIAL = "special"
    INTERNAL = "internal"


class CssClass(str, Enum):
    """Presentation markers assigned to resolved links."""

    NONE = ""
    EXTERNAL = "external-link"
    MISSING_PAGE = "missing-page-link"

"""linktags — link-tag resolution for rendered wiki markup."""

from linktags.application.link_resolver import LinkResolver, LinkRule
from linktags.domain.entities import LinkTag, PageRef
from linktags.domain.enums import CssClass, LinkKind
from linktags.exceptions import ConfigurationError, LinkTagError, PageLookupError

__version__ = "0.1.0"

__all__ = [
    "LinkResolver",
    "LinkRule",
    "LinkTag",
    "PageRef",
    "CssClass",
    "LinkKind",
    "LinkTagError",
    "ConfigurationError",
    "PageLookupError",
]

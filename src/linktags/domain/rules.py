"""Link classification rules as pure functions.

Every predicate here is a plain prefix test on the href: no decoding, no
URL parsing, no I/O.  The resolver composes them in a fixed order, so each
predicate may assume the earlier ones have already declined the href.
"""

from __future__ import annotations

from typing import NamedTuple

# ---------------------------------------------------------------------------
# Prefixes
# ---------------------------------------------------------------------------

ANCHOR_PREFIX = "#"

# Compared case-insensitively, and only at position 0.
UNSAFE_SCHEMES: tuple[str, ...] = ("javascript:", "vbscript:", "data:")

# Extend here rather than inferring a general URI grammar.
EXTERNAL_PREFIXES: tuple[str, ...] = (
    "http://",
    "https://",
    "www.",
    "mailto:",
    "tag:",
    "ftp://",
    "news:",
    "irc://",
)
ABSOLUTE_URL_MARKER = "://"

ATTACHMENT_PREFIXES: tuple[str, ...] = ("~/", "attachment:")

SPECIAL_PAGE_PREFIX = "Special:"


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_anchor(href: str) -> bool:
    return href.startswith(ANCHOR_PREFIX)


def is_unsafe_scheme(href: str) -> bool:
    """True for script-bearing schemes such as ``javascript:``.

    ``descriptionattribute.aspx`` and similar never match: the check is
    anchored to the scheme position.
    """
    return href.lstrip().lower().startswith(UNSAFE_SCHEMES)


def is_external(href: str) -> bool:
    return href.startswith(EXTERNAL_PREFIXES) or ABSOLUTE_URL_MARKER in href


def is_attachment(href: str) -> bool:
    return href.startswith(ATTACHMENT_PREFIXES)


def is_special_page(href: str) -> bool:
    return href.startswith(SPECIAL_PAGE_PREFIX)


# ---------------------------------------------------------------------------
# Rewrites
# ---------------------------------------------------------------------------


class HrefParts(NamedTuple):
    """An href split into path, query and fragment.

    ``query`` keeps its leading ``?`` and ``fragment`` its leading ``#``,
    so ``path + query + fragment`` reproduces the href byte for byte.
    """

    path: str
    query: str
    fragment: str


def split_href(href: str) -> HrefParts:
    """Split *href* at the first ``#`` and then at the first ``?`` before it."""
    before_fragment, hash_sign, fragment = href.partition("#")
    path, question_mark, query = before_fragment.partition("?")
    return HrefParts(path, question_mark + query, hash_sign + fragment)


def strip_attachment_prefix(href: str) -> str:
    """Return the attachment-relative path, without prefix or leading slash.

    ``~/a/b.jpg`` and ``attachment:/a/b.jpg`` both give ``a/b.jpg``.
    """
    for prefix in ATTACHMENT_PREFIXES:
        if href.startswith(prefix):
            return href[len(prefix):].lstrip("/")
    return href


def special_page_name(href: str) -> str:
    """Return the text following ``Special:``."""
    if href.startswith(SPECIAL_PAGE_PREFIX):
        return href[len(SPECIAL_PAGE_PREFIX):]
    return href


def slugify_title(title: str) -> str:
    """Lowercase *title* and replace spaces with dashes."""
    return title.lower().replace(" ", "-")

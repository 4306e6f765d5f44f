"""Page index adapters implementing the ``PageLookup`` port."""

from linktags.infrastructure.pages.json_file import JsonFilePageIndex
from linktags.infrastructure.pages.memory import InMemoryPageIndex

__all__ = ["InMemoryPageIndex", "JsonFilePageIndex"]

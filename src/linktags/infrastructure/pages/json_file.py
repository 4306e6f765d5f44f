"""JSON-file page index.

Reads a page listing exported by the page store::

    [
      {"id": 1, "title": "my page on engineering"},
      {"id": 2, "title": "foo page"}
    ]

Implements the ``PageLookup`` port.  The file is read lazily on the first
lookup and cached until ``reload()``.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from linktags.domain.entities import PageRef
from linktags.exceptions import PageLookupError
from linktags.infrastructure.pages.memory import InMemoryPageIndex


class JsonFilePageIndex:
    """Page index loaded from a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._index: InMemoryPageIndex | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    def reload(self) -> int:
        """Re-read the file.  Returns the number of pages indexed."""
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise PageLookupError(
                f"Cannot read page index '{self._path}'", {"path": str(self._path)}
            ) from e
        except UnicodeDecodeError as e:
            raise PageLookupError(
                f"Page index '{self._path}' is not valid UTF-8", {"path": str(self._path)}
            ) from e
        except json.JSONDecodeError as e:
            raise PageLookupError(
                f"Page index '{self._path}' is not valid JSON", {"path": str(self._path)}
            ) from e

        if not isinstance(raw, list):
            raise PageLookupError(
                f"Page index '{self._path}' must contain a JSON array",
                {"path": str(self._path)},
            )

        try:
            pages = [PageRef.model_validate(item) for item in raw]
        except ValidationError as e:
            raise PageLookupError(
                f"Page index '{self._path}' has an invalid entry",
                {"path": str(self._path), "errors": e.errors()},
            ) from e

        self._index = InMemoryPageIndex(pages)
        return len(self._index)

    def find_by_slug(self, slug: str) -> PageRef | None:
        if self._index is None:
            self.reload()
        return self._index.find_by_slug(slug)

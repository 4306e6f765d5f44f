"""Shared fixtures: default routing settings and a small page index."""

import pytest

from linktags.application.link_resolver import LinkResolver
from linktags.config.settings import Settings
from linktags.infrastructure.pages.memory import InMemoryPageIndex


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        wiki_base_path="/wiki",
        attachments_base_path="/Attachments",
    )


@pytest.fixture
def page_index():
    return InMemoryPageIndex()


@pytest.fixture
def resolver(page_index, settings):
    return LinkResolver(page_index, settings)

"""Shared fixtures for core unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.crud.models import Author, Document


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="now")
def now_fixture():
    return NOW


@pytest.fixture(name="alpha")
def alpha_fixture():
    """Created at NOW by author 1."""
    return Document(
        id="a",
        title="Alpha Document",
        content="The quick brown fox",
        author=Author(id="1", name="Ada"),
        created=NOW,
    )


@pytest.fixture(name="beta")
def beta_fixture():
    """Created an hour before NOW by author 2."""
    return Document(
        id="b",
        title="Beta Document",
        content="jumps over the lazy dog",
        author=Author(id="2", name="Bob"),
        created=NOW - timedelta(hours=1),
    )


@pytest.fixture(name="bare")
def bare_fixture():
    """No title, content, author or created."""
    return Document(id="c")

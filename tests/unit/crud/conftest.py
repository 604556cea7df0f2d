"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import Author, Document


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty in-memory store."""
    return MemoryRepo()


@pytest.fixture(name="doc")
def doc_fixture():
    """A minimal unsaved Document."""
    return Document(
        title="Alpha Document",
        content="Hello world",
        author=Author(id="1", name="Ada"),
        created=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )

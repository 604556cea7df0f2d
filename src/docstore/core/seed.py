"""Load documents from a YAML or JSON seed file into a store"""

import json
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from docstore.crud.models import Document
from docstore.crud.repo import DocumentRepo


SEED_SUFFIXES = {".yaml", ".yml", ".json"}


def _read(path: Path):
    """Parse path as JSON or YAML based on its suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid {path.name}: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e


def load_seed(path: str | Path) -> list[Document]:
    """Read and validate documents from a seed file.

    The top level is either a list of documents or a mapping with a
    'documents' list. An empty file yields no documents.
    """
    path = Path(path)
    if path.suffix.lower() not in SEED_SUFFIXES:
        raise ValueError(f"Unsupported seed file type: {path.name}")
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    raw = _read(path)
    if raw is None:
        raw = []
    if isinstance(raw, dict):
        if "documents" not in raw:
            raise ValueError(f"Invalid {path.name}: missing 'documents'")
        raw = raw["documents"] or []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e


def seed_repo(repo: DocumentRepo, documents: list[Document]) -> list[Document]:
    """Save each document into repo; returns the saved documents with their ids."""
    saved = [repo.save(doc) for doc in documents]
    logger.info("Seeded {} document(s)", len(saved))
    return saved

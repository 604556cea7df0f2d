"""CLI command implementations"""

import json
from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.seed import load_seed, seed_repo
from docstore.crud.memory_repo import MemoryRepo, make_repo
from docstore.crud.models import SearchRequest
from docstore.util.logging import setup_logging


SeedArg = Annotated[Optional[str], typer.Argument(help="Seed file (YAML or JSON); defaults to settings.seed_file")]
DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")]


def _fail(msg: str) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level, settings.log_file)
    return settings


def _load(settings: Settings) -> MemoryRepo:
    """Build the configured store and fill it from the seed file."""
    repo = make_repo(settings)
    try:
        documents = load_seed(settings.seed_file)
    except (ValueError, FileNotFoundError) as e:
        _fail(str(e))
    seed_repo(repo, documents)
    return repo


def check_cmd(seed: SeedArg = None, log_level: LogLevelOpt = None):
    """Validate a seed file and report how many documents it holds."""
    settings = _settings(overrides={"seed_file": seed, "log_level": log_level})
    repo = _load(settings)
    typer.echo(f"Loaded {len(repo)} document(s) from {settings.seed_file}")


def search_cmd(
    seed: SeedArg = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Match titles starting with any of these")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Match content containing any of these")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Match any of these author ids")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", formats=DATETIME_FORMATS, help="Created strictly after (UTC if no offset)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", formats=DATETIME_FORMATS, help="Created strictly before (UTC if no offset)")] = None,
    log_level: LogLevelOpt = None,
    ):
    """Print seed documents matching every given filter as a JSON array."""
    settings = _settings(overrides={"seed_file": seed, "log_level": log_level})
    repo = _load(settings)
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=contains or None,
        author_ids=author_id or None,
        created_from=created_from,
        created_to=created_to,
    )
    results = repo.search(request)
    typer.echo(json.dumps(
        [doc.model_dump(mode="json") for doc in results],
        indent=settings.output_indent, ensure_ascii=False,
    ))

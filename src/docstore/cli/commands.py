"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.models import Document, SearchRequest
from docstore.core.seed import dump_documents, load_documents, parse_timestamp
from docstore.crud.memory_repo import MemoryRepo
from docstore.logging_config import setup_logging


logger = logging.getLogger(__name__)

SeedArg = Annotated[Optional[str], typer.Argument(help="YAML/JSON seed file (defaults to seed_file in config)")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="Output format: json or yaml")]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="Logging level, e.g. DEBUG")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level, settings.log_file)
    return settings


def _seeded_repo(settings: Settings) -> MemoryRepo:
    """Build a fresh repo and save every document from the configured seed file into it."""
    if not settings.seed_file:
        _fail("No seed file given. Pass SEED or set seed_file in config.yaml.")
    try:
        docs = load_documents(settings.seed_file)
    except ValueError as e:
        _fail(str(e))
    repo = MemoryRepo()
    for doc in docs:
        repo.save(doc)
    logger.info("seeded %d document(s), %d stored", len(docs), len(repo))
    return repo


def _echo_docs(docs: list[Document], settings: Settings) -> None:
    typer.echo(dump_documents(docs, settings.output_format))


def _timestamp(value: Optional[str], flag: str):
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError as e:
        _fail(f"{flag}: {e}")


def save_cmd(
    seed: SeedArg = None,
    fmt: FormatOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Save every document in SEED and print the stored documents with ids and created times."""
    settings = _settings(overrides={"seed_file": seed, "output_format": fmt, "log_level": log_level})
    repo = _seeded_repo(settings)
    _echo_docs(repo.all(), settings)


def search_cmd(
    seed: SeedArg = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id equals (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Inclusive ISO-8601 lower bound")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Inclusive ISO-8601 upper bound")] = None,
    fmt: FormatOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Print documents from SEED matching all given criteria (any value within a criterion)."""
    settings = _settings(overrides={"seed_file": seed, "output_format": fmt, "log_level": log_level})
    request = SearchRequest(
        title_prefixes=title_prefixes or None,
        contains_contents=contains or None,
        author_ids=author_ids or None,
        created_from=_timestamp(created_from, "--created-from"),
        created_to=_timestamp(created_to, "--created-to"),
    )
    repo = _seeded_repo(settings)
    results = repo.search(request)
    logger.info("search matched %d of %d document(s)", len(results), len(repo))
    _echo_docs(results, settings)


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    seed: SeedArg = None,
    fmt: FormatOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Print the document with DOC_ID from SEED."""
    settings = _settings(overrides={"seed_file": seed, "output_format": fmt, "log_level": log_level})
    repo = _seeded_repo(settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id {doc_id}.", err=True)
        raise typer.Exit(1)
    _echo_docs([doc], settings)

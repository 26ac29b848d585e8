"""Seed files: read documents from YAML/JSON and write documents back out"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import TypeAdapter, ValidationError

from docstore.core.models import Document
from docstore.core.utils.clock import ensure_utc


logger = logging.getLogger(__name__)

SEED_SUFFIXES = {".yaml", ".yml", ".json"}

_documents = TypeAdapter(list[Document])


def _read_raw(path: Path) -> Any:
    """Parse the file as JSON or YAML according to its suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_documents(path: str | Path) -> list[Document]:
    """Load a list of Documents from a seed file.

    The top level is either a list of documents or a mapping with a
    'documents' key. An empty file yields no documents.
    """
    path = Path(path)
    if path.suffix.lower() not in SEED_SUFFIXES:
        raise ValueError(f"Invalid seed file {path}: expected one of {sorted(SEED_SUFFIXES)}")
    try:
        raw = _read_raw(path)
    except OSError as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e

    if raw is None:
        raw = []
    if isinstance(raw, dict):
        if "documents" not in raw:
            raise ValueError(f"Invalid seed file {path}: mapping has no 'documents' key")
        raw = raw["documents"]
        if raw is None:
            raw = []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid seed file {path}: expected a list of documents")

    try:
        docs = _documents.validate_python(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e
    logger.info("loaded %d document(s) from %s", len(docs), path)
    return docs


def dump_documents(documents: Iterable[Document], fmt: str = "json") -> str:
    """Serialize documents as JSON or YAML; None fields are omitted, empty values kept."""
    data = [d.model_dump(mode="json", exclude_none=True) for d in documents]
    if fmt == "yaml":
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    raise ValueError(f"Unknown output format: {fmt}")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"Invalid timestamp {value!r}: expected ISO-8601") from e
    return ensure_utc(parsed)

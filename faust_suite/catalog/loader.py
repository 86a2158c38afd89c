"""Loader for the snippet tables that drive the data-driven scenario groups."""

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import Field, ValidationError

from faust_suite.models.base import Model

log = logging.getLogger(__name__)

DEFAULT_SNIPPETS_PATH = Path(__file__).with_name("snippets.yaml")


class SnippetTableError(ValueError):
    """Raised when a snippet file is malformed or does not match the schema."""


class SnippetTables(Model):
    """Name to source-snippet mappings, in declaration order."""

    patterns: Mapping[str, str] = Field(
        default_factory=dict, description="Snippets expected to pass every engine"
    )
    errors: Mapping[str, str] = Field(
        default_factory=dict, description="Snippets every engine must flag"
    )


async def load_snippet_tables(path: Path | None = None) -> SnippetTables:
    """Load and validate a snippet file.

    Args:
        path: YAML file to read; the bundled tables are used when omitted

    Returns:
        Parsed snippet tables

    Raises:
        FileNotFoundError: If the file does not exist
        SnippetTableError: If the YAML is malformed or fails validation

    """
    snippets_path = path or DEFAULT_SNIPPETS_PATH
    if not snippets_path.is_file():
        raise FileNotFoundError(f"Snippet file not found: {snippets_path}")

    content = await asyncio.to_thread(snippets_path.read_text, encoding="utf-8")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SnippetTableError(f"Invalid YAML in {snippets_path}: {e}") from e

    try:
        tables = SnippetTables.model_validate(data or {})
    except ValidationError as e:
        raise SnippetTableError(
            f"Invalid snippet tables in {snippets_path}: {e}"
        ) from e

    log.debug(
        "Loaded %d pattern(s) and %d error snippet(s) from %s",
        len(tables.patterns),
        len(tables.errors),
        snippets_path,
    )
    return tables

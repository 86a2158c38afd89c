"""Configuration for a suite run."""

from pathlib import Path
from typing import Literal

from pydantic import Field

from faust_suite.models.base import Model

Isolation = Literal["shared", "fresh"]


class SuiteConfig(Model):
    """Configuration for a suite run."""

    timeout: float | None = Field(
        default=60.0,
        gt=0,
        description="Per-scenario deadline in seconds (None disables)",
    )
    isolation: Isolation = Field(
        default="shared",
        description="Share one engine set across scenarios, or build one per scenario",
    )
    snippets_path: Path | None = Field(
        default=None, description="Snippet tables file (bundled tables when omitted)"
    )

"""Models for scenario execution results."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

Outcome = Literal["pass", "fail", "error", "timeout"]
Status = Literal["PASS", "FAIL"]


@dataclass(frozen=True, kw_only=True)
class ScenarioResult:
    """Result of a single scenario execution.

    ``outcome`` separates an assertion failure ("fail", no message) from a
    raised exception ("error") and an exceeded deadline ("timeout"). Both of
    the latter carry ``error``.
    """

    id: str
    name: str
    group: str
    outcome: Outcome
    duration_ms: int
    error: str | None = None

    @property
    def status(self) -> Status:
        """PASS or FAIL, collapsing every non-pass outcome to FAIL."""
        return "PASS" if self.outcome == "pass" else "FAIL"

    @property
    def passed(self) -> bool:
        """Whether the scenario passed."""
        return self.outcome == "pass"


@dataclass(kw_only=True)
class SuiteSummary:
    """Running counters for a suite run."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(kw_only=True)
class SuiteResults:
    """Complete results of one suite run."""

    timestamp: str = field(default_factory=_utc_timestamp)
    tests: list[ScenarioResult] = field(default_factory=list)
    summary: SuiteSummary = field(default_factory=SuiteSummary)

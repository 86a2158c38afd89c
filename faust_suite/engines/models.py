"""Validated views of the results returned by the analysis engines.

Engines may return plain mappings or attribute objects. Only the fields the
catalog reads are declared, and each of them is required: a missing field
raises ``ValidationError``. Everything else is ignored.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EngineView(BaseModel):
    """Base for engine result views."""

    model_config = ConfigDict(frozen=True, extra="ignore", from_attributes=True)


class TestRunSummary(EngineView):
    """Summary section of a test-runner result."""

    __test__ = False

    overall_status: str


class TestRunReport(EngineView):
    """Result of ``TestRunner.run_full_test_suite``."""

    __test__ = False

    summary: TestRunSummary

    @property
    def overall_status(self) -> str:
        """Shortcut to the overall status string."""
        return self.summary.overall_status


class Diagnosis(EngineView):
    """Diagnosis stage of a debug session."""

    errors_found: int = Field(..., ge=0)


class DebugStages(EngineView):
    """Stages of a debug session."""

    diagnosis: Diagnosis
    suggestions: Sequence[Any]


class DebugSessionReport(EngineView):
    """Result of ``DebugSession.run_full_session``."""

    stages: DebugStages

    @property
    def errors_found(self) -> int:
        """Number of errors found during diagnosis."""
        return self.stages.diagnosis.errors_found


class SyntaxSummary(EngineView):
    """Summary section of a syntax analysis."""

    syntax_valid: bool


class LintSummary(EngineView):
    """Counts of lint findings."""

    total: int
    errors: int


class Linting(EngineView):
    """Linting section of a syntax analysis."""

    summary: LintSummary


class Complexity(EngineView):
    """Complexity metrics of the analyzed structure."""

    max_nesting: int


class Structure(EngineView):
    """Structure section of a syntax analysis."""

    patterns: Sequence[Any]
    complexity: Complexity


class SyntaxMetrics(EngineView):
    """Metrics gathered while parsing."""

    definitions: int


class SyntaxTree(EngineView):
    """Parsed top-level elements."""

    imports: Sequence[Any]


class Syntax(EngineView):
    """Syntax section of a syntax analysis."""

    errors: Sequence[Any]
    metrics: SyntaxMetrics
    ast: SyntaxTree


class SyntaxReport(EngineView):
    """Result of ``SyntaxAnalyzer.analyze_complete``."""

    summary: SyntaxSummary
    overall_quality: float
    linting: Linting
    structure: Structure
    syntax: Syntax

    @property
    def syntax_valid(self) -> bool:
        """Whether the snippet parsed without syntax errors."""
        return self.summary.syntax_valid

    @property
    def has_errors(self) -> bool:
        """Whether any syntax or lint error was reported."""
        return bool(self.syntax.errors) or self.linting.summary.errors > 0

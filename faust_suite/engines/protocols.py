"""Contracts for the external analysis engines."""

from collections.abc import Awaitable
from typing import Any, Protocol


class TestRunner(Protocol):
    """Runs the full test suite against a source snippet."""

    def run_full_test_suite(self, source: str) -> Awaitable[Any]:
        """Return a result exposing ``summary.overall_status``."""
        ...


class DebugSession(Protocol):
    """Runs a diagnostic session against a source snippet."""

    def run_full_session(self, source: str) -> Awaitable[Any]:
        """Return a result exposing ``stages.diagnosis`` and ``stages.suggestions``."""
        ...


class SyntaxAnalyzer(Protocol):
    """Statically analyzes a source snippet."""

    def analyze_complete(self, source: str) -> Any:
        """Return a syntax, linting and structure analysis."""
        ...

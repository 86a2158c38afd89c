"""The set of engines handed to each scenario."""

from dataclasses import dataclass

from faust_suite.engines.models import DebugSessionReport, SyntaxReport, TestRunReport
from faust_suite.engines.protocols import DebugSession, SyntaxAnalyzer, TestRunner


@dataclass(frozen=True, kw_only=True)
class EngineSet:
    """One instance of each analysis engine.

    The helper methods call the underlying engine and validate its raw result
    into a typed view. A result of the wrong shape raises
    ``pydantic.ValidationError``.
    """

    test_runner: TestRunner
    debugger: DebugSession
    analyzer: SyntaxAnalyzer

    async def test(self, source: str) -> TestRunReport:
        """Run the full test suite on ``source``."""
        raw = await self.test_runner.run_full_test_suite(source)
        return TestRunReport.model_validate(raw)

    async def debug(self, source: str) -> DebugSessionReport:
        """Run a full debugging session on ``source``."""
        raw = await self.debugger.run_full_session(source)
        return DebugSessionReport.model_validate(raw)

    def analyze(self, source: str) -> SyntaxReport:
        """Run the complete syntax analysis on ``source``."""
        raw = self.analyzer.analyze_complete(source)
        return SyntaxReport.model_validate(raw)

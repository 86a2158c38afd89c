"""Incremental aggregation of scenario results."""

from dataclasses import dataclass, field

from faust_suite.models.result import ScenarioResult, SuiteResults


@dataclass(kw_only=True)
class ResultAggregator:
    """Accumulates scenario results into a suite summary.

    Counters only ever grow: ``total == passed + failed == len(tests)`` holds
    after every call to :meth:`record`.
    """

    results: SuiteResults = field(default_factory=SuiteResults)

    def record(self, result: ScenarioResult) -> None:
        """Append a result and update the running counters."""
        summary = self.results.summary
        self.results.tests.append(result)
        summary.total += 1
        if result.passed:
            summary.passed += 1
        else:
            summary.failed += 1

        if result.outcome in ("error", "timeout"):
            summary.errors.append(f"{result.id}: {result.error}")

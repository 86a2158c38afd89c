"""Sequential orchestration of the scenario catalog."""

import asyncio
import inspect
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from faust_suite.aggregator import ResultAggregator
from faust_suite.config import Isolation
from faust_suite.engines.bundle import EngineSet
from faust_suite.models.result import Outcome, ScenarioResult, SuiteResults
from faust_suite.models.scenario import Scenario, ScenarioGroup
from faust_suite.report import generate_report, symbol_for

log = logging.getLogger(__name__)

BANNER = (
    "╔════════════════════════════════════════════════════════════╗",
    "║     FAUST MCP COMPREHENSIVE INTEGRATION TEST SUITE          ║",
    "╚════════════════════════════════════════════════════════════╝",
)


@dataclass(kw_only=True)
class SuiteOrchestrator:
    """Runs the scenario catalog one scenario at a time.

    With ``isolation="shared"`` a single engine set is built on first use and
    handed to every scenario, so a scenario can observe state left behind by
    the previous one. ``isolation="fresh"`` builds a new engine set for each
    scenario. Engine construction is not part of any scenario: a factory
    failure propagates to the caller.
    """

    engine_factory: Callable[[], EngineSet]
    catalog: Sequence[ScenarioGroup] = ()
    isolation: Isolation = "shared"
    timeout: float | None = 60.0
    echo: Callable[[str], None] = print
    aggregator: ResultAggregator = field(default_factory=ResultAggregator)
    _shared_engines: EngineSet | None = field(default=None, init=False, repr=False)

    @property
    def results(self) -> SuiteResults:
        """Results collected so far."""
        return self.aggregator.results

    async def run_full_suite(self) -> SuiteResults:
        """Run every scenario of the catalog in order.

        Each call starts a new suite run with fresh results and timestamp.

        Returns:
            The completed suite results

        """
        self.aggregator = ResultAggregator()

        for line in BANNER:
            self.echo(line)
        self.echo("")
        self.echo("Starting tests...")
        self.echo("")

        log.info(
            "Running %d scenario(s) in %d group(s) with %s engines",
            sum(len(group.scenarios) for group in self.catalog),
            len(self.catalog),
            self.isolation,
        )

        for group in self.catalog:
            self.echo(f"═══ {group.title} ═══")
            self.echo("")
            for scenario in group.scenarios:
                await self.run(scenario)
            self.echo("")

        summary = self.results.summary
        log.info(
            "Suite completed: %d passed, %d failed, %d error(s)",
            summary.passed,
            summary.failed,
            len(summary.errors),
        )
        return self.results

    def generate_report(self) -> str:
        """Render the collected results as a text report."""
        return generate_report(self.results)

    async def run(self, scenario: Scenario) -> ScenarioResult:
        """Run a single scenario and record its result.

        Failures raised by the scenario check are contained and recorded;
        they never propagate.
        """
        engines = self._engines()

        start = time.monotonic()
        outcome, error = await self._execute(scenario, engines)
        duration_ms = int((time.monotonic() - start) * 1000)

        result = ScenarioResult(
            id=scenario.id,
            name=scenario.name,
            group=scenario.group,
            outcome=outcome,
            duration_ms=duration_ms,
            error=error,
        )

        self.echo(f"{symbol_for(result)} {result.id}: {result.name} ({duration_ms}ms)")
        if error:
            self.echo(f"   Error: {error}")

        self.aggregator.record(result)
        log.debug(
            "Scenario completed: id=%s outcome=%s duration=%dms",
            result.id,
            result.outcome,
            result.duration_ms,
        )
        return result

    def _engines(self) -> EngineSet:
        if self.isolation == "fresh":
            return self.engine_factory()
        if self._shared_engines is None:
            self._shared_engines = self.engine_factory()
        return self._shared_engines

    async def _execute(
        self, scenario: Scenario, engines: EngineSet
    ) -> tuple[Outcome, str | None]:
        deadline = asyncio.timeout(self.timeout)
        try:
            async with deadline:
                value = scenario.check(engines)
                if inspect.isawaitable(value):
                    value = await value
        except TimeoutError as e:
            if deadline.expired():
                log.warning("Scenario %s exceeded %ss", scenario.id, self.timeout)
                return "timeout", f"timed out after {self.timeout:g}s"
            return "error", _message(e)
        except Exception as e:
            log.debug("Scenario %s raised", scenario.id, exc_info=e)
            return "error", _message(e)

        return ("pass" if value else "fail"), None


def _message(error: Exception) -> str:
    return str(error) or type(error).__name__

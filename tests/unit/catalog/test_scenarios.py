"""Tests for the scenario catalog."""

import pytest

from faust_suite.catalog.loader import SnippetTables, load_snippet_tables
from faust_suite.catalog.scenarios import (
    build_catalog,
    check_error_detected,
    check_only_comments,
    check_pattern,
    check_test_then_debug,
    check_write_test_debug,
)
from faust_suite.orchestrator import SuiteOrchestrator
from faust_suite.testing.engines import (
    StubDebugSession,
    StubSyntaxAnalyzer,
    StubTestRunner,
    discerning_engine_set,
    stub_engine_set,
)
from faust_suite.testing.payloads import (
    debug_session_report,
    runner_report,
    syntax_report,
)

TABLES = SnippetTables(
    patterns={"FILTER": "process = fi.lowpass(4, 1000);"},
    errors={"NO_PROCESS": "freq = 440;", "DOMAIN_ERROR": "process = sqrt(-1);"},
)


def test_groups_in_execution_order() -> None:
    """Groups run framework, workflow, pattern, error, then edge cases."""
    catalog = build_catalog(TABLES)

    assert [group.key for group in catalog] == ["TEST", "FLOW", "PAT", "ERR", "EDGE"]
    assert [len(group.scenarios) for group in catalog] == [6, 3, 1, 2, 8]


def test_scenario_ids_carry_group_prefix() -> None:
    """Every id starts with its group key and ids are unique."""
    catalog = build_catalog(TABLES)
    scenarios = [s for group in catalog for s in group.scenarios]

    assert all(s.id.startswith(f"{s.group}-") for s in scenarios)
    assert len({s.id for s in scenarios}) == len(scenarios)


def test_data_driven_groups_follow_tables() -> None:
    """Pattern and error scenarios are generated from the tables in order."""
    catalog = {group.key: group for group in build_catalog(TABLES)}

    assert [s.id for s in catalog["PAT"].scenarios] == ["PAT-FILTER"]
    assert [s.name for s in catalog["ERR"].scenarios] == [
        "Error scenario: NO_PROCESS",
        "Error scenario: DOMAIN_ERROR",
    ]


class TestTestThenDebug:
    """Tests for the test-then-debug integration check."""

    async def test_passes_without_debugging_when_runner_passes(self) -> None:
        """A passing test run needs no diagnosis."""
        debugger = StubDebugSession()
        engines = stub_engine_set(debugger=debugger)

        assert await check_test_then_debug(engines) is True
        assert debugger.calls == []

    @pytest.mark.parametrize(("errors_found", "expected"), [(0, False), (2, True)])
    async def test_failing_run_requires_diagnosis(
        self, errors_found: int, expected: bool
    ) -> None:
        """A failing test run must be diagnosed with at least one error."""
        engines = stub_engine_set(
            test_runner=StubTestRunner(
                respond=lambda source: runner_report(overall_status="FAIL")
            ),
            debugger=StubDebugSession(
                respond=lambda source: debug_session_report(errors_found=errors_found)
            ),
        )

        assert await check_test_then_debug(engines) is expected


async def test_write_test_debug_requires_suggestions() -> None:
    """A failing run must produce debugging suggestions."""
    engines = stub_engine_set(
        test_runner=StubTestRunner(
            respond=lambda source: runner_report(overall_status="ERROR")
        ),
    )

    assert await check_write_test_debug(engines) is False


async def test_pattern_accepts_non_failing_status() -> None:
    """Any runner status other than FAIL is acceptable for a pattern."""
    engines = stub_engine_set(
        test_runner=StubTestRunner(
            respond=lambda source: runner_report(overall_status="WARN")
        ),
    )

    assert await check_pattern("process = _;", engines) is True


@pytest.mark.parametrize(
    ("syntax", "errors_found", "expected"),
    [
        (syntax_report(syntax_errors=["parse error"]), 1, True),
        (syntax_report(lint_errors=1), 1, True),
        (syntax_report(), 1, False),
        (syntax_report(syntax_errors=["parse error"]), 0, False),
    ],
)
async def test_error_detected_needs_both_engines(
    syntax: dict, errors_found: int, expected: bool
) -> None:
    """Broken snippets must be flagged by the analyzer and the debugger."""
    engines = stub_engine_set(
        analyzer=StubSyntaxAnalyzer(respond=lambda source: syntax),
        debugger=StubDebugSession(
            respond=lambda source: debug_session_report(errors_found=errors_found)
        ),
    )

    assert await check_error_detected("process = (;", engines) is expected


async def test_smoke_check_only_requires_no_exception() -> None:
    """Smoke checks pass whatever the analysis says."""
    analyzer = StubSyntaxAnalyzer(
        respond=lambda source: syntax_report(syntax_valid=False)
    )

    assert await check_only_comments(stub_engine_set(analyzer=analyzer)) is True
    assert analyzer.calls == ["// This is a comment\n/* Block comment */"]


async def test_full_catalog_passes_with_discerning_engines() -> None:
    """Engines flagging exactly the broken snippets pass every scenario."""
    tables = await load_snippet_tables()
    broken = {*tables.errors.values(), "wrong syntax here"}
    orchestrator = SuiteOrchestrator(
        engine_factory=lambda: discerning_engine_set(broken),
        catalog=build_catalog(tables),
        echo=lambda line: None,
    )

    results = await orchestrator.run_full_suite()

    assert results.summary.total == 37
    assert results.summary.failed == 0, orchestrator.generate_report()
    assert [t.group for t in results.tests][::12] == ["TEST", "PAT", "ERR", "EDGE"]

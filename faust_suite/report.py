"""Text and JSON rendering of suite results."""

from collections.abc import Mapping, Sequence
from typing import Any

from faust_suite.models.result import ScenarioResult, SuiteResults

PASS_SYMBOL = "✓"
FAIL_SYMBOL = "✗"

RULE = "─" * 61


def symbol_for(result: ScenarioResult) -> str:
    """Return the glyph shown next to a scenario."""
    return PASS_SYMBOL if result.passed else FAIL_SYMBOL


def percentage(part: int, total: int) -> str:
    """Format ``part / total`` as a percentage with one decimal place.

    An empty total yields ``0.0``.
    """
    if total == 0:
        return "0.0"
    return f"{part / total * 100:.1f}"


def group_results(
    tests: Sequence[ScenarioResult],
) -> Mapping[str, Sequence[ScenarioResult]]:
    """Group results by scenario group, keeping first-seen group order."""
    grouped: dict[str, list[ScenarioResult]] = {}
    for test in tests:
        grouped.setdefault(test.group, []).append(test)
    return grouped


def _section(title: str) -> list[str]:
    return [RULE, title, RULE]


def generate_report(results: SuiteResults) -> str:
    """Render suite results as a multi-line text report."""
    summary = results.summary
    lines = [
        "╔════════════════════════════════════════════════════════════╗",
        "║         INTEGRATION TEST RESULTS REPORT                     ║",
        "╚════════════════════════════════════════════════════════════╝",
        "",
        f"Timestamp: {results.timestamp}",
        "",
        *_section("SUMMARY"),
        f"Total Tests: {summary.total}",
        f"Passed: {summary.passed} ({percentage(summary.passed, summary.total)}%)",
        f"Failed: {summary.failed} ({percentage(summary.failed, summary.total)}%)",
        "",
    ]

    if summary.failed > 0:
        lines.append("FAILED TESTS:")
        for test in results.tests:
            if test.passed:
                continue
            lines.append(f"  {FAIL_SYMBOL} {test.id}: {test.name}")
            if test.error:
                lines.append(f"    {test.error}")
        lines.append("")

    lines.extend(_section("TEST DETAILS"))
    for group, tests in group_results(results.tests).items():
        passed = sum(1 for t in tests if t.passed)
        lines.append("")
        lines.append(f"{group} Tests: {passed}/{len(tests)}")
        lines.extend(f"  {symbol_for(t)} {t.id}: {t.name}" for t in tests)
    lines.append("")

    if summary.errors:
        lines.extend(_section("ERRORS"))
        lines.extend(f"  • {error}" for error in summary.errors)
        lines.append("")

    return "\n".join(lines)


def format_output(results: SuiteResults) -> dict[str, Any]:
    """Format suite results for JSON output."""
    return {
        "timestamp": results.timestamp,
        "summary": {
            "total": results.summary.total,
            "passed": results.summary.passed,
            "failed": results.summary.failed,
            "errors": list(results.summary.errors),
        },
        "tests": [
            {
                "id": test.id,
                "name": test.name,
                "group": test.group,
                "status": test.status,
                "outcome": test.outcome,
                "duration_ms": test.duration_ms,
                "error": test.error,
            }
            for test in results.tests
        ],
    }

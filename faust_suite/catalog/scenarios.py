"""Scenario catalog exercising the analysis engines on Faust snippets."""

from collections.abc import Mapping, Sequence
from functools import partial

from faust_suite.catalog.loader import SnippetTables
from faust_suite.engines.bundle import EngineSet
from faust_suite.models.scenario import Check, Scenario, ScenarioGroup

SINE = 'import("stdfaust.lib"); process = sin(440);'

COMPLEX_PROGRAM = """
import("stdfaust.lib");

freq = hslider("frequency", 440, 20, 20000, 1);
cutoff = hslider("cutoff", 1000, 20, 20000, 1);
resonance = hslider("resonance", 1, 0.1, 10, 0.1);

oscillator = freq : si.osc;
filtered = fi.lowpass(4, cutoff);

process = oscillator : filtered;
"""


# Framework integration


async def check_basic_syntax(engines: EngineSet) -> bool:
    result = await engines.test(SINE)
    return result.overall_status == "PASS"


async def check_error_diagnosis(engines: EngineSet) -> bool:
    result = await engines.debug("wrong syntax here")
    return result.errors_found > 0


async def check_complete_analysis(engines: EngineSet) -> bool:
    result = engines.analyze(SINE)
    return result.syntax_valid and result.overall_quality >= 60


async def check_test_then_debug(engines: EngineSet) -> bool:
    """A snippet failing the test runner must be diagnosed by the debugger."""
    code = 'freq = hslider("f", 440, 20, 20000, 1)\nprocess = freq : sin;'
    test_result = await engines.test(code)
    if test_result.overall_status != "PASS":
        debug_result = await engines.debug(code)
        return debug_result.errors_found > 0
    return True


async def check_test_and_syntax(engines: EngineSet) -> bool:
    test_result = await engines.test(SINE)
    syntax_result = engines.analyze(SINE)
    return test_result.overall_status == "PASS" and syntax_result.syntax_valid


async def check_full_pipeline(engines: EngineSet) -> bool:
    code = (
        'import("stdfaust.lib"); freq = hslider("freq", 440, 20, 20000, 1); '
        "process = freq : si.osc : fi.lowpass(4, 1000);"
    )
    syntax_result = engines.analyze(code)
    test_result = await engines.test(code)
    debug_result = await engines.debug(code)
    return (
        syntax_result.syntax_valid
        and test_result.overall_status == "PASS"
        and debug_result.errors_found == 0
    )


# Workflows


async def check_write_test_debug(engines: EngineSet) -> bool:
    code = 'import("stdfaust.lib"); process = hslider("freq", 440, 20, 20000, 1) : sin;'
    test_result = await engines.test(code)
    if test_result.overall_status != "PASS":
        debug_result = await engines.debug(code)
        return len(debug_result.stages.suggestions) > 0
    return True


async def check_analyze_lint_test(engines: EngineSet) -> bool:
    code = (
        'import("stdfaust.lib"); freq = hslider("freq", 440, 20, 20000, 1); '
        "process = freq : sin;"
    )
    syntax_result = engines.analyze(code)
    if syntax_result.linting.summary.total > 0:
        test_result = await engines.test(code)
        return test_result.overall_status != "FAIL"
    return True


async def check_complex_development(engines: EngineSet) -> bool:
    syntax_result = engines.analyze(COMPLEX_PROGRAM)
    test_result = await engines.test(COMPLEX_PROGRAM)
    return (
        syntax_result.syntax_valid
        and test_result.overall_status == "PASS"
        and len(syntax_result.structure.patterns) > 0
    )


# Data-driven groups


async def check_pattern(code: str, engines: EngineSet) -> bool:
    """A common pattern must parse and must not fail the test runner."""
    syntax_result = engines.analyze(code)
    test_result = await engines.test(code)
    return syntax_result.syntax_valid and test_result.overall_status != "FAIL"


async def check_error_detected(code: str, engines: EngineSet) -> bool:
    """A broken snippet must be flagged by both the analyzer and the debugger."""
    syntax_result = engines.analyze(code)
    debug_result = await engines.debug(code)
    return syntax_result.has_errors and debug_result.errors_found > 0


# Edge cases
#
# EDGE-1, EDGE-2, EDGE-7 and EDGE-8 are smoke tests: they only require that
# the analyzer returns without raising.


async def check_empty_code(engines: EngineSet) -> bool:
    result = engines.analyze("")
    return result.linting.summary.total >= 0


async def check_only_comments(engines: EngineSet) -> bool:
    engines.analyze("// This is a comment\n/* Block comment */")
    return True


async def check_long_code(engines: EngineSet) -> bool:
    lines = ['import("stdfaust.lib");']
    lines.extend(f"f{i} = * ({i});" for i in range(100))
    code = "\n".join(lines) + "\nprocess = f99;"
    result = engines.analyze(code)
    return result.syntax.metrics.definitions > 50


async def check_deep_nesting(engines: EngineSet) -> bool:
    code = "process = (((((" + "sin(" * 10 + "440" + ")" * 10 + ")" * 5 + ";"
    result = engines.analyze(code)
    return result.structure.complexity.max_nesting > 0


async def check_special_characters(engines: EngineSet) -> bool:
    result = engines.analyze("f_oo_bar = sin; process = f_oo_bar;")
    return result.syntax_valid


async def check_multiple_imports(engines: EngineSet) -> bool:
    code = 'import("stdfaust.lib");\nimport("stdfaust.lib");\nprocess = sin;'
    result = engines.analyze(code)
    return len(result.syntax.ast.imports) > 0


async def check_complex_operators(engines: EngineSet) -> bool:
    engines.analyze("process = (a : b, c <: d :> e) ~ f;")
    return True


async def check_slider_bounds(engines: EngineSet) -> bool:
    engines.analyze('f = hslider("f", 0, 0, 0, 0); process = f;')
    return True


def _scenarios(
    group: str, entries: Sequence[tuple[str, str, Check]]
) -> Sequence[Scenario]:
    return [
        Scenario(id=f"{group}-{suffix}", name=name, group=group, check=check)
        for suffix, name, check in entries
    ]


def framework_scenarios() -> Sequence[Scenario]:
    return _scenarios(
        "TEST",
        [
            ("1", "Testing framework: Basic syntax validation", check_basic_syntax),
            ("2", "Debugging framework: Error diagnosis", check_error_diagnosis),
            ("3", "Syntax analyzer: Complete analysis", check_complete_analysis),
            ("4", "Testing + Debugging integration", check_test_then_debug),
            ("5", "Testing + Syntax integration", check_test_and_syntax),
            ("6", "Full pipeline: All tools together", check_full_pipeline),
        ],
    )


def workflow_scenarios() -> Sequence[Scenario]:
    return _scenarios(
        "FLOW",
        [
            ("1", "Workflow: Write → Test → Debug", check_write_test_debug),
            ("2", "Workflow: Analyze → Lint → Test", check_analyze_lint_test),
            ("3", "Workflow: Complex code development", check_complex_development),
        ],
    )


def pattern_scenarios(patterns: Mapping[str, str]) -> Sequence[Scenario]:
    return _scenarios(
        "PAT",
        [
            (name, f"Pattern: {name}", partial(check_pattern, code))
            for name, code in patterns.items()
        ],
    )


def error_scenarios(errors: Mapping[str, str]) -> Sequence[Scenario]:
    return _scenarios(
        "ERR",
        [
            (name, f"Error scenario: {name}", partial(check_error_detected, code))
            for name, code in errors.items()
        ],
    )


def edge_case_scenarios() -> Sequence[Scenario]:
    return _scenarios(
        "EDGE",
        [
            ("1", "Edge case: Empty code", check_empty_code),
            ("2", "Edge case: Only comments", check_only_comments),
            ("3", "Edge case: Very long code", check_long_code),
            ("4", "Edge case: Deeply nested", check_deep_nesting),
            ("5", "Edge case: Special characters", check_special_characters),
            ("6", "Edge case: Multiple imports", check_multiple_imports),
            ("7", "Edge case: Complex operators", check_complex_operators),
            ("8", "Edge case: Slider bounds", check_slider_bounds),
        ],
    )


def build_catalog(tables: SnippetTables) -> Sequence[ScenarioGroup]:
    """Build the scenario groups in execution order.

    The order is fixed: framework integration, workflows, pattern coverage,
    error scenarios, edge cases.
    """
    return [
        ScenarioGroup(
            key="TEST",
            title="FRAMEWORK INTEGRATION TESTS",
            scenarios=framework_scenarios(),
        ),
        ScenarioGroup(
            key="FLOW", title="WORKFLOW TESTS", scenarios=workflow_scenarios()
        ),
        ScenarioGroup(
            key="PAT",
            title="FAUST PATTERN COVERAGE TESTS",
            scenarios=pattern_scenarios(tables.patterns),
        ),
        ScenarioGroup(
            key="ERR",
            title="ERROR SCENARIO TESTS",
            scenarios=error_scenarios(tables.errors),
        ),
        ScenarioGroup(
            key="EDGE", title="EDGE CASE TESTS", scenarios=edge_case_scenarios()
        ),
    ]

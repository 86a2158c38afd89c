"""Payload helpers for analysis engine results in tests."""

from collections.abc import Sequence
from typing import Any


def runner_report(*, overall_status: str = "PASS") -> dict[str, Any]:
    """Create a test-runner result payload."""
    return {
        "summary": {
            "overall_status": overall_status,
            "total_tests": 4,
            "passed": 4 if overall_status == "PASS" else 2,
        },
        "tests": [],
    }


def debug_session_report(
    *,
    errors_found: int = 0,
    suggestions: Sequence[str] = (),
) -> dict[str, Any]:
    """Create a debug-session result payload."""
    return {
        "stages": {
            "diagnosis": {"errors_found": errors_found, "errors": []},
            "suggestions": list(suggestions),
        },
        "success": errors_found == 0,
    }


def syntax_report(
    *,
    syntax_valid: bool = True,
    overall_quality: float = 85.0,
    lint_total: int = 0,
    lint_errors: int = 0,
    patterns: Sequence[str] = ("oscillator",),
    max_nesting: int = 1,
    syntax_errors: Sequence[str] = (),
    definitions: int = 1,
    imports: Sequence[str] = ("stdfaust.lib",),
) -> dict[str, Any]:
    """Create a syntax-analyzer result payload.

    Defaults describe a small valid program.
    """
    return {
        "summary": {"syntax_valid": syntax_valid, "grade": "B"},
        "overall_quality": overall_quality,
        "linting": {"summary": {"total": lint_total, "errors": lint_errors}},
        "structure": {
            "patterns": list(patterns),
            "complexity": {"max_nesting": max_nesting},
        },
        "syntax": {
            "errors": list(syntax_errors),
            "metrics": {"definitions": definitions},
            "ast": {"imports": list(imports)},
        },
    }

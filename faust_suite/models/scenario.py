"""Models for scenario definitions."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from faust_suite.engines.bundle import EngineSet

Check = Callable[[EngineSet], Awaitable[bool] | bool]


@dataclass(frozen=True, kw_only=True)
class Scenario:
    """A named check run against the analysis engines.

    The check receives the engine set chosen by the orchestrator and either
    returns a truthy value (pass), a falsy value (assertion failure) or raises.
    """

    id: str
    name: str
    group: str
    check: Check


@dataclass(frozen=True, kw_only=True)
class ScenarioGroup:
    """An ordered group of scenarios sharing a report heading."""

    key: str
    title: str
    scenarios: Sequence[Scenario]

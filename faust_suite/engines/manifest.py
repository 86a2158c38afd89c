"""Engine manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from faust_suite.engines.bundle import EngineSet

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class EngineManifest(Generic[ConfigT]):
    """Manifest describing an engine plugin.

    The manifest contains references to the configuration class and the
    factory building an engine set from that configuration. The factory may be
    called more than once when scenarios run with fresh engines.
    """

    config_cls: type[ConfigT]
    engine_factory: Callable[[ConfigT], EngineSet]

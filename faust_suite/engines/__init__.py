"""Analysis engine contracts and plugin loading."""

from faust_suite.engines.bundle import EngineSet
from faust_suite.engines.loading import EngineNotFoundError, load_engine_manifest
from faust_suite.engines.manifest import EngineManifest

__all__ = ["EngineManifest", "EngineNotFoundError", "EngineSet", "load_engine_manifest"]

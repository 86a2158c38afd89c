"""Loading of engine plugins from entry points.

The analysis engines are not part of this package: an engine package must be
installed that registers an ``EngineManifest`` under the
``faust_suite.engines`` entry-point group, e.g. in its pyproject.toml::

    [project.entry-points."faust_suite.engines"]
    faust-mcp = "faust_mcp_engines.manifest:engine_manifest"
"""

from importlib.metadata import entry_points
from typing import Any

from faust_suite.engines.manifest import EngineManifest

ENTRY_POINT_GROUP = "faust_suite.engines"


class EngineNotFoundError(Exception):
    """Raised when an engine plugin is missing or does not provide a manifest."""


def load_engine_manifest(key: str) -> EngineManifest[Any]:
    """Load an engine manifest by the key passed with ``--engines``.

    Args:
        key: The plugin key as registered under the ``faust_suite.engines``
             entry-point group (e.g., "faust-mcp")

    Returns:
        The engine manifest instance

    Raises:
        EngineNotFoundError: If no plugin with the given key is installed, or
            its entry point does not resolve to an ``EngineManifest``

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)
    matches = [entry for entry in entries if entry.name == key]

    if not matches:
        available = [e.name for e in entries]
        if not available:
            raise EngineNotFoundError(
                f"Engine plugin '{key}' not found: no plugins are installed in "
                f"the '{ENTRY_POINT_GROUP}' entry-point group. Install an engine "
                "package and pass its key with --engines."
            )
        raise EngineNotFoundError(
            f"Engine plugin '{key}' not found. Available plugins: {available}"
        )

    manifest = matches[0].load()
    if not isinstance(manifest, EngineManifest):
        raise EngineNotFoundError(
            f"Engine plugin '{key}' ({matches[0].value}) does not provide an "
            f"EngineManifest, got {type(manifest).__name__}"
        )
    return manifest

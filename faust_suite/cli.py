"""CLI entry point for the Faust engine integration suite."""

import argparse
import asyncio
import json
import logging
import sys
from functools import partial
from pathlib import Path

from faust_suite.catalog.loader import load_snippet_tables
from faust_suite.catalog.scenarios import build_catalog
from faust_suite.config import SuiteConfig
from faust_suite.engines.loading import load_engine_manifest
from faust_suite.orchestrator import SuiteOrchestrator
from faust_suite.report import format_output


async def run(
    engine_key: str,
    engine_config_json: str,
    config: SuiteConfig,
    export_json: Path | None = None,
) -> int:
    """Run the integration suite and return exit code."""
    log = logging.getLogger("faust_suite")

    log.info("Loading engine plugin: %s", engine_key)
    manifest = load_engine_manifest(engine_key)

    config_dict = json.loads(engine_config_json)
    engine_config = manifest.config_cls(**config_dict)

    tables = await load_snippet_tables(config.snippets_path)

    orchestrator = SuiteOrchestrator(
        engine_factory=partial(manifest.engine_factory, engine_config),
        catalog=build_catalog(tables),
        isolation=config.isolation,
        timeout=config.timeout,
    )
    results = await orchestrator.run_full_suite()

    print(orchestrator.generate_report())

    if export_json is not None:
        export_json.write_text(
            json.dumps(format_output(results), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        log.info("Results exported to %s", export_json)

    return 0 if results.summary.failed == 0 else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run integration scenarios against the Faust analysis engines"
    )
    parser.add_argument(
        "--engines",
        required=True,
        help=(
            "Engine plugin key registered under the faust_suite.engines "
            "entry-point group; the engine package is installed separately"
        ),
    )
    parser.add_argument(
        "--engine-config",
        default="{}",
        help="JSON configuration for the engine plugin",
    )
    parser.add_argument(
        "--isolation",
        choices=["shared", "fresh"],
        default="shared",
        help="Share one engine set across scenarios or build one per scenario",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=60.0,
        help="Per-scenario deadline in seconds",
    )
    parser.add_argument(
        "--no-timeout",
        action="store_true",
        help="Disable the per-scenario deadline",
    )
    parser.add_argument(
        "--snippets",
        type=Path,
        default=None,
        help="YAML file with pattern and error snippet tables",
    )
    parser.add_argument(
        "--export-json",
        type=Path,
        default=None,
        help="Write the suite results to this JSON file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics written to stderr",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("faust_suite")

    try:
        config = SuiteConfig(
            timeout=None if args.no_timeout else args.timeout,
            isolation=args.isolation,
            snippets_path=args.snippets,
        )
        exit_code = asyncio.run(
            run(
                engine_key=args.engines,
                engine_config_json=args.engine_config,
                config=config,
                export_json=args.export_json,
            )
        )
    except Exception as e:
        log.critical("Fatal error: %s", e, exc_info=e)
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()

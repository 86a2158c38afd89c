"""Allow running the suite with ``python -m faust_suite``."""

from faust_suite.cli import main

main()

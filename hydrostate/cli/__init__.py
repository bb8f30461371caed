"""hydrostate command-line interface package.

Supports ``python -m hydrostate.cli`` as an alternative to the ``hydrostate`` entry point.
"""

from hydrostate.cli.main import cli, main

__all__ = ["cli", "main"]

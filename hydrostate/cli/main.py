"""hydrostate command-line interface.

Entry point for the ``hydrostate`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from hydrostate import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Log region resolution details.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """hydrostate — water and steam properties (IAPWS-IF97).

    Units: MPa, K, kg/m³, kJ/kg, kJ/(kg·K).
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Import and register sub-commands
from hydrostate.cli.state_cmd import state  # noqa: E402
from hydrostate.cli.saturation_cmd import saturation  # noqa: E402
from hydrostate.cli.expand_cmd import expand  # noqa: E402
from hydrostate.cli.compare_cmd import compare  # noqa: E402
from hydrostate.cli.info_cmd import show  # noqa: E402

cli.add_command(state)
cli.add_command(saturation)
cli.add_command(expand)
cli.add_command(compare)
cli.add_command(show)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()

"""CLI command for evaluating a single state."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from hydrostate.core.config import StatePointSet, load_state_points, save_state_points
from hydrostate.core.errors import SteamPropertyError
from hydrostate.core.regions import InputPair
from hydrostate.core.state import State
from hydrostate.utils.units import unit_of

PAIR_NAMES = [str(pair) for pair in InputPair]

_LABELS = {
    "p": "Pressure",
    "T": "Temperature",
    "x": "Quality",
    "rho": "Density",
    "v": "Specific volume",
    "u": "Internal energy",
    "h": "Enthalpy",
    "s": "Entropy",
}


def build_state(console: Console, kind: str, a: float, b: float) -> State:
    """Construct a State or exit with status 1 on a property error."""
    try:
        return State.from_pair(InputPair.from_name(kind), a, b)
    except SteamPropertyError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)


def state_table(title: str, *columns: tuple[str, State]) -> Table:
    """Table with one row per property and one column per labelled state."""
    table = Table(title=title)
    table.add_column("Property", style="cyan")
    table.add_column("Unit", style="dim")
    for heading, _ in columns:
        table.add_column(heading, justify="right", style="green")

    values = [st.as_dict() for _, st in columns]
    table.add_row("Region", "", *[st.region.name for _, st in columns])
    for prop, label in _LABELS.items():
        cells = [f"{v[prop]:.9g}" if prop in v else "—" for v in values]
        table.add_row(label, unit_of(prop), *cells)
    return table


@click.command("state")
@click.argument("kind", type=click.Choice(PAIR_NAMES, case_sensitive=False))
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.option("--label", type=str, default=None, help="Label used when saving the point.")
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Append the point to a state point file (JSON).",
)
@click.pass_context
def state(
    ctx: click.Context,
    kind: str,
    a: float,
    b: float,
    label: str | None,
    output: str | None,
) -> None:
    """Evaluate the state given by input pair KIND with values A and B.

    Example: hydrostate state pT 3 300
    """
    console: Console = ctx.obj.get("console", Console())
    st = build_state(console, kind, a, b)

    pair = InputPair.from_name(kind)
    console.print(f"\n[bold]hydrostate — {st.region.description}[/bold]\n")
    console.print(state_table(f"{pair} = ({a:g}, {b:g})", ("Value", st)))

    if output:
        path = Path(output)
        point_set = load_state_points(path) if path.exists() else StatePointSet()
        point_set.add(label or f"point {len(point_set.points) + 1}", pair, a, b)
        save_state_points(point_set, path)
        console.print(f"\n[dim]Saved to {path}[/dim]")

"""CLI command for inspecting state point files."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from hydrostate.core.config import load_state_points
from hydrostate.core.errors import SteamPropertyError


@click.command("show")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def show(ctx: click.Context, path: str) -> None:
    """Display the state points stored in a file."""
    console: Console = ctx.obj.get("console", Console())
    try:
        point_set = load_state_points(path)
    except (KeyError, ValueError, TypeError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    tree = Tree(f"[bold]{point_set.meta.name}[/bold]")
    meta = tree.add("[cyan]Metadata[/cyan]")
    meta.add(f"Author: {point_set.meta.author or '—'}")
    meta.add(f"Version: {point_set.meta.version}")
    meta.add(f"Modified: {point_set.meta.modified or '—'}")
    console.print(tree)

    table = Table(title="State points")
    table.add_column("Label", style="cyan")
    table.add_column("Input", style="dim")
    table.add_column("Region", style="yellow")
    for heading in ("p [MPa]", "T [K]", "x", "h [kJ/kg]", "s [kJ/(kg·K)]"):
        table.add_column(heading, justify="right", style="green")

    for point in point_set.points:
        inputs = f"{point.kind}=({point.a:g}, {point.b:g})"
        try:
            st = point.build()
            props = st.as_dict()
        except SteamPropertyError as exc:
            table.add_row(point.label, inputs, "[red]error[/red]", str(exc), "", "", "", "")
            continue
        region = st.region.name
        cells = [f"{props[k]:.6g}" if k in props else "—" for k in ("p", "T", "x", "h", "s")]
        table.add_row(point.label, inputs, region, *cells)

    console.print(table)

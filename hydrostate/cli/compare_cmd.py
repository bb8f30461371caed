"""CLI command comparing IF97 with the IAPWS-95 reference."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from hydrostate.cli.state_cmd import build_state
from hydrostate.core.errors import SteamPropertyError
from hydrostate.core.reference import ReferenceFluid
from hydrostate.utils.units import unit_of


@click.command("compare")
@click.argument("p", type=float)
@click.argument("t", type=float)
@click.option("--backend", type=str, default="HEOS", show_default=True, help="CoolProp backend.")
@click.pass_context
def compare(ctx: click.Context, p: float, t: float, backend: str) -> None:
    """Compare IF97 at pressure P [MPa] and temperature T [K] with IAPWS-95."""
    console: Console = ctx.obj.get("console", Console())
    st = build_state(console, "pT", p, t)

    try:
        deviations = ReferenceFluid(backend).compare(st)
    except SteamPropertyError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    table = Table(title=f"IF97 vs IAPWS-95 at p={p:g} MPa, T={t:g} K ({st.region.name})")
    table.add_column("Property", style="cyan")
    table.add_column("Unit", style="dim")
    table.add_column("IF97", justify="right", style="green")
    table.add_column("IAPWS-95", justify="right", style="green")
    table.add_column("Rel. deviation", justify="right", style="yellow")
    for dev in deviations:
        table.add_row(
            dev.prop,
            unit_of(dev.prop),
            f"{dev.if97:.9g}",
            f"{dev.reference:.9g}",
            f"{dev.relative:.2e}",
        )
    console.print(table)

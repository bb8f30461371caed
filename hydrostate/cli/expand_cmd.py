"""CLI command for steam expansions."""

from __future__ import annotations

import click
from rich.console import Console

from hydrostate.cli.state_cmd import PAIR_NAMES, build_state, state_table
from hydrostate.core.errors import SteamPropertyError
from hydrostate.cycle.components.turbine import Turbine


@click.command("expand")
@click.argument("kind", type=click.Choice(PAIR_NAMES, case_sensitive=False))
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.option("--to", "p_out", type=float, required=True, help="Outlet pressure [MPa].")
@click.option(
    "--efficiency",
    type=float,
    default=1.0,
    show_default=True,
    help="Isentropic efficiency.",
)
@click.option(
    "--mass-flow", type=float, default=1.0, show_default=True, help="Mass flow [kg/s]."
)
@click.pass_context
def expand(
    ctx: click.Context,
    kind: str,
    a: float,
    b: float,
    p_out: float,
    efficiency: float,
    mass_flow: float,
) -> None:
    """Expand the state given by KIND, A, B through a turbine to --to."""
    console: Console = ctx.obj.get("console", Console())
    inlet = build_state(console, kind, a, b)

    turbine = Turbine(efficiency=efficiency)
    try:
        turbine.compute(inlet, outlet_pressure=p_out, mass_flow=mass_flow)
    except SteamPropertyError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    result = turbine.result
    console.print(f"\n[bold]hydrostate — Expansion to {p_out:g} MPa[/bold]\n")
    console.print(
        state_table(
            "Turbine states",
            ("Inlet", result.inlet),
            ("Isentropic", result.outlet_isentropic),
            ("Outlet", result.outlet),
        )
    )
    console.print(f"Pressure ratio:  {result.pressure_ratio:.4g}")
    console.print(f"Specific work:   {result.specific_work:.6g} kJ/kg")
    console.print(f"Shaft power:     {result.shaft_power:.6g} kW")

"""CLI command printing a saturation table."""

from __future__ import annotations

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from hydrostate.core.errors import SteamPropertyError
from hydrostate.core.state import State
from hydrostate.utils.constants import T_CRITICAL, T_MIN


@click.command("saturation")
@click.option("--t-min", type=float, default=T_MIN, show_default=True, help="Lowest temperature [K].")
@click.option("--t-max", type=float, default=640.0, show_default=True, help="Highest temperature [K].")
@click.option("--points", type=int, default=10, show_default=True, help="Number of rows.")
@click.pass_context
def saturation(ctx: click.Context, t_min: float, t_max: float, points: int) -> None:
    """Print saturated liquid and vapour properties over a temperature range."""
    console: Console = ctx.obj.get("console", Console())

    if not T_MIN <= t_min < t_max <= T_CRITICAL:
        console.print(
            f"[red]Error:[/red] Need {T_MIN} <= t-min < t-max <= {T_CRITICAL} K."
        )
        raise SystemExit(1)

    table = Table(title="Saturation table")
    for heading in ("T [K]", "p [MPa]", "ρ' [kg/m³]", "ρ'' [kg/m³]", "h' [kJ/kg]",
                    "h'' [kJ/kg]", "s' [kJ/(kg·K)]", "s'' [kJ/(kg·K)]"):
        table.add_column(heading, justify="right")

    for T in np.linspace(t_min, t_max, points):
        try:
            liquid = State.from_Tx(float(T), 0.0)
            vapour = State.from_Tx(float(T), 1.0)
            row = [T, liquid.p, liquid.rho, vapour.rho, liquid.h, vapour.h, liquid.s, vapour.s]
        except SteamPropertyError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1)
        table.add_row(*[f"{value:.6g}" for value in row])

    console.print(table)

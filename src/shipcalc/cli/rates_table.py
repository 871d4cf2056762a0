"""``shipcalc rates`` — list every shipping method with its formula.

Renders a Rich table when Rich is installed and falls back to a plain
text table otherwise.  Read-only: nothing is computed or prompted.
"""

from __future__ import annotations

from shipcalc.cli import exit_codes
from shipcalc.cli.console import out
from shipcalc.core.models import ShippingMethod
from shipcalc.core.rates import SHIPPING_RATES, describe_rate


def rate_rows() -> list[tuple[str, str, str]]:
    """Return ``(menu key, label, formula)`` for every method in menu order."""
    return [
        (str(method.menu_key), method.label, describe_rate(SHIPPING_RATES[method]))
        for method in sorted(ShippingMethod, key=lambda m: m.menu_key)
    ]


def _print_plain_rates_table(rows: list[tuple[str, str, str]]) -> None:
    """Render the rate table without Rich."""
    print("\nShipping rates")
    print("=" * 60)
    print(f"{'#':<3} {'Method':<15} {'Formula':<40}")
    print("-" * 60)
    for key, label, formula in rows:
        print(f"{key:<3} {label:<15} {formula:<40}")
    print()


def run_rates() -> int:
    """Print the rate table and return :data:`exit_codes.SUCCESS`."""
    rows = rate_rows()

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_rates_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title="Shipping rates",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Method", style="bold", min_width=13)
    table.add_column("Formula (USD)", min_width=30)

    for key, label, formula in rows:
        table.add_row(key, label, formula)

    out.print()
    out.print(table)
    out.print()
    return exit_codes.SUCCESS

"""Interactive prompts for a shipping quote.

This module is responsible for:

* Rendering the shipping-method menu as a Rich table.
* Prompting for the menu choice, the weight and the distance via
  questionary text prompts.
* Parsing the answers into typed values.

Range checks and cost calculation live elsewhere; this module only
talks to the terminal.
"""

from __future__ import annotations

from typing import Any

from shipcalc.cli.console import out
from shipcalc.cli.rates_table import rate_rows
from shipcalc.core.models import ShippingMethod
from shipcalc.core.validation import parse_menu_choice, parse_quantity
from shipcalc.exceptions import EnvironmentError, PromptCancelledError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for menu rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Menu display
# ---------------------------------------------------------------------------

def _display_menu() -> None:
    """Print the shipping-method menu to stdout."""
    table_class = _import_rich_table()

    table = table_class(
        title="Choose a shipping method",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Method", justify="left", min_width=13)
    table.add_column("Formula (USD)", justify="left", min_width=30)

    for key, label, formula in rate_rows():
        table.add_row(key, label, formula)

    out.print()
    out.print(table)
    out.print()


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _ask_text(question: str) -> str:
    """Ask a free-text question; ``None`` from questionary means cancelled."""
    questionary = _import_questionary()

    answer: str | None = questionary.text(question).ask()  # None on Ctrl+C / Esc
    if answer is None:
        raise PromptCancelledError(
            "No answer given.",
            hint="Type a value, then press Enter.",
        )
    return answer


def prompt_shipping_method() -> ShippingMethod:
    """Show the menu and return the method the user picked.

    Raises
    ------
    InvalidChoiceError
        If the answer is not one of the listed menu numbers.
    PromptCancelledError
        If the user cancels the prompt.
    """
    _display_menu()
    answer = _ask_text(f"Select shipping method (1-{len(ShippingMethod)}):")
    return parse_menu_choice(answer)


def prompt_quantity(question: str, name: str) -> float:
    """Ask *question* and parse the answer as a number.

    The sign is not checked here.

    Raises
    ------
    InvalidInputError
        If the answer is not a number.
    PromptCancelledError
        If the user cancels the prompt.
    """
    return parse_quantity(_ask_text(question), name)

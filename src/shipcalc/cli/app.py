"""CLI application entry point and command routing for shipcalc.

This module is the **sole process-level error boundary** for the entire
application.  It catches :class:`~shipcalc.exceptions.ShipcalcError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all cost work is delegated to the
  core layer.
* Results and the menu go to stdout; diagnostics go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from shipcalc.cli import exit_codes
from shipcalc.cli.console import console, out
from shipcalc.exceptions import InvalidChoiceError, ShipcalcError, StrategyNotSetError
from shipcalc.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``shipcalc [quote]`` — interactive shipping quote (default)
    * ``shipcalc rates``   — list every method and its formula
    * ``shipcalc --version``
    """
    parser = argparse.ArgumentParser(
        prog="shipcalc",
        description="Interactive shipping-cost calculator.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="quote",
        choices=("quote", "rates"),
        help="'quote' (default) to price a parcel, 'rates' to list formulas.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_quote() -> int:
    """Run one interactive quote.

    Flow:
    1. Prompt for a shipping method and inject it into the context.
    2. Prompt for weight, then distance; reject negatives immediately.
    3. Print the cost, or report a calculation error without failing.
    """
    from shipcalc.cli.quote_prompt import prompt_quantity, prompt_shipping_method
    from shipcalc.core.delivery_context import DeliveryContext
    from shipcalc.core.validation import require_non_negative

    context = DeliveryContext()

    method = prompt_shipping_method()
    context.set_strategy(method)

    weight = require_non_negative(
        prompt_quantity("Enter parcel weight (kg):", "weight"),
        "weight",
    )
    distance = require_non_negative(
        prompt_quantity("Enter delivery distance (km):", "distance"),
        "distance",
    )

    try:
        cost = context.calculate_cost(weight, distance)
    except StrategyNotSetError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        return exit_codes.SUCCESS

    logger.info("Quoted %s for %s kg over %s km", method.label, weight, distance)
    out.print(f"Shipping cost: {cost:g} dollars.")
    return exit_codes.SUCCESS


def _handle_rates() -> int:
    """Dispatch the ``rates`` listing command."""
    from shipcalc.cli.rates_table import run_rates

    return run_rates()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the shipcalc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "rates":
        return _handle_rates()

    return _handle_quote()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  An invalid menu
    choice is reported on stdout, next to the menu; every other error
    goes to stderr.
    """
    try:
        code = main()
        sys.exit(code)
    except InvalidChoiceError as exc:
        out.print(str(exc))
        if exc.hint:
            out.print(exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except ShipcalcError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

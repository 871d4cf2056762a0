"""Allow ``python -m shipcalc`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m shipcalc`` behaves identically to the ``shipcalc``
console script.
"""

from __future__ import annotations

from shipcalc.cli.app import cli

if __name__ == "__main__":
    cli()

"""Custom exception hierarchy for shipcalc.

All exceptions that cross layer boundaries must inherit from
:class:`ShipcalcError`.  The CLI error boundary relies on this to render
a clean message instead of a stack trace.

Hierarchy
---------
ShipcalcError
├── InvalidChoiceError
├── InvalidInputError
│   └── NegativeValueError
├── StrategyNotSetError
├── PromptCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class ShipcalcError(Exception):
    """Base exception for all shipcalc errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Menu selection --------------------------------------------------------

class InvalidChoiceError(ShipcalcError):
    """Raised when the menu selection does not name a shipping method."""


# --- Numeric input ---------------------------------------------------------

class InvalidInputError(ShipcalcError):
    """Raised when a weight or distance cannot be parsed as a number."""


class NegativeValueError(InvalidInputError):
    """Raised when a weight or distance is below zero."""


# --- Delivery context ------------------------------------------------------

class StrategyNotSetError(ShipcalcError):
    """Raised when a cost is requested before a strategy was selected."""


# --- Interaction -----------------------------------------------------------

class PromptCancelledError(ShipcalcError):
    """Raised when the user dismisses an interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ShipcalcError):
    """Raised when an optional runtime dependency is not available."""

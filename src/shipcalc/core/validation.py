"""Parsing and validation of raw user input.

Pure functions only: text in, typed value (or a
:class:`~shipcalc.exceptions.ShipcalcError` subclass) out.
"""

from __future__ import annotations

import math

from shipcalc.core.models import ShippingMethod
from shipcalc.exceptions import InvalidChoiceError, InvalidInputError, NegativeValueError


def parse_menu_choice(text: str) -> ShippingMethod:
    """Resolve a menu entry typed by the user to a :class:`ShippingMethod`.

    Raises
    ------
    InvalidChoiceError
        If *text* is not an integer or names no method.
    """
    try:
        key = int(text.strip())
    except ValueError as exc:
        raise InvalidChoiceError(
            "Invalid choice.",
            hint=f"Enter a number from 1 to {len(ShippingMethod)}.",
        ) from exc
    return ShippingMethod.from_menu_key(key)


def parse_quantity(text: str, name: str) -> float:
    """Parse *text* as a finite float; *name* is used in the error message.

    ``nan`` and ``inf`` are rejected even though :func:`float` accepts them.
    """
    try:
        value = float(text.strip())
    except ValueError as exc:
        raise InvalidInputError(
            f"{name.capitalize()} must be a number.",
        ) from exc
    if not math.isfinite(value):
        raise InvalidInputError(f"{name.capitalize()} must be a finite number.")
    return value


def require_non_negative(value: float, name: str) -> float:
    """Return *value* unchanged, rejecting anything below zero."""
    if value < 0:
        raise NegativeValueError(f"{name.capitalize()} must be a non-negative number.")
    return value

"""Rate table and cost dispatch for the shipping variants.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from shipcalc.core.models import ShippingMethod, ShippingRate


SHIPPING_RATES: Mapping[ShippingMethod, ShippingRate] = MappingProxyType(
    {method: method.rate for method in ShippingMethod}
)
"""Read-only mapping from each method to its cost formula."""


def calculate_shipping_cost(
    method: ShippingMethod,
    weight: float,
    distance: float,
) -> float:
    """Return the cost of shipping *weight* kg over *distance* km by *method*."""
    return method.rate.cost(weight, distance)


def _format_number(value: float) -> str:
    return f"{value:g}"


def describe_rate(rate: ShippingRate) -> str:
    """Render *rate* as a human-readable formula.

    Example: ``"weight x 0.75 + distance x 0.2 + 10"``.  The surcharge
    term is omitted when it is zero.
    """
    text = (
        f"weight x {_format_number(rate.per_kg)}"
        f" + distance x {_format_number(rate.per_km)}"
    )
    if rate.surcharge:
        text += f" + {_format_number(rate.surcharge)}"
    return text

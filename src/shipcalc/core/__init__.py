"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No terminal, filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from shipcalc.core.delivery_context import DeliveryContext
from shipcalc.core.models import ShippingMethod, ShippingRate
from shipcalc.core.protocols import ShippingStrategy
from shipcalc.core.rates import SHIPPING_RATES, calculate_shipping_cost, describe_rate

__all__: list[str] = [
    "SHIPPING_RATES",
    "DeliveryContext",
    "ShippingMethod",
    "ShippingRate",
    "ShippingStrategy",
    "calculate_shipping_cost",
    "describe_rate",
]

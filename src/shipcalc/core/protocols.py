"""Protocols (interfaces) consumed by the core layer.

:class:`~shipcalc.core.delivery_context.DeliveryContext` depends ONLY
on this protocol, never on a concrete shipping method.
"""

from __future__ import annotations

from typing import Protocol


class ShippingStrategy(Protocol):
    """Contract for shipping cost strategies.

    Any object that implements :meth:`calculate_cost` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).  Every
    :class:`~shipcalc.core.models.ShippingMethod` member does.
    """

    def calculate_cost(self, weight: float, distance: float) -> float:
        """Return the cost of shipping *weight* kg over *distance* km.

        Implementations must be pure.  Inputs are assumed to have been
        validated by the caller.
        """
        ...  # pragma: no cover

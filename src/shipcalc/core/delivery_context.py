"""Delivery context — delegates cost computation to a shipping strategy.

The context has two states: *unconfigured* (initial, no strategy) and
*configured* (after :meth:`DeliveryContext.set_strategy`).  There is no
way back to the unconfigured state.

Guarantees
----------
* Pure delegation — no I/O, no ``print()``.
* :class:`~shipcalc.exceptions.StrategyNotSetError` is the only error
  raised here.
"""

from __future__ import annotations

import logging

from shipcalc.core.protocols import ShippingStrategy
from shipcalc.exceptions import StrategyNotSetError

logger = logging.getLogger(__name__)


class DeliveryContext:
    """Holds at most one shipping strategy and calls it for costs.

    Parameters
    ----------
    strategy:
        Optional initial strategy.  When omitted the context starts
        unconfigured.
    """

    def __init__(self, strategy: ShippingStrategy | None = None) -> None:
        self._strategy: ShippingStrategy | None = strategy

    @property
    def strategy(self) -> ShippingStrategy | None:
        """The strategy currently in effect, or ``None``."""
        return self._strategy

    @property
    def is_configured(self) -> bool:
        """Whether a strategy has been selected."""
        return self._strategy is not None

    def set_strategy(self, strategy: ShippingStrategy) -> None:
        """Replace the current strategy unconditionally."""
        logger.debug("Shipping strategy set to %r", strategy)
        self._strategy = strategy

    def calculate_cost(self, weight: float, distance: float) -> float:
        """Return the selected strategy's cost for *weight* and *distance*.

        Raises
        ------
        StrategyNotSetError
            If no strategy has been selected yet.
        """
        if self._strategy is None:
            raise StrategyNotSetError(
                "Shipping strategy is not set.",
                hint="Select a shipping method before calculating a cost.",
            )
        cost = self._strategy.calculate_cost(weight, distance)
        logger.debug(
            "Calculated cost %s for weight=%s distance=%s",
            cost,
            weight,
            distance,
        )
        return cost

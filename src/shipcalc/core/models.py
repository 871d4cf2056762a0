"""Domain models for shipcalc.

:class:`ShippingRate` is a frozen dataclass: an immutable value object
holding the coefficients of one linear cost formula.
:class:`ShippingMethod` is the closed set of shipping variants offered
to the user.  Neither carries I/O or mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shipcalc.exceptions import InvalidChoiceError


# ---------------------------------------------------------------------------
# Cost formula
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ShippingRate:
    """Coefficients of ``weight * per_kg + distance * per_km + surcharge``."""

    per_kg: float
    """Price per kilogram of parcel weight."""

    per_km: float
    """Price per kilometre of delivery distance."""

    surcharge: float = 0.0
    """Flat fee added regardless of weight and distance."""

    def cost(self, weight: float, distance: float) -> float:
        """Apply the formula.  Inputs are not validated here."""
        return weight * self.per_kg + distance * self.per_km + self.surcharge


# ---------------------------------------------------------------------------
# Shipping variants
# ---------------------------------------------------------------------------

class ShippingMethod(Enum):
    """Closed set of shipping variants, keyed by their menu number.

    Each member carries its menu key, display label and cost formula.
    """

    STANDARD = (1, "Standard", ShippingRate(per_kg=0.5, per_km=0.1))
    EXPRESS = (2, "Express", ShippingRate(per_kg=0.75, per_km=0.2, surcharge=10))
    INTERNATIONAL = (3, "International", ShippingRate(per_kg=1.0, per_km=0.5, surcharge=15))
    NIGHT = (4, "Night", ShippingRate(per_kg=0.75, per_km=0.2, surcharge=20))

    def __init__(self, menu_key: int, label: str, rate: ShippingRate) -> None:
        self.menu_key: int = menu_key
        self.label: str = label
        self.rate: ShippingRate = rate

    @classmethod
    def from_menu_key(cls, key: int) -> ShippingMethod:
        """Return the method listed under *key* in the menu.

        Raises
        ------
        InvalidChoiceError
            If no method uses *key*.
        """
        for method in cls:
            if method.menu_key == key:
                return method
        raise InvalidChoiceError(
            "Invalid choice.",
            hint=f"Enter a number from 1 to {len(cls)}.",
        )

    def calculate_cost(self, weight: float, distance: float) -> float:
        """Compute the cost of shipping *weight* kg over *distance* km."""
        return self.rate.cost(weight, distance)

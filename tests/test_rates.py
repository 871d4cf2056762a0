"""Tests for the rate table and dispatch function (core/rates.py).

Pure tests — every formula is checked against its closed form.
"""

from __future__ import annotations

import pytest

from shipcalc.core.models import ShippingMethod, ShippingRate
from shipcalc.core.rates import SHIPPING_RATES, calculate_shipping_cost, describe_rate


_FORMULAS = {
    ShippingMethod.STANDARD: lambda w, d: w * 0.5 + d * 0.1,
    ShippingMethod.EXPRESS: lambda w, d: w * 0.75 + d * 0.2 + 10,
    ShippingMethod.INTERNATIONAL: lambda w, d: w * 1.0 + d * 0.5 + 15,
    ShippingMethod.NIGHT: lambda w, d: w * 0.75 + d * 0.2 + 20,
}


# ---------------------------------------------------------------------------
# Rate table
# ---------------------------------------------------------------------------

class TestRateTable:
    def test_every_method_has_a_rate(self) -> None:
        assert set(SHIPPING_RATES) == set(ShippingMethod)

    def test_table_mirrors_member_rates(self) -> None:
        for method in ShippingMethod:
            assert SHIPPING_RATES[method] is method.rate

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            SHIPPING_RATES[ShippingMethod.NIGHT] = ShippingRate(0, 0)  # type: ignore[index]

    def test_express_and_night_differ_only_by_surcharge(self) -> None:
        express = SHIPPING_RATES[ShippingMethod.EXPRESS]
        night = SHIPPING_RATES[ShippingMethod.NIGHT]
        assert (express.per_kg, express.per_km) == (night.per_kg, night.per_km)
        assert night.surcharge - express.surcharge == 10


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestCalculateShippingCost:
    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            (ShippingMethod.STANDARD, 7.0),
            (ShippingMethod.EXPRESS, 21.5),
            (ShippingMethod.INTERNATIONAL, 35.0),
            (ShippingMethod.NIGHT, 31.5),
        ],
    )
    def test_reference_parcel(self, method: ShippingMethod, expected: float) -> None:
        """10 kg over 20 km."""
        assert calculate_shipping_cost(method, 10, 20) == pytest.approx(expected)

    @pytest.mark.parametrize("method", list(ShippingMethod))
    @pytest.mark.parametrize(
        ("weight", "distance"),
        [(0.0, 0.0), (0.0, 150.0), (2.5, 0.0), (1.2, 3.4), (1000.0, 12000.0)],
    )
    def test_matches_linear_formula(
        self, method: ShippingMethod, weight: float, distance: float,
    ) -> None:
        expected = _FORMULAS[method](weight, distance)
        assert calculate_shipping_cost(method, weight, distance) == pytest.approx(expected)

    def test_zero_parcel_costs_only_the_surcharge(self) -> None:
        assert calculate_shipping_cost(ShippingMethod.STANDARD, 0, 0) == 0
        assert calculate_shipping_cost(ShippingMethod.NIGHT, 0, 0) == pytest.approx(20)


# ---------------------------------------------------------------------------
# describe_rate
# ---------------------------------------------------------------------------

class TestDescribeRate:
    def test_without_surcharge(self) -> None:
        text = describe_rate(SHIPPING_RATES[ShippingMethod.STANDARD])
        assert text == "weight x 0.5 + distance x 0.1"

    def test_with_surcharge(self) -> None:
        text = describe_rate(SHIPPING_RATES[ShippingMethod.EXPRESS])
        assert text == "weight x 0.75 + distance x 0.2 + 10"

    def test_whole_numbers_have_no_trailing_zero(self) -> None:
        text = describe_rate(SHIPPING_RATES[ShippingMethod.INTERNATIONAL])
        assert text == "weight x 1 + distance x 0.5 + 15"

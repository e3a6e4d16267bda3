"""Tests for straight-line amortization."""
from decimal import Decimal

import pytest

from property_income.core.amortization import (
    AVERAGE_AMORTIZATION_FIRST_WORKS_DURATION,
    AVERAGE_AMORTIZATION_PROPERTY_DURATION,
    annual_amortization,
)
from property_income.core.fiscal_year import InvalidInput


class TestAnnualAmortization:
    def test_property_over_33_years(self):
        """Bien acheté 165 000 € → 5 000 € / an."""
        assert annual_amortization(165000, AVERAGE_AMORTIZATION_PROPERTY_DURATION) == Decimal("5000")

    def test_first_works_over_20_years(self):
        assert annual_amortization(30000, AVERAGE_AMORTIZATION_FIRST_WORKS_DURATION) == Decimal("1500")

    def test_unrounded(self):
        """Pas d'arrondi : 100 000 / 33."""
        amount = annual_amortization(100000, AVERAGE_AMORTIZATION_PROPERTY_DURATION)
        assert amount == Decimal("100000") / Decimal("33")

    def test_zero_amount(self):
        assert annual_amortization(0, 20) == Decimal("0")

    def test_invalid_duration(self):
        with pytest.raises(InvalidInput):
            annual_amortization(1000, 0)

"""Tests for furnished rental (LMNP) net taxable income."""
from decimal import Decimal

import pytest

from property_income.core.fiscal_year import InvalidRegimen
from property_income.core.furnished_rental import (
    compute_net_taxable_income,
    gross_taxable_income,
    taxable_income_repartition,
)


def _simulation(**overrides):
    # 165 000 € / 33 ans = 5 000 €, 20 000 € / 20 ans = 1 000 €
    data = {
        "house_rent_amount_per_year": 20000,
        "house_price_bought_amount": 165000,
        "house_first_works_amount": 20000,
        "house_landlord_charges_amount_per_year": 2000,
        "house_property_tax_amount_per_year": 1000,
        "fiscal_regimen": "Réel",
    }
    data.update(overrides)
    return data


class TestFlatRate:
    def test_fifty_percent_allowance(self, catalog):
        """Micro-BIC : loyer 12 000 € → 6 000 € imposables."""
        simulation = {"house_rent_amount_per_year": 12000, "fiscal_regimen": "Forfait"}
        result = compute_net_taxable_income(simulation, 0, 1, catalog)
        assert result.net_taxable_amount == Decimal("6000")
        assert result.is_negative is False
        assert result.carry_forward_amount == Decimal("0")

    @pytest.mark.parametrize(
        "rent, expected",
        [(0, "0"), (0.5, "0.25"), (7350.5, "3675.25"), (12000, "6000"), (250000, "125000")],
    )
    @pytest.mark.parametrize("fiscal_year", [1, 2, 7])
    def test_allowance_for_any_rent(self, catalog, rent, expected, fiscal_year):
        simulation = _simulation(house_rent_amount_per_year=rent, fiscal_regimen="Forfait")
        result = compute_net_taxable_income(simulation, 3000, fiscal_year, catalog)
        assert result.net_taxable_amount == Decimal(expected)
        assert result.is_negative is False
        assert result.carry_forward_amount == Decimal("0")


class TestGrossTaxableIncome:
    def test_amortization_deducted(self, catalog):
        # 20 000 - 3 000 - 5 000 - 1 000
        assert gross_taxable_income(_simulation(), 0, 2, catalog) == Decimal("11000")

    def test_first_year_deducts_first_works(self, catalog):
        # 20 000 - 23 000 - 5 000 - 1 000
        assert gross_taxable_income(_simulation(), 0, 1, catalog) == Decimal("-9000")

    def test_carry_forward_in_deducted(self, catalog):
        assert gross_taxable_income(_simulation(), 1000, 2, catalog) == Decimal("10000")

    def test_missing_amortizable_amounts(self, catalog):
        simulation = {"house_rent_amount_per_year": 8000, "fiscal_regimen": "Réel"}
        assert gross_taxable_income(simulation, 0, 2, catalog) == Decimal("8000")


class TestActualExpense:
    def test_positive_result(self, catalog):
        result = compute_net_taxable_income(_simulation(), 0, 2, catalog)
        assert result.net_taxable_amount == Decimal("11000")
        assert result.is_negative is False
        assert result.carry_forward_amount == Decimal("0")

    def test_deficit_carried_forward(self, catalog):
        """Déficit de 5 000 € → 0 € imposable, 5 000 € reportés."""
        simulation = _simulation(
            house_rent_amount_per_year=10000,
            house_landlord_charges_amount_per_year=9000,
            house_property_tax_amount_per_year=0,
        )
        result = compute_net_taxable_income(simulation, 0, 2, catalog)
        assert result.net_taxable_amount == Decimal("0")
        assert result.is_negative is True
        assert result.carry_forward_amount == Decimal("5000")

    def test_unknown_regimen(self, catalog):
        with pytest.raises(InvalidRegimen):
            compute_net_taxable_income(_simulation(fiscal_regimen="reel"), 0, 2, catalog)


class TestRepartition:
    def test_zero_is_not_negative(self):
        result = taxable_income_repartition(Decimal("0"))
        assert result.net_taxable_amount == Decimal("0")
        assert result.is_negative is False
        assert result.carry_forward_amount == Decimal("0")

    def test_whole_deficit_deferred(self):
        result = taxable_income_repartition(Decimal("-5000"))
        assert result.net_taxable_amount == Decimal("0")
        assert result.is_negative is True
        assert result.carry_forward_amount == Decimal("5000")

    @pytest.mark.parametrize("gross", ["-25000.50", "-1", "0", "0.01", "18000"])
    def test_never_negative(self, gross):
        result = taxable_income_repartition(Decimal(gross))
        assert result.net_taxable_amount >= 0
        assert result.carry_forward_amount >= 0
        assert result.is_negative == (
            result.net_taxable_amount == 0 and result.carry_forward_amount > 0
        )

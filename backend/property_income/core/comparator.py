"""
Flat-rate vs actual-expense comparator.
Reference: CGI art. 32 (micro-foncier), art. 50-0 (micro-BIC), art. 156 (déficit foncier).
"""
from dataclasses import dataclass
from decimal import Decimal

from property_income.core.expenses import ExpenseCatalog
from property_income.core.fiscal_year import (
    FiscalRegimen,
    FiscalYearResult,
    RentalRegime,
    parse_rental_regime,
)
from property_income.core.regimes import compute_net_taxable_income


@dataclass
class RegimenComparison:
    fiscal_year: int
    regime: RentalRegime

    flat_rate: FiscalYearResult
    actual_expense: FiscalYearResult

    # positive = flat rate has the HIGHER taxable amount → actual expense better
    difference: Decimal
    recommended_regimen: FiscalRegimen


def compare_regimens(
    regime,
    simulation: dict,
    carry_forward_in,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> RegimenComparison:
    """
    Evaluate both fiscal regimens on the same simulation for one fiscal year.
    The simulation's own fiscal_regimen is ignored.
    """
    regime = parse_rental_regime(regime)

    flat_rate = compute_net_taxable_income(
        regime,
        {**simulation, "fiscal_regimen": FiscalRegimen.FLAT_RATE},
        carry_forward_in,
        fiscal_year,
        catalog,
    )
    actual_expense = compute_net_taxable_income(
        regime,
        {**simulation, "fiscal_regimen": FiscalRegimen.ACTUAL_EXPENSE},
        carry_forward_in,
        fiscal_year,
        catalog,
    )

    difference = flat_rate.net_taxable_amount - actual_expense.net_taxable_amount
    if difference > 0:
        recommended = FiscalRegimen.ACTUAL_EXPENSE
    else:
        recommended = FiscalRegimen.FLAT_RATE

    return RegimenComparison(
        fiscal_year=fiscal_year,
        regime=regime,
        flat_rate=flat_rate,
        actual_expense=actual_expense,
        difference=difference,
        recommended_regimen=recommended,
    )

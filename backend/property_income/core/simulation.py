"""
Multi-year chaining: each fiscal year consumes the previous year's
carry-forward, so years are computed strictly in order.
"""
import logging
from decimal import Decimal

from property_income.core.expenses import ExpenseCatalog
from property_income.core.fiscal_year import FiscalYearResult, InvalidInput, to_amount
from property_income.core.regimes import compute_net_taxable_income

logger = logging.getLogger(__name__)


def simulate_fiscal_years(
    regime,
    simulation: dict,
    fiscal_years: int,
    catalog: ExpenseCatalog,
    initial_carry_forward=Decimal("0"),
) -> dict[str, FiscalYearResult]:
    """
    Compute fiscal years 1..fiscal_years.

    Returns {"fiscal_year1": FiscalYearResult, "fiscal_year2": ...} in order.
    """
    if fiscal_years < 1:
        raise InvalidInput(f"Le nombre d'exercices doit être >= 1 (reçu {fiscal_years}).")

    results: dict[str, FiscalYearResult] = {}
    carry_forward = to_amount(initial_carry_forward)
    for fiscal_year in range(1, fiscal_years + 1):
        result = compute_net_taxable_income(
            regime, simulation, carry_forward, fiscal_year, catalog
        )
        results[f"fiscal_year{fiscal_year}"] = result
        carry_forward = result.carry_forward_amount

    logger.debug(
        "Simulated %d fiscal years, final carry-forward %s", fiscal_years, carry_forward
    )
    return results

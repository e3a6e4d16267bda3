"""
Net taxable property income for furnished rental (LMNP).

Flat-rate regimen (micro-BIC): 50 % allowance on rent.
Actual-expense regimen (réel): rent minus deductible expenses and the
amortization of the property and first works. A deficit is never reported;
it is carried forward in full.
"""
import logging
from decimal import Decimal

from property_income.core.amortization import (
    AVERAGE_AMORTIZATION_FIRST_WORKS_DURATION,
    AVERAGE_AMORTIZATION_PROPERTY_DURATION,
    annual_amortization,
)
from property_income.core.expenses import ExpenseCatalog, deductible_expenses_sum
from property_income.core.fiscal_year import (
    FiscalRegimen,
    FiscalYearResult,
    check_fiscal_year,
    parse_fiscal_regimen,
    rent_amount,
    to_amount,
)

logger = logging.getLogger(__name__)

PROPERTY_INCOME_STANDARD_ALLOWANCE = Decimal("0.5")


def compute_net_taxable_income(
    simulation: dict,
    carry_forward_in,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> FiscalYearResult:
    regimen = parse_fiscal_regimen(simulation.get("fiscal_regimen"))
    check_fiscal_year(fiscal_year)
    logger.debug("Furnished rental, regimen %s, fiscal year %d", regimen.value, fiscal_year)

    return REGIMENS[regimen](simulation, carry_forward_in, fiscal_year, catalog)


def flat_rate_net_taxable_income(simulation: dict) -> FiscalYearResult:
    rent = rent_amount(simulation)
    return FiscalYearResult(
        net_taxable_amount=rent * (Decimal("1") - PROPERTY_INCOME_STANDARD_ALLOWANCE),
        is_negative=False,
        carry_forward_amount=Decimal("0"),
    )


def gross_taxable_income(
    simulation: dict,
    carry_forward_in,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> Decimal:
    """rent - deductible expenses - amortizations - previous carry-forward."""
    deductible_expenses = deductible_expenses_sum(simulation, fiscal_year, catalog)
    amortization_property = annual_amortization(
        simulation.get("house_price_bought_amount") or 0,
        AVERAGE_AMORTIZATION_PROPERTY_DURATION,
    )
    amortization_first_works = annual_amortization(
        simulation.get("house_first_works_amount") or 0,
        AVERAGE_AMORTIZATION_FIRST_WORKS_DURATION,
    )
    return (
        rent_amount(simulation)
        - deductible_expenses
        - amortization_property
        - amortization_first_works
        - to_amount(carry_forward_in)
    )


def actual_expense_net_taxable_income(
    simulation: dict,
    carry_forward_in,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> FiscalYearResult:
    gross = gross_taxable_income(simulation, carry_forward_in, fiscal_year, catalog)
    return taxable_income_repartition(gross)


def taxable_income_repartition(gross: Decimal) -> FiscalYearResult:
    if gross >= 0:
        return FiscalYearResult(
            net_taxable_amount=gross,
            is_negative=False,
            carry_forward_amount=Decimal("0"),
        )
    logger.debug("Repartition: deficit %s carried forward", -gross)
    return FiscalYearResult(
        net_taxable_amount=Decimal("0"),
        is_negative=True,
        carry_forward_amount=abs(gross),
    )


REGIMENS = {
    FiscalRegimen.FLAT_RATE: lambda simulation, carry_forward_in, fiscal_year, catalog: (
        flat_rate_net_taxable_income(simulation)
    ),
    FiscalRegimen.ACTUAL_EXPENSE: actual_expense_net_taxable_income,
}

"""
Net taxable property income for bare rental (location nue).

Flat-rate regimen (micro-foncier): 30 % allowance on rent.
Actual-expense regimen (réel): rent minus deductible expenses, with the
negative amount capped at 10 700 € and the remainder carried forward.
Loan interest is excluded from the capped deduction when it exceeds rent.
"""
import logging
from decimal import Decimal

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

PROPERTY_INCOME_STANDARD_ALLOWANCE = Decimal("0.3")
CAPPED_NEGATIVE_NET_TAXABLE_INCOME_AMOUNT = Decimal("10700")


def compute_net_taxable_income(
    simulation: dict,
    carry_forward_in,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> FiscalYearResult:
    regimen = parse_fiscal_regimen(simulation.get("fiscal_regimen"))
    check_fiscal_year(fiscal_year)
    logger.debug("Bare rental, regimen %s, fiscal year %d", regimen.value, fiscal_year)

    return REGIMENS[regimen](simulation, carry_forward_in, fiscal_year, catalog)


def flat_rate_net_taxable_income(simulation: dict) -> FiscalYearResult:
    rent = rent_amount(simulation)
    return FiscalYearResult(
        net_taxable_amount=rent * (Decimal("1") - PROPERTY_INCOME_STANDARD_ALLOWANCE),
        is_negative=False,
        carry_forward_amount=Decimal("0"),
    )


def actual_expense_net_taxable_income(
    simulation: dict,
    carry_forward_in,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> FiscalYearResult:
    rent = rent_amount(simulation)
    deductible_expenses = deductible_expenses_sum(simulation, fiscal_year, catalog)
    net_amount = rent - deductible_expenses - to_amount(carry_forward_in)
    return taxable_income_repartition(simulation, net_amount)


def taxable_income_repartition(simulation: dict, net_amount: Decimal) -> FiscalYearResult:
    """
    Cap the negative taxable amount and compute what is carried forward.

    The cap is compared as a positive magnitude against the pre-cap amount
    and applied as -CAP. When rent exceeds loan interest every expense is
    deducted this year; otherwise loan interest is carried forward.
    """
    cap = CAPPED_NEGATIVE_NET_TAXABLE_INCOME_AMOUNT
    rent = rent_amount(simulation)
    loan_interest = to_amount(
        simulation.get("credit_loan_cumulative_interests_paid_for_year_two") or 0
    )
    rent_minus_loan_interest = rent - loan_interest

    # D == 0 follows the "rent covers interest" branches
    if rent_minus_loan_interest >= 0:
        if net_amount >= cap:
            logger.debug("Repartition: uncapped amount %s", net_amount)
            return FiscalYearResult(
                net_taxable_amount=net_amount,
                is_negative=net_amount < 0,
                carry_forward_amount=Decimal("0"),
            )
        logger.debug("Repartition: capped at -%s, pre-cap amount %s", cap, net_amount)
        return FiscalYearResult(
            net_taxable_amount=-cap,
            is_negative=True,
            carry_forward_amount=abs(net_amount + cap),
        )

    if net_amount >= cap:
        logger.debug("Repartition: loan interest %s carried forward", loan_interest)
        return FiscalYearResult(
            net_taxable_amount=net_amount,
            is_negative=True,
            carry_forward_amount=loan_interest,
        )
    if net_amount + loan_interest < cap:
        logger.debug("Repartition: capped at -%s, pre-cap amount %s", cap, net_amount)
        return FiscalYearResult(
            net_taxable_amount=-cap,
            is_negative=True,
            carry_forward_amount=abs(net_amount + cap),
        )
    # net_amount + loan_interest == cap lands here
    logger.debug("Repartition: loan interest %s set aside and carried forward", loan_interest)
    return FiscalYearResult(
        net_taxable_amount=net_amount + loan_interest,
        is_negative=True,
        carry_forward_amount=loan_interest,
    )


REGIMENS = {
    FiscalRegimen.FLAT_RATE: lambda simulation, carry_forward_in, fiscal_year, catalog: (
        flat_rate_net_taxable_income(simulation)
    ),
    FiscalRegimen.ACTUAL_EXPENSE: actual_expense_net_taxable_income,
}

from property_income.core.expenses import ExpenseCatalog, deductible_expenses_sum
from property_income.core.fiscal_year import (
    FiscalRegimen,
    FiscalYearResult,
    InvalidInput,
    InvalidRegimen,
    PropertyIncomeError,
    RentalRegime,
)
from property_income.core.regimes import compute_net_taxable_income
from property_income.core.simulation import simulate_fiscal_years

__all__ = [
    "ExpenseCatalog",
    "FiscalRegimen",
    "FiscalYearResult",
    "InvalidInput",
    "InvalidRegimen",
    "PropertyIncomeError",
    "RentalRegime",
    "compute_net_taxable_income",
    "deductible_expenses_sum",
    "simulate_fiscal_years",
]

"""
Straight-line amortization for furnished rental (LMNP).
Each fiscal year is recomputed from the original amounts; no cumulative
amortization is tracked here.
"""
from decimal import Decimal

from property_income.core.fiscal_year import InvalidInput, to_amount

AVERAGE_AMORTIZATION_PROPERTY_DURATION = Decimal("33.0")
AVERAGE_AMORTIZATION_FIRST_WORKS_DURATION = Decimal("20.0")


def annual_amortization(amount, duration_years) -> Decimal:
    """Return amount / duration_years, unrounded."""
    duration = to_amount(duration_years)
    if duration <= 0:
        raise InvalidInput(f"La durée d'amortissement doit être positive (reçu {duration_years}).")
    return to_amount(amount) / duration

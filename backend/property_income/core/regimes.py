"""
Dispatch between the bare rental and furnished rental families.
"""
import logging

from property_income.core import bare_rental, furnished_rental
from property_income.core.expenses import ExpenseCatalog
from property_income.core.fiscal_year import FiscalYearResult, RentalRegime, parse_rental_regime

logger = logging.getLogger(__name__)

_FAMILIES = {
    RentalRegime.BARE: bare_rental.compute_net_taxable_income,
    RentalRegime.FURNISHED: furnished_rental.compute_net_taxable_income,
}


def compute_net_taxable_income(
    regime,
    simulation: dict,
    carry_forward_in,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> FiscalYearResult:
    """
    Compute one fiscal year for the given rental regime ('Nue' | 'Lmnp').
    Raises InvalidRegimen for an unknown regime or fiscal regimen.
    """
    regime = parse_rental_regime(regime)
    logger.debug("Dispatching fiscal year %s to %s rental", fiscal_year, regime.value)
    family = _FAMILIES[regime]
    return family(simulation, carry_forward_in, fiscal_year, catalog)

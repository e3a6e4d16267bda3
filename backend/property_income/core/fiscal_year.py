"""
Shared types for the net taxable property income computation.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class FiscalRegimen(str, Enum):
    FLAT_RATE = "Forfait"
    ACTUAL_EXPENSE = "Réel"


class RentalRegime(str, Enum):
    BARE = "Nue"
    FURNISHED = "Lmnp"


class PropertyIncomeError(ValueError):
    pass


class InvalidRegimen(PropertyIncomeError):
    """Unknown fiscal regimen or rental regime."""


class InvalidInput(PropertyIncomeError):
    """Input outside the domain the computation accepts."""


@dataclass(frozen=True)
class FiscalYearResult:
    """Net taxable property income of one property / one fiscal year."""

    net_taxable_amount: Decimal
    is_negative: bool
    carry_forward_amount: Decimal  # always >= 0, fed into next fiscal year


def to_amount(value) -> Decimal:
    return Decimal(str(value))


def parse_fiscal_regimen(value) -> FiscalRegimen:
    if isinstance(value, FiscalRegimen):
        return value
    try:
        return FiscalRegimen(value)
    except ValueError:
        raise InvalidRegimen(f"Régime fiscal inconnu : {value!r}.") from None


def parse_rental_regime(value) -> RentalRegime:
    if isinstance(value, RentalRegime):
        return value
    try:
        return RentalRegime(value)
    except ValueError:
        raise InvalidRegimen(f"Régime de location inconnu : {value!r}.") from None


def rent_amount(simulation: dict) -> Decimal:
    if simulation.get("house_rent_amount_per_year") is None:
        raise InvalidInput("Le loyer annuel (house_rent_amount_per_year) est requis.")
    return to_amount(simulation["house_rent_amount_per_year"])


def check_fiscal_year(fiscal_year: int) -> None:
    if fiscal_year < 1:
        raise InvalidInput(f"L'exercice fiscal doit être >= 1 (reçu {fiscal_year}).")

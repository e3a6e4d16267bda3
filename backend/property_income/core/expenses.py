"""
Deductible expenses aggregation for the actual-expense (réel) regimen.
The list of deductible fields is an external catalog split between the first
fiscal year of ownership and every following year.
"""
from dataclasses import dataclass
from decimal import Decimal

from property_income.core.fiscal_year import InvalidInput, check_fiscal_year, to_amount


@dataclass(frozen=True)
class ExpenseCatalog:
    fiscal_year1: tuple[str, ...]
    fiscal_year2: tuple[str, ...]

    @classmethod
    def from_mapping(cls, mapping: dict) -> "ExpenseCatalog":
        """
        Accepts {"fiscalYear1": [...], "fiscalYear2": [...]} or the snake_case
        keys used by the YAML constants file.
        """
        try:
            year1 = mapping.get("fiscalYear1", mapping.get("fiscal_year1"))
            year2 = mapping.get("fiscalYear2", mapping.get("fiscal_year2"))
        except AttributeError:
            raise InvalidInput("Le catalogue de charges doit être un dictionnaire.") from None
        if year1 is None or year2 is None:
            raise InvalidInput(
                "Le catalogue de charges doit définir fiscalYear1 et fiscalYear2."
            )
        return cls(fiscal_year1=tuple(year1), fiscal_year2=tuple(year2))

    def fields_for(self, fiscal_year: int) -> tuple[str, ...]:
        check_fiscal_year(fiscal_year)
        return self.fiscal_year1 if fiscal_year == 1 else self.fiscal_year2

    def to_dict(self) -> dict:
        return {"fiscalYear1": list(self.fiscal_year1), "fiscalYear2": list(self.fiscal_year2)}


def deductible_expenses_sum(
    simulation: dict,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> Decimal:
    """Sum of the catalog fields for this fiscal year; absent fields count 0."""
    return sum(
        (to_amount(simulation.get(name) or 0) for name in catalog.fields_for(fiscal_year)),
        Decimal("0"),
    )

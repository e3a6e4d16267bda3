"""
Simulation validation and suggestions engine.
Checks inputs before computing and offers optimisation hints.
"""
from dataclasses import dataclass, field
from decimal import Decimal

from property_income.core.expenses import ExpenseCatalog, deductible_expenses_sum
from property_income.core.fiscal_year import (
    FiscalRegimen,
    InvalidRegimen,
    RentalRegime,
    parse_fiscal_regimen,
    parse_rental_regime,
    to_amount,
)

AMOUNT_FIELDS = (
    "house_rent_amount_per_year",
    "house_price_bought_amount",
    "house_first_works_amount",
    "house_landlord_charges_amount_per_year",
    "house_property_management_amount_per_year",
    "house_insurance_gli_amount_per_year",
    "house_insurance_pno_amount_per_year",
    "house_property_tax_amount_per_year",
    "credit_loan_cumulative_interests_paid_for_year_two",
    "credit_loan_insurance_amount_per_year",
)

FLAT_RATE_ALLOWANCES = {
    RentalRegime.BARE: Decimal("0.3"),
    RentalRegime.FURNISHED: Decimal("0.5"),
}


@dataclass
class ValidationIssue:
    level: str  # 'error' | 'warning' | 'info'
    code: str
    message: str
    field: str | None = None
    cgi_ref: str | None = None


@dataclass
class ValidationResult:
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.level == "error" for i in self.issues)

    @property
    def errors(self):
        return [i for i in self.issues if i.level == "error"]

    @property
    def warnings(self):
        return [i for i in self.issues if i.level == "warning"]

    @property
    def suggestions(self):
        return [i for i in self.issues if i.level == "info"]


def validate_simulation(
    regime,
    simulation: dict,
    fiscal_year: int,
    catalog: ExpenseCatalog,
) -> ValidationResult:
    result = ValidationResult()

    # 1. Rent is required
    if simulation.get("house_rent_amount_per_year") is None:
        result.issues.append(
            ValidationIssue(
                level="error",
                code="MISSING_RENT",
                message="Le loyer annuel est requis.",
                field="house_rent_amount_per_year",
            )
        )

    # 2. Negative amounts
    for name in AMOUNT_FIELDS:
        value = simulation.get(name)
        if value is not None and to_amount(value) < 0:
            result.issues.append(
                ValidationIssue(
                    level="error",
                    code="NEGATIVE_AMOUNT",
                    message=f"Montant négatif détecté : {value} €.",
                    field=name,
                )
            )

    # 3. Fiscal year index
    if fiscal_year < 1:
        result.issues.append(
            ValidationIssue(
                level="error",
                code="INVALID_FISCAL_YEAR",
                message=f"L'exercice fiscal doit être >= 1 (reçu {fiscal_year}).",
                field="fiscal_year",
            )
        )

    # 4. Regime and regimen
    regimen = None
    try:
        regime = parse_rental_regime(regime)
        regimen = parse_fiscal_regimen(simulation.get("fiscal_regimen"))
    except InvalidRegimen as e:
        result.issues.append(
            ValidationIssue(
                level="error",
                code="INVALID_REGIMEN",
                message=str(e),
                field="fiscal_regimen",
            )
        )

    # Remaining checks need a usable fiscal year
    if fiscal_year < 1:
        return result

    # 5. Catalog fields missing from the simulation
    missing = [name for name in catalog.fields_for(fiscal_year) if name not in simulation]
    if missing:
        result.issues.append(
            ValidationIssue(
                level="warning",
                code="UNKNOWN_CATALOG_FIELD",
                message=(
                    f"Charges non renseignées, comptées pour 0 € : {', '.join(missing)}."
                ),
                field="expense_catalog",
            )
        )

    if result.has_errors:
        return result

    rent = to_amount(simulation["house_rent_amount_per_year"])
    expenses = deductible_expenses_sum(simulation, fiscal_year, catalog)

    # 6. Charges > 300 % of rent
    if rent > 0:
        ratio = expenses / rent
        if ratio > Decimal("3"):
            result.issues.append(
                ValidationIssue(
                    level="warning",
                    code="EXPENSES_HIGH_RATIO",
                    message=(
                        f"Les charges ({expenses:.2f} €) représentent "
                        f"{ratio * 100:.0f} % des loyers. "
                        "Vérifiez qu'aucune charge n'est doublement saisie."
                    ),
                    field="expenses",
                )
            )

    # 7. Suggest the actual-expense regimen
    allowance = rent * FLAT_RATE_ALLOWANCES[regime]
    if regimen is FiscalRegimen.FLAT_RATE and expenses > allowance:
        result.issues.append(
            ValidationIssue(
                level="info",
                code="SUGGEST_ACTUAL_EXPENSE",
                message=(
                    f"Optimisation : vos charges déductibles ({expenses:.2f} €) dépassent "
                    f"l'abattement forfaitaire ({allowance:.2f} €). "
                    "Le régime réel pourrait être plus avantageux."
                ),
                cgi_ref="art. 32 CGI" if regime is RentalRegime.BARE else "art. 50-0 CGI",
            )
        )

    return result

"""
Fiscal API: net taxable property income per fiscal year, multi-year
simulation, regimen comparison and input validation.
"""
import logging
import math

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from property_income.core.comparator import compare_regimens
from property_income.core.expenses import ExpenseCatalog
from property_income.core.fiscal_year import FiscalYearResult, PropertyIncomeError
from property_income.core.regimes import compute_net_taxable_income
from property_income.core.simulation import simulate_fiscal_years
from property_income.core.validator import validate_simulation
from property_income.utils.fiscal_loader import get_expense_catalog

logger = logging.getLogger(__name__)

router = APIRouter()


class SimulationPayload(BaseModel):
    house_rent_amount_per_year: float
    house_price_bought_amount: float = 0
    house_first_works_amount: float = 0
    house_landlord_charges_amount_per_year: float = 0
    house_property_management_amount_per_year: float = 0
    house_insurance_gli_amount_per_year: float = 0
    house_insurance_pno_amount_per_year: float = 0
    house_property_tax_amount_per_year: float = 0
    credit_loan_cumulative_interests_paid_for_year_two: float = 0
    credit_loan_insurance_amount_per_year: float = 0
    fiscal_regimen: str

    @field_validator(
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
    @classmethod
    def positive_values(cls, v):
        if not math.isfinite(v):
            raise ValueError("Les montants doivent être des nombres finis.")
        if v < 0:
            raise ValueError("Les montants doivent être positifs.")
        return v


class ExpenseCatalogPayload(BaseModel):
    fiscalYear1: list[str]
    fiscalYear2: list[str]


class NetTaxableIncomeRequest(BaseModel):
    regime: str  # 'Nue' | 'Lmnp'
    simulation: SimulationPayload
    carry_forward_in: float = 0
    fiscal_year: int = 1
    expense_catalog: ExpenseCatalogPayload | None = None

    @field_validator("carry_forward_in")
    @classmethod
    def positive_carry_forward(cls, v):
        if not math.isfinite(v):
            raise ValueError("Les montants doivent être des nombres finis.")
        if v < 0:
            raise ValueError("Le report doit être positif.")
        return v

    @field_validator("fiscal_year")
    @classmethod
    def valid_fiscal_year(cls, v):
        if v < 1:
            raise ValueError("L'exercice fiscal doit être >= 1.")
        return v


class SimulateRequest(BaseModel):
    regime: str
    simulation: SimulationPayload
    fiscal_years: int
    initial_carry_forward: float = 0
    expense_catalog: ExpenseCatalogPayload | None = None

    @field_validator("fiscal_years")
    @classmethod
    def valid_fiscal_years(cls, v):
        if v < 1:
            raise ValueError("Le nombre d'exercices doit être >= 1.")
        return v

    @field_validator("initial_carry_forward")
    @classmethod
    def positive_carry_forward(cls, v):
        if not math.isfinite(v):
            raise ValueError("Les montants doivent être des nombres finis.")
        if v < 0:
            raise ValueError("Le report doit être positif.")
        return v


def _catalog(payload: ExpenseCatalogPayload | None) -> ExpenseCatalog:
    if payload is None:
        return get_expense_catalog()
    return ExpenseCatalog.from_mapping(payload.model_dump())


def _result_dict(result: FiscalYearResult) -> dict:
    return {
        "net_taxable_amount": float(result.net_taxable_amount),
        "is_negative": result.is_negative,
        "carry_forward_amount": float(result.carry_forward_amount),
    }


@router.get("/deductible-expenses")
def get_deductible_expenses():
    return get_expense_catalog().to_dict()


@router.post("/net-taxable-income")
def get_net_taxable_income(data: NetTaxableIncomeRequest):
    try:
        result = compute_net_taxable_income(
            data.regime,
            data.simulation.model_dump(),
            data.carry_forward_in,
            data.fiscal_year,
            _catalog(data.expense_catalog),
        )
    except PropertyIncomeError as e:
        logger.info("Rejected net taxable income request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {"regime": data.regime, "fiscal_year": data.fiscal_year, **_result_dict(result)}


@router.post("/simulate")
def simulate(data: SimulateRequest):
    try:
        results = simulate_fiscal_years(
            data.regime,
            data.simulation.model_dump(),
            data.fiscal_years,
            _catalog(data.expense_catalog),
            initial_carry_forward=data.initial_carry_forward,
        )
    except PropertyIncomeError as e:
        logger.info("Rejected simulation request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {
        "regime": data.regime,
        "fiscal_years": {key: _result_dict(r) for key, r in results.items()},
    }


@router.post("/compare")
def compare(data: NetTaxableIncomeRequest):
    try:
        result = compare_regimens(
            data.regime,
            data.simulation.model_dump(),
            data.carry_forward_in,
            data.fiscal_year,
            _catalog(data.expense_catalog),
        )
    except PropertyIncomeError as e:
        logger.info("Rejected comparison request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {
        "regime": result.regime.value,
        "fiscal_year": result.fiscal_year,
        "flat_rate": _result_dict(result.flat_rate),
        "actual_expense": _result_dict(result.actual_expense),
        "flat_rate_vs_actual_expense_difference": float(result.difference),
        "recommended_regimen": result.recommended_regimen.value,
        "explanation": (
            f"Le régime réel permet d'imposer {float(result.actual_expense.net_taxable_amount):,.2f} € "
            f"vs {float(result.flat_rate.net_taxable_amount):,.2f} € au forfait. "
            f"Recommandation : {result.recommended_regimen.value.upper()}."
        ),
    }


@router.post("/validate")
def validate(data: NetTaxableIncomeRequest):
    try:
        result = validate_simulation(
            data.regime,
            # omitted amounts must stay absent to be reported
            data.simulation.model_dump(exclude_unset=True),
            data.fiscal_year,
            _catalog(data.expense_catalog),
        )
    except PropertyIncomeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {
        "has_errors": result.has_errors,
        "issues": [
            {
                "level": i.level,
                "code": i.code,
                "message": i.message,
                "field": i.field,
                "cgi_ref": i.cgi_ref,
            }
            for i in result.issues
        ],
    }

import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Set env vars BEFORE any app imports
_constants_path = Path(__file__).parent.parent / "property_income" / "fiscal_constants"
os.environ["FISCAL_CONSTANTS_PATH"] = str(_constants_path)

from property_income.core.expenses import ExpenseCatalog  # noqa: E402
from property_income.main import app  # noqa: E402


@pytest.fixture
def catalog():
    return ExpenseCatalog.from_mapping(
        {
            "fiscalYear1": [
                "house_first_works_amount",
                "house_landlord_charges_amount_per_year",
                "house_property_tax_amount_per_year",
                "credit_loan_cumulative_interests_paid_for_year_two",
            ],
            "fiscalYear2": [
                "house_landlord_charges_amount_per_year",
                "house_property_tax_amount_per_year",
                "credit_loan_cumulative_interests_paid_for_year_two",
            ],
        }
    )


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c

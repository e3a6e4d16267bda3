import copy
import os
from pathlib import Path

import yaml

from property_income.core.expenses import ExpenseCatalog

DEDUCTIBLE_EXPENSES_FILE = "deductible_expenses.yaml"


def _constants_path() -> Path:
    """Read FISCAL_CONSTANTS_PATH at call time (supports env var changes in tests)."""
    default = Path(__file__).parent.parent / "fiscal_constants"
    return Path(os.getenv("FISCAL_CONSTANTS_PATH", str(default)))


# Simple dict cache keyed by file path to support test env var overrides
_cache: dict[str, dict] = {}


def load_fiscal_constants(filename: str = DEDUCTIBLE_EXPENSES_FILE) -> dict:
    target = _constants_path() / filename
    cache_key = str(target)
    if cache_key in _cache:
        return copy.deepcopy(_cache[cache_key])

    if not target.exists():
        raise FileNotFoundError(f"No fiscal constants found at {target}")

    with open(target, encoding="utf-8") as f:
        result = yaml.safe_load(f) or {}
    _cache[cache_key] = result
    return copy.deepcopy(result)


def get_expense_catalog() -> ExpenseCatalog:
    return ExpenseCatalog.from_mapping(load_fiscal_constants().get("deductible_expenses", {}))

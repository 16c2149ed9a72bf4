from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Directory holding config.yaml (this package)
BASE_DIR = Path(__file__).resolve().parent
CONFIG_PATH = BASE_DIR / "config.yaml"


def _load_yaml(path: Path = CONFIG_PATH) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()

# Loan (percentages are whole numbers: 7.0 means 7%)
INTEREST_RATE: float = float(CFG.get("interest_rate", 7.0))
LOAN_TERM_YEARS: int = int(CFG.get("loan_term_years", 30))
DOWN_PAYMENT_PCT: float = float(CFG.get("down_payment_pct", 20.0))

# Monthly fixed costs
MONTHLY_PROPERTY_TAX: float = float(CFG.get("monthly_property_tax", 0.0))
MONTHLY_INSURANCE: float = float(CFG.get("monthly_insurance", 0.0))
MONTHLY_HOA: float = float(CFG.get("monthly_hoa", 0.0))

# Rent-proportional costs
MAINTENANCE_PCT: float = float(CFG.get("maintenance_pct", 5.0))
VACANCY_RATE: float = float(CFG.get("vacancy_rate", 5.0))
MANAGEMENT_PCT: float = float(CFG.get("management_pct", 0.0))

PROPERTY_TYPE: str = str(CFG.get("property_type", "single-family"))

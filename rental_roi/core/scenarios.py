from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from . import config
from .amortization import LoanDetails, down_payment_amount, loan_amount_from_price, loan_details
from .grading import (
    STATUS_THRESHOLDS,
    Grade,
    cash_flow_risk,
    classify_dscr,
    grade_label,
    investment_grade,
    investment_score,
    maintenance_assumption,
    metric_status,
    vacancy_assumption,
)
from .model import (
    PROPERTY_TYPES,
    InvestmentMetrics,
    Property,
    dscr,
    investment_metrics,
    one_percent_rule,
    passes_one_percent_rule,
)
from .utils import MONTHS_IN_YEAR, percent, usd


logger = logging.getLogger(__name__)

__all__ = [
    "compute_metrics",
    "compute_loan_details",
    "compute_grade",
    "one_percent_rule",
    "dscr",
    "PropertyAnalysis",
    "analyze_property",
    "format_analysis",
    "build_property",
    "validate_property",
]

_NON_NEGATIVE_FIELDS = (
    "purchase_price",
    "market_value",
    "monthly_rent",
    "down_payment",
    "loan_amount",
    "interest_rate",
    "monthly_property_tax",
    "monthly_insurance",
    "monthly_hoa",
    "maintenance_pct",
    "vacancy_rate",
    "management_pct",
)
_DETAIL_FIELDS = (
    "address",
    "city",
    "state",
    "zip_code",
    "property_type",
    "bedrooms",
    "bathrooms",
    "date_added",
    "notes",
)


def compute_metrics(prop: Property) -> InvestmentMetrics:
    return investment_metrics(prop)


def compute_loan_details(loan_amount: float, rate_pct: float, term_years: int) -> LoanDetails:
    return loan_details(loan_amount, rate_pct, term_years)


def compute_grade(metrics: InvestmentMetrics) -> Grade:
    return investment_grade(metrics)


@dataclass(frozen=True)
class PropertyAnalysis:
    property: Property
    metrics: InvestmentMetrics
    loan: LoanDetails
    grade: Grade
    score: int
    one_percent: float
    passes_one_percent: bool
    dscr: float
    dscr_class: str
    cash_flow_risk: str
    vacancy_assumption: str
    maintenance_assumption: str


def analyze_property(prop: Property) -> PropertyAnalysis:
    """Everything the analysis view shows for one property, computed fresh."""
    metrics = investment_metrics(prop)
    one_pct = one_percent_rule(prop.monthly_rent, prop.purchase_price)
    ratio = dscr(metrics.annual_net_operating_income, metrics.monthly_mortgage_payment * MONTHS_IN_YEAR)
    return PropertyAnalysis(
        property=prop,
        metrics=metrics,
        loan=loan_details(prop.loan_amount, prop.interest_rate, prop.loan_term_years),
        grade=investment_grade(metrics),
        score=investment_score(metrics),
        one_percent=one_pct,
        passes_one_percent=passes_one_percent_rule(prop.monthly_rent, prop.purchase_price),
        dscr=ratio,
        dscr_class=classify_dscr(ratio),
        cash_flow_risk=cash_flow_risk(metrics.net_monthly_cash_flow),
        vacancy_assumption=vacancy_assumption(prop.vacancy_rate),
        maintenance_assumption=maintenance_assumption(prop.maintenance_pct),
    )


def _with_status(text: str, value: float, metric: str) -> str:
    good, fair = STATUS_THRESHOLDS[metric]
    return f"{text} ({metric_status(value, good, fair)})"


def format_analysis(analysis: PropertyAnalysis) -> Dict[str, str]:
    m = analysis.metrics
    return {
        "Grade": f"{analysis.grade.value} ({grade_label(analysis.grade)})",
        "Monthly cash flow": _with_status(usd(m.net_monthly_cash_flow), m.net_monthly_cash_flow, "net_monthly_cash_flow"),
        "Mortgage payment": usd(m.monthly_mortgage_payment),
        "Operating expenses": usd(m.monthly_operating_expenses),
        "Break-even rent": usd(m.break_even_rent),
        "Cap rate": _with_status(percent(m.cap_rate), m.cap_rate, "cap_rate"),
        "Cash-on-cash return": _with_status(percent(m.cash_on_cash_return), m.cash_on_cash_return, "cash_on_cash_return"),
        "Total ROI": _with_status(percent(m.total_roi), m.total_roi, "total_roi"),
        "1% rule": f"{percent(analysis.one_percent)} ({'passes' if analysis.passes_one_percent else 'fails'})",
        "DSCR": f"{analysis.dscr:.2f} ({analysis.dscr_class})",
    }


# ------------------------- Building inputs ------------------------- #
def validate_property(prop: Property) -> Property:
    """Raise ValueError listing every out-of-range field; return the property otherwise.

    The calculation functions never call this: they return 0 for degenerate
    ratios instead of failing.
    """
    problems: List[str] = [
        f"{name} must be >= 0 (got {getattr(prop, name)})"
        for name in _NON_NEGATIVE_FIELDS
        if getattr(prop, name) < 0
    ]
    if prop.loan_term_years <= 0:
        problems.append(f"loan_term_years must be > 0 (got {prop.loan_term_years})")
    if prop.property_type not in PROPERTY_TYPES:
        problems.append(f"property_type must be one of {', '.join(PROPERTY_TYPES)} (got {prop.property_type!r})")
    if problems:
        raise ValueError("Invalid property: " + "; ".join(problems))
    return prop


def _default(value: Optional[Any], fallback: Any) -> Any:
    return fallback if value is None else value


def build_property(
    purchase_price: float,
    monthly_rent: float,
    *,
    market_value: Optional[float] = None,
    down_payment: Optional[float] = None,
    down_payment_pct: Optional[float] = None,
    interest_rate: Optional[float] = None,
    loan_term_years: Optional[int] = None,
    monthly_property_tax: Optional[float] = None,
    monthly_insurance: Optional[float] = None,
    monthly_hoa: Optional[float] = None,
    maintenance_pct: Optional[float] = None,
    vacancy_rate: Optional[float] = None,
    management_pct: Optional[float] = None,
    **details: Any,
) -> Property:
    """Build a validated Property the way the entry form does.

    Missing assumptions come from config.yaml. The market value defaults to
    the purchase price and the loan covers whatever the down payment does not.
    An explicit down payment wins over ``down_payment_pct``.
    """
    unknown = sorted(set(details) - set(_DETAIL_FIELDS))
    if unknown:
        raise ValueError(f"Unknown property fields: {', '.join(unknown)}")

    if down_payment is None:
        pct = _default(down_payment_pct, config.DOWN_PAYMENT_PCT)
        down_payment = down_payment_amount(purchase_price, pct)

    details.setdefault("property_type", config.PROPERTY_TYPE)
    prop = Property(
        purchase_price=purchase_price,
        market_value=_default(market_value, purchase_price),
        monthly_rent=monthly_rent,
        down_payment=down_payment,
        loan_amount=loan_amount_from_price(purchase_price, down_payment),
        interest_rate=_default(interest_rate, config.INTEREST_RATE),
        loan_term_years=_default(loan_term_years, config.LOAN_TERM_YEARS),
        monthly_property_tax=_default(monthly_property_tax, config.MONTHLY_PROPERTY_TAX),
        monthly_insurance=_default(monthly_insurance, config.MONTHLY_INSURANCE),
        monthly_hoa=_default(monthly_hoa, config.MONTHLY_HOA),
        maintenance_pct=_default(maintenance_pct, config.MAINTENANCE_PCT),
        vacancy_rate=_default(vacancy_rate, config.VACANCY_RATE),
        management_pct=_default(management_pct, config.MANAGEMENT_PCT),
        **details,
    )
    logger.debug(
        "Built property at %s: price %.2f, down %.2f, loan %.2f",
        prop.address or "<unnamed>", prop.purchase_price, prop.down_payment, prop.loan_amount,
    )
    return validate_property(prop)

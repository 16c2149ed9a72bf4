from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from typing import Optional

from .amortization import break_even_rent, monthly_payment
from .utils import MONTHS_IN_YEAR, pct_of, round_cents


logger = logging.getLogger(__name__)

PROPERTY_TYPES = ("single-family", "condo", "townhouse", "multi-family")


@dataclass(frozen=True)
class Property:
    # Financials
    purchase_price: float
    market_value: float
    monthly_rent: float

    # Loan
    down_payment: float
    loan_amount: float
    interest_rate: float  # annual, 7.0 means 7%
    loan_term_years: int

    # Operating expenses
    monthly_property_tax: float
    monthly_insurance: float
    monthly_hoa: float = 0.0
    maintenance_pct: float = 0.0  # of rent
    vacancy_rate: float = 0.0  # of rent
    management_pct: float = 0.0  # of rent

    # Descriptive only, never read by the formulas
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    property_type: str = "single-family"
    bedrooms: int = 0
    bathrooms: float = 0.0
    date_added: datetime.datetime = field(default_factory=datetime.datetime.now)
    notes: Optional[str] = None


@dataclass(frozen=True)
class InvestmentMetrics:
    # Monthly
    monthly_mortgage_payment: float
    monthly_operating_expenses: float
    net_monthly_cash_flow: float

    # Annual
    annual_gross_rent: float
    annual_net_operating_income: float
    annual_cash_flow: float

    # Returns, in percent
    cap_rate: float
    cash_on_cash_return: float
    total_roi: float

    # Break-even
    break_even_rent: float
    cash_flow_break_even: bool


# ------------------------- Ratios ------------------------- #
def cap_rate(annual_noi: float, market_value: float) -> float:
    if market_value <= 0:
        return 0.0
    return annual_noi / market_value * 100


def cash_on_cash_return(annual_cash_flow: float, cash_invested: float) -> float:
    if cash_invested <= 0:
        return 0.0
    return annual_cash_flow / cash_invested * 100


def total_roi(
    annual_cash_flow: float, down_payment: float, market_value: float, purchase_price: float
) -> float:
    """One year of cash flow plus appreciation since purchase, over the down payment.

    The appreciation term is cumulative rather than annualized, so for a
    property held several years this overstates the yearly return.
    """
    if down_payment <= 0:
        return 0.0
    appreciation = market_value - purchase_price
    return (annual_cash_flow + appreciation) / down_payment * 100


def one_percent_rule(monthly_rent: float, purchase_price: float) -> float:
    """Monthly rent as a percentage of purchase price (passes at >= 1)."""
    if purchase_price <= 0:
        return 0.0
    return monthly_rent / purchase_price * 100


def passes_one_percent_rule(monthly_rent: float, purchase_price: float) -> bool:
    return one_percent_rule(monthly_rent, purchase_price) >= 1


def dscr(annual_noi: float, annual_debt_service: float) -> float:
    """Debt service coverage ratio, unrounded. 0 when there is no debt service."""
    if annual_debt_service <= 0:
        return 0.0
    return annual_noi / annual_debt_service


# ------------------------- Metrics ------------------------- #
def monthly_operating_expenses(prop: Property) -> float:
    base = prop.monthly_property_tax + prop.monthly_insurance + (prop.monthly_hoa or 0.0)
    maintenance = pct_of(prop.monthly_rent, prop.maintenance_pct)
    vacancy = pct_of(prop.monthly_rent, prop.vacancy_rate)
    management = pct_of(prop.monthly_rent, prop.management_pct or 0.0)
    return base + maintenance + vacancy + management


def investment_metrics(prop: Property) -> InvestmentMetrics:
    """Derive the full metrics record from a property snapshot.

    Every field is rounded to cents from its own unrounded intermediate;
    nothing downstream reads a rounded field.
    """
    mortgage = monthly_payment(prop.loan_amount, prop.interest_rate, prop.loan_term_years)
    opex = monthly_operating_expenses(prop)
    net_monthly = prop.monthly_rent - opex - mortgage

    annual_gross_rent = prop.monthly_rent * MONTHS_IN_YEAR
    annual_opex = opex * MONTHS_IN_YEAR
    annual_noi = annual_gross_rent - annual_opex
    annual_cash_flow = net_monthly * MONTHS_IN_YEAR

    cap = cap_rate(annual_noi, prop.market_value)
    coc = cash_on_cash_return(annual_cash_flow, prop.down_payment)
    roi = total_roi(annual_cash_flow, prop.down_payment, prop.market_value, prop.purchase_price)

    metrics = InvestmentMetrics(
        monthly_mortgage_payment=round_cents(mortgage),
        monthly_operating_expenses=round_cents(opex),
        net_monthly_cash_flow=round_cents(net_monthly),
        annual_gross_rent=round_cents(annual_gross_rent),
        annual_net_operating_income=round_cents(annual_noi),
        annual_cash_flow=round_cents(annual_cash_flow),
        cap_rate=round_cents(cap),
        cash_on_cash_return=round_cents(coc),
        total_roi=round_cents(roi),
        break_even_rent=break_even_rent(mortgage, opex),
        cash_flow_break_even=net_monthly >= 0,
    )
    logger.debug(
        "Metrics for %s: cash flow %.2f/month, cap rate %.2f%%",
        prop.address or "<unnamed>", metrics.net_monthly_cash_flow, metrics.cap_rate,
    )
    return metrics

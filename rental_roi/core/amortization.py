from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import pandas as pd

from .utils import MONTHS_IN_YEAR, round_cents


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoanDetails:
    loan_amount: float
    interest_rate: float  # annual, whole-number percent
    term_years: int
    monthly_payment: float
    total_interest: float
    total_payments: float


def monthly_payment(loan_amount: float, annual_rate_pct: float, term_years: int) -> float:
    """Compute the fixed monthly payment for a fully amortizing loan.

    Parameters
    ----------
    loan_amount : float
        Initial loan amount.
    annual_rate_pct : float
        Nominal annual interest rate in whole-number percent (e.g., 7.0 for 7%).
    term_years : int
        Loan term in years.

    Returns
    -------
    float
        The constant monthly payment, rounded to cents. A zero rate, or one
        too small to move ``(1 + r) ** n`` off 1.0, gives the exact
        straight-line payment, unrounded. A term long enough to overflow the
        growth factor gives the interest-only limit.
    """
    if loan_amount <= 0:
        return 0.0
    n_months = term_years * MONTHS_IN_YEAR
    if n_months <= 0:
        return 0.0
    if annual_rate_pct == 0:
        return loan_amount / n_months
    monthly_rate = annual_rate_pct / 100 / MONTHS_IN_YEAR
    try:
        factor = (1 + monthly_rate) ** n_months
    except OverflowError:
        return round_cents(loan_amount * monthly_rate)
    if factor - 1 == 0:
        return loan_amount / n_months
    payment = loan_amount * (monthly_rate * factor) / (factor - 1)
    if not math.isfinite(payment):
        return round_cents(loan_amount * monthly_rate)
    return round_cents(payment)


def loan_details(loan_amount: float, rate_pct: float, term_years: int) -> LoanDetails:
    payment = monthly_payment(loan_amount, rate_pct, term_years)
    total_payments = payment * term_years * MONTHS_IN_YEAR
    total_interest = total_payments - loan_amount
    return LoanDetails(
        loan_amount=loan_amount,
        interest_rate=rate_pct,
        term_years=term_years,
        monthly_payment=payment,
        total_interest=round_cents(total_interest),
        total_payments=round_cents(total_payments),
    )


def break_even_rent(monthly_mortgage_payment: float, monthly_operating_expenses: float) -> float:
    """Minimum monthly rent covering debt service and operating costs."""
    return round_cents(monthly_mortgage_payment + monthly_operating_expenses)


def loan_amount_from_price(price: float, down_payment: float) -> float:
    return max(0.0, price - down_payment)


def down_payment_amount(price: float, down_payment_pct: float) -> float:
    return round_cents(price * (down_payment_pct / 100))


def amort_schedule(loan_amount: float, rate_pct: float, term_years: int) -> pd.DataFrame:
    """Generate a monthly amortization schedule.

    Columns: month (1..N), payment, interest, principal, balance

    Notes
    -----
    - The payment is the cent-rounded monthly payment, so the last period
      absorbs the leftover balance and the schedule ends at exactly zero.
    - Fractional terms are taken to the nearest whole month.
    """
    columns = ["month", "payment", "interest", "principal", "balance"]
    n_months = int(round(term_years * MONTHS_IN_YEAR))
    if loan_amount <= 0 or n_months <= 0:
        return pd.DataFrame(columns=columns, data=[])

    payment = monthly_payment(loan_amount, rate_pct, term_years)
    monthly_rate = rate_pct / 100 / MONTHS_IN_YEAR

    rows = []
    balance = float(loan_amount)
    for m in range(1, n_months + 1):
        interest = balance * monthly_rate
        principal_component = payment - interest

        # Guard against negative principal component due to extreme rates
        if principal_component < 0:
            principal_component = 0.0

        if m == n_months or principal_component > balance:
            principal_component = balance
        new_balance = balance - principal_component

        rows.append(
            {
                "month": m,
                "payment": float(interest + principal_component),
                "interest": float(interest),
                "principal": float(principal_component),
                "balance": float(max(new_balance, 0.0)),
            }
        )
        balance = max(new_balance, 0.0)

    return pd.DataFrame(rows, columns=columns)


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Roll a monthly schedule up to loan years (months 1-12 are year 1).

    Yearly payment, interest and principal totals and the year-end balance are
    rounded to cents, half away from zero, like every other money figure here.
    """
    money = ["payment", "interest", "principal", "end_balance"]
    if schedule.empty:
        return pd.DataFrame(columns=["year"] + money, data=[])

    yearly = (
        schedule.assign(year=(schedule["month"] - 1) // MONTHS_IN_YEAR + 1)
        .groupby("year", as_index=False, sort=True)
        .agg(
            payment=("payment", "sum"),
            interest=("interest", "sum"),
            principal=("principal", "sum"),
            end_balance=("balance", "last"),
        )
    )
    for col in money:
        yearly[col] = yearly[col].map(round_cents)
    return yearly


@dataclass(frozen=True)
class AmortizationSummary:
    details: LoanDetails
    schedule_monthly: pd.DataFrame
    schedule_yearly: pd.DataFrame


def summarize(loan_amount: float, rate_pct: float, term_years: int) -> AmortizationSummary:
    """Convenience wrapper returning loan details and schedules."""
    details = loan_details(loan_amount, rate_pct, term_years)
    schedule = amort_schedule(loan_amount, rate_pct, term_years)
    logger.debug(
        "Amortized %.2f at %.3f%% over %s years: %d periods, payment %.2f",
        loan_amount, rate_pct, term_years, len(schedule), details.monthly_payment,
    )
    return AmortizationSummary(
        details=details,
        schedule_monthly=schedule,
        schedule_yearly=aggregate_yearly(schedule),
    )

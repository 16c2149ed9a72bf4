import datetime

import pytest

from rental_roi.core.model import InvestmentMetrics, Property


@pytest.fixture
def reference_property() -> Property:
    """300k single-family, 20% down, 7% over 30 years, renting for 2000."""
    return Property(
        purchase_price=300_000,
        market_value=300_000,
        monthly_rent=2_000,
        down_payment=60_000,
        loan_amount=240_000,
        interest_rate=7.0,
        loan_term_years=30,
        monthly_property_tax=400,
        monthly_insurance=150,
        monthly_hoa=0,
        maintenance_pct=5,
        vacancy_rate=5,
        management_pct=0,
        address="12 Elm Street",
        city="Springfield",
        state="IL",
        date_added=datetime.datetime(2024, 3, 1),
    )


@pytest.fixture
def make_metrics():
    def _make(cap_rate=0.0, net_monthly_cash_flow=0.0, cash_on_cash_return=0.0, total_roi=0.0):
        return InvestmentMetrics(
            monthly_mortgage_payment=0.0,
            monthly_operating_expenses=0.0,
            net_monthly_cash_flow=net_monthly_cash_flow,
            annual_gross_rent=0.0,
            annual_net_operating_income=0.0,
            annual_cash_flow=net_monthly_cash_flow * 12,
            cap_rate=cap_rate,
            cash_on_cash_return=cash_on_cash_return,
            total_roi=total_roi,
            break_even_rent=0.0,
            cash_flow_break_even=net_monthly_cash_flow >= 0,
        )

    return _make

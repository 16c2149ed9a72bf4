import dataclasses

import pytest

from rental_roi.core import config
from rental_roi.core.grading import Grade
from rental_roi.core.scenarios import (
    analyze_property,
    build_property,
    compute_grade,
    compute_loan_details,
    compute_metrics,
    format_analysis,
    validate_property,
)


def test_public_api_on_reference_property(reference_property):
    metrics = compute_metrics(reference_property)
    assert metrics.net_monthly_cash_flow == -346.73
    assert compute_grade(metrics) == Grade.F
    loan = compute_loan_details(240_000, 7.0, 30)
    assert loan.monthly_payment == metrics.monthly_mortgage_payment


def test_analyze_property(reference_property):
    analysis = analyze_property(reference_property)
    assert analysis.grade == Grade.F
    assert analysis.score == 30
    assert analysis.one_percent == pytest.approx(0.6667, abs=1e-4)
    assert analysis.passes_one_percent is False
    assert analysis.dscr == pytest.approx(15_000 / 19_160.76)
    assert analysis.dscr_class == "weak"
    assert analysis.cash_flow_risk == "high"
    assert analysis.vacancy_assumption == "conservative"
    assert analysis.maintenance_assumption == "moderate"
    assert analysis.loan.total_interest == pytest.approx(334_822.80, abs=0.01)


def test_analyze_cash_property_has_no_dscr(reference_property):
    prop = dataclasses.replace(reference_property, loan_amount=0, down_payment=300_000)
    analysis = analyze_property(prop)
    assert analysis.dscr == 0.0
    assert analysis.dscr_class == "weak"
    assert analysis.loan.monthly_payment == 0.0


def test_format_analysis(reference_property):
    text = format_analysis(analyze_property(reference_property))
    assert text["Grade"] == "F (Avoid This Investment)"
    assert text["Monthly cash flow"] == "-$347 (poor)"
    assert text["Cap rate"] == "5.00% (good)"
    assert text["Total ROI"] == "-6.93% (poor)"
    assert text["1% rule"] == "0.67% (fails)"
    assert text["DSCR"] == "0.78 (weak)"


def test_format_analysis_strong_property(reference_property):
    prop = dataclasses.replace(reference_property, monthly_rent=3_500)
    analysis = analyze_property(prop)
    assert analysis.passes_one_percent is True
    text = format_analysis(analysis)
    # 3500 - (550 + 350) - 1596.73 = 1003.27 a month
    assert text["Monthly cash flow"] == "$1,003 (excellent)"
    assert text["Cap rate"] == "10.40% (excellent)"
    assert text["1% rule"] == "1.17% (passes)"


def test_build_property_matches_reference(reference_property):
    prop = build_property(
        300_000,
        2_000,
        down_payment=60_000,
        interest_rate=7.0,
        loan_term_years=30,
        monthly_property_tax=400,
        monthly_insurance=150,
        maintenance_pct=5,
        vacancy_rate=5,
    )
    assert prop.loan_amount == 240_000
    assert prop.market_value == 300_000
    assert compute_metrics(prop) == compute_metrics(reference_property)


def test_build_property_uses_config_defaults(monkeypatch):
    monkeypatch.setattr(config, "DOWN_PAYMENT_PCT", 25.0)
    monkeypatch.setattr(config, "VACANCY_RATE", 8.0)
    prop = build_property(400_000, 3_000)
    assert prop.down_payment == 100_000
    assert prop.loan_amount == 300_000
    assert prop.vacancy_rate == 8.0
    assert prop.interest_rate == config.INTEREST_RATE
    assert prop.loan_term_years == config.LOAN_TERM_YEARS


def test_build_property_down_payment_pct():
    prop = build_property(300_000, 2_000, down_payment_pct=10)
    assert prop.down_payment == 30_000
    assert prop.loan_amount == 270_000


def test_build_property_explicit_zero_kept():
    prop = build_property(300_000, 2_000, maintenance_pct=0, market_value=320_000, interest_rate=0)
    assert prop.maintenance_pct == 0
    assert prop.market_value == 320_000
    assert prop.interest_rate == 0


def test_build_property_down_payment_above_price():
    prop = build_property(300_000, 2_000, down_payment=350_000)
    assert prop.loan_amount == 0.0


def test_build_property_descriptive_fields():
    prop = build_property(300_000, 2_000, address="1 Main St", city="Austin", state="TX", property_type="condo")
    assert prop.city == "Austin"
    assert prop.property_type == "condo"


def test_build_property_rejects_unknown_fields():
    with pytest.raises(ValueError, match="loan_amount"):
        build_property(300_000, 2_000, loan_amount=1)


def test_build_property_rejects_negative_inputs():
    with pytest.raises(ValueError, match="monthly_rent"):
        build_property(300_000, -5)


def test_validate_property_lists_every_problem(reference_property):
    bad = dataclasses.replace(reference_property, monthly_insurance=-1, loan_term_years=0, property_type="castle")
    with pytest.raises(ValueError) as exc:
        validate_property(bad)
    message = str(exc.value)
    assert "monthly_insurance" in message
    assert "loan_term_years" in message
    assert "property_type" in message


def test_validate_property_returns_valid_property(reference_property):
    assert validate_property(reference_property) is reference_property

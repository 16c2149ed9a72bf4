from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Sequence, Tuple

from .model import InvestmentMetrics


logger = logging.getLogger(__name__)


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


# (lower bound, points), checked top-down; first bound met wins, else FLOOR_POINTS
CAP_RATE_POINTS: Final = ((8, 25), (6, 20), (4, 15), (2, 10))
CASH_FLOW_POINTS: Final = ((500, 25), (200, 20), (0, 15), (-200, 10))
CASH_ON_CASH_POINTS: Final = ((12, 25), (8, 20), (5, 15), (2, 10))
TOTAL_ROI_POINTS: Final = ((15, 25), (10, 20), (6, 15), (3, 10))
FLOOR_POINTS: Final[int] = 5

GRADE_CUTOFFS: Final = ((90, Grade.A), (80, Grade.B), (70, Grade.C), (60, Grade.D))

# (good, fair) lower bounds for the excellent / good / poor status of a metric
STATUS_THRESHOLDS: Final = {
    "cap_rate": (8, 5),
    "net_monthly_cash_flow": (500, 200),
    "cash_on_cash_return": (12, 8),
    "total_roi": (15, 10),
}

GRADE_LABELS: Final = {
    Grade.A: "Excellent Investment Opportunity",
    Grade.B: "Good Investment Opportunity",
    Grade.C: "Fair Investment Opportunity",
    Grade.D: "Poor Investment Opportunity",
    Grade.F: "Avoid This Investment",
}


def _points(value: float, cascade: Sequence[Tuple[float, int]]) -> int:
    for bound, points in cascade:
        if value >= bound:
            return points
    return FLOOR_POINTS


def investment_score(metrics: InvestmentMetrics) -> int:
    """Additive score out of 100, 25 points each for cap rate, monthly cash
    flow, cash-on-cash return and total ROI."""
    return (
        _points(metrics.cap_rate, CAP_RATE_POINTS)
        + _points(metrics.net_monthly_cash_flow, CASH_FLOW_POINTS)
        + _points(metrics.cash_on_cash_return, CASH_ON_CASH_POINTS)
        + _points(metrics.total_roi, TOTAL_ROI_POINTS)
    )


def grade_for_score(score: int) -> Grade:
    for cutoff, grade in GRADE_CUTOFFS:
        if score >= cutoff:
            return grade
    return Grade.F


def investment_grade(metrics: InvestmentMetrics) -> Grade:
    score = investment_score(metrics)
    grade = grade_for_score(score)
    logger.debug("Scored %d/100 -> grade %s", score, grade.value)
    return grade


def grade_label(grade: Grade) -> str:
    return GRADE_LABELS[Grade(grade)]


def classify_dscr(value: float) -> str:
    if value >= 1.25:
        return "strong"
    if value >= 1.0:
        return "adequate"
    return "weak"


def metric_status(value: float, good: float, fair: float) -> str:
    if value >= good:
        return "excellent"
    if value >= fair:
        return "good"
    return "poor"


def cash_flow_risk(net_monthly_cash_flow: float) -> str:
    if net_monthly_cash_flow > 500:
        return "low"
    if net_monthly_cash_flow > 0:
        return "medium"
    return "high"


def vacancy_assumption(vacancy_rate: float) -> str:
    if vacancy_rate <= 5:
        return "conservative"
    if vacancy_rate <= 10:
        return "moderate"
    return "aggressive"


def maintenance_assumption(maintenance_pct: float) -> str:
    if maintenance_pct >= 10:
        return "conservative"
    if maintenance_pct >= 5:
        return "moderate"
    return "aggressive"

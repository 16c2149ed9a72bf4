from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from .grading import investment_grade
from .model import Property, investment_metrics, one_percent_rule


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyFilters:
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rent: Optional[float] = None
    max_rent: Optional[float] = None
    property_types: Optional[Sequence[str]] = None
    state: Optional[str] = None
    city: Optional[str] = None
    min_cap_rate: Optional[float] = None
    min_cash_flow: Optional[float] = None


def matches(prop: Property, filters: PropertyFilters) -> bool:
    if filters.min_price is not None and prop.purchase_price < filters.min_price:
        return False
    if filters.max_price is not None and prop.purchase_price > filters.max_price:
        return False
    if filters.min_rent is not None and prop.monthly_rent < filters.min_rent:
        return False
    if filters.max_rent is not None and prop.monthly_rent > filters.max_rent:
        return False
    if filters.property_types and prop.property_type not in filters.property_types:
        return False
    if filters.state and prop.state.lower() != filters.state.lower():
        return False
    if filters.city and filters.city.lower() not in prop.city.lower():
        return False

    if filters.min_cap_rate is not None or filters.min_cash_flow is not None:
        metrics = investment_metrics(prop)
        if filters.min_cap_rate is not None and metrics.cap_rate < filters.min_cap_rate:
            return False
        if filters.min_cash_flow is not None and metrics.net_monthly_cash_flow < filters.min_cash_flow:
            return False
    return True


def filter_properties(properties: Iterable[Property], filters: PropertyFilters) -> List[Property]:
    props = list(properties)
    kept = [p for p in props if matches(p, filters)]
    logger.debug("Filters kept %d of %d properties", len(kept), len(props))
    return kept


SORT_KEYS: Dict[str, Callable[[Property], object]] = {
    "price": lambda p: p.purchase_price,
    "rent": lambda p: p.monthly_rent,
    "cap_rate": lambda p: investment_metrics(p).cap_rate,
    "cash_flow": lambda p: investment_metrics(p).net_monthly_cash_flow,
    "date_added": lambda p: p.date_added,
}


def sort_properties(properties: Iterable[Property], by: str = "date_added", descending: bool = True) -> List[Property]:
    if by not in SORT_KEYS:
        raise ValueError(f"Unknown sort key {by!r}; expected one of {', '.join(SORT_KEYS)}")
    return sorted(properties, key=SORT_KEYS[by], reverse=descending)


def metrics_table(properties: Iterable[Property]) -> pd.DataFrame:
    """One row per property: identifying fields, every metric, grade and 1% rule."""
    columns = ["address", "city", "state", "purchase_price", "monthly_rent"]
    rows = []
    for prop in properties:
        metrics = investment_metrics(prop)
        row = {name: getattr(prop, name) for name in columns}
        row.update(asdict(metrics))
        row["grade"] = investment_grade(metrics).value
        row["one_percent_rule"] = one_percent_rule(prop.monthly_rent, prop.purchase_price)
        rows.append(row)
    return pd.DataFrame(rows)

from .amortization import (
	LoanDetails,
	AmortizationSummary,
	monthly_payment,
	loan_details,
	break_even_rent,
	loan_amount_from_price,
	down_payment_amount,
	amort_schedule,
	aggregate_yearly,
	summarize,
)
from .model import Property, InvestmentMetrics, monthly_operating_expenses, investment_metrics
from .grading import Grade, investment_grade, investment_score, classify_dscr
from .scenarios import (
	compute_metrics,
	compute_loan_details,
	compute_grade,
	one_percent_rule,
	dscr,
	PropertyAnalysis,
	analyze_property,
	build_property,
	validate_property,
)
from .portfolio import PropertyFilters, filter_properties, sort_properties, metrics_table
from .utils import round_cents

__all__ = [
	"LoanDetails",
	"AmortizationSummary",
	"monthly_payment",
	"loan_details",
	"break_even_rent",
	"loan_amount_from_price",
	"down_payment_amount",
	"amort_schedule",
	"aggregate_yearly",
	"summarize",
	"Property",
	"InvestmentMetrics",
	"monthly_operating_expenses",
	"investment_metrics",
	"Grade",
	"investment_grade",
	"investment_score",
	"classify_dscr",
	"compute_metrics",
	"compute_loan_details",
	"compute_grade",
	"one_percent_rule",
	"dscr",
	"PropertyAnalysis",
	"analyze_property",
	"build_property",
	"validate_property",
	"PropertyFilters",
	"filter_properties",
	"sort_properties",
	"metrics_table",
	"round_cents",
]

"""Pure computations consumed by the presentation layer"""

from .bias import biased_decisions, classify, severity_rank, sort_by_severity
from .fairness import compute_fairness_score, label_for_score, risk_breakdown
from .filters import filter_by_bank, filter_by_outcome, filter_by_risk, search_decisions
from .fraud import count_by_risk_level, sorted_by_recency, summarize
from .grouping import compute_user_stats, group_by_bank, group_by_loan_type

__all__ = [
    "biased_decisions",
    "classify",
    "severity_rank",
    "sort_by_severity",
    "compute_fairness_score",
    "label_for_score",
    "risk_breakdown",
    "filter_by_bank",
    "filter_by_outcome",
    "filter_by_risk",
    "search_decisions",
    "count_by_risk_level",
    "sorted_by_recency",
    "summarize",
    "compute_user_stats",
    "group_by_bank",
    "group_by_loan_type",
]

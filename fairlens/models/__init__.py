"""Data models for the fairness core"""

from .decision import DecisionRecord
from .fraud_alert import FraudAlert, check_transition
from .reports import DecisionReport, FraudReport
from .summaries import (
    BankSummary,
    FairnessScore,
    FraudSummary,
    LoanTypeSummary,
    RiskBreakdown,
    RiskLevelCounts,
    UserStats,
)

__all__ = [
    "DecisionRecord",
    "FraudAlert",
    "check_transition",
    "DecisionReport",
    "FraudReport",
    "BankSummary",
    "FairnessScore",
    "FraudSummary",
    "LoanTypeSummary",
    "RiskBreakdown",
    "RiskLevelCounts",
    "UserStats",
]

"""Dashboard report models handed to the presentation layer"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from fairlens.constants import RiskFilter
from fairlens.models.decision import DecisionRecord
from fairlens.models.fraud_alert import FraudAlert
from fairlens.models.summaries import (
    BankSummary,
    FairnessScore,
    FraudSummary,
    LoanTypeSummary,
    RiskBreakdown,
    RiskLevelCounts,
    UserStats,
)


class DecisionReport(BaseModel):
    """Everything the fairness and dashboard screens render for one user"""

    report_id: str = Field(..., description="Unique report ID (UUID)")
    user_id: str = Field(..., description="User the decisions belong to")
    generated_at: datetime = Field(default_factory=datetime.now)
    fairness: FairnessScore
    risk_breakdown: RiskBreakdown
    stats: UserStats
    banks: List[BankSummary] = Field(default_factory=list, description="First-appearance order")
    loan_types: List[LoanTypeSummary] = Field(default_factory=list)
    biased_decisions: List[DecisionRecord] = Field(
        default_factory=list,
        description="Biased decisions, most severe first"
    )


class FraudReport(BaseModel):
    """Everything the fraud alert screen renders for one customer"""

    report_id: str = Field(..., description="Unique report ID (UUID)")
    customer_id: str
    generated_at: datetime = Field(default_factory=datetime.now)
    summary: FraudSummary
    risk_levels: RiskLevelCounts
    alerts: List[FraudAlert] = Field(default_factory=list, description="Newest first")
    risk_filter: RiskFilter = RiskFilter.ALL
    filtered_alerts: List[FraudAlert] = Field(
        default_factory=list,
        description="Alerts matching risk_filter, newest first"
    )

"""Derived (non-persisted) result models"""

from typing import List, Optional

from pydantic import BaseModel, Field

from fairlens.constants import FairnessLabel, LoanType
from fairlens.models.decision import DecisionRecord


class FairnessScore(BaseModel):
    """Aggregate fairness score for one user's decisions"""

    score: int = Field(..., ge=0, le=100, description="Share of unbiased decisions (0-100)")
    label: FairnessLabel = Field(..., description="Score band")

    class Config:
        frozen = True


class RiskBreakdown(BaseModel):
    """Biased decisions counted by severity"""

    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)

    class Config:
        frozen = True

    @property
    def total(self) -> int:
        return self.high + self.medium + self.low


class BankSummary(BaseModel):
    """Decisions from a single bank with outcome counts"""

    bank_name: str = Field(..., description="Bank name, may be empty")
    decisions: List[DecisionRecord] = Field(default_factory=list, description="Source order")
    approved_count: int = Field(default=0, ge=0)
    denied_count: int = Field(default=0, ge=0)
    pending_count: int = Field(default=0, ge=0)
    latest_timestamp: Optional[int] = Field(None, description="Newest decision time in the group")

    class Config:
        frozen = True


class LoanTypeSummary(BaseModel):
    """Decisions for a single loan product"""

    loan_type: LoanType
    display_name: str
    decisions: List[DecisionRecord] = Field(default_factory=list)
    total_amount: float = Field(default=0.0, ge=0)

    class Config:
        frozen = True


class UserStats(BaseModel):
    """Headline statistics for a user's decision history"""

    total_decisions: int = 0
    approved_count: int = 0
    denied_count: int = 0
    pending_count: int = 0
    bias_detected_count: int = 0
    high_risk_bias_count: int = 0
    banks_count: int = 0
    loan_types_count: int = 0

    class Config:
        frozen = True

    @property
    def approval_rate(self) -> float:
        """Approved decisions as a percentage"""
        if self.total_decisions == 0:
            return 0.0
        return self.approved_count / self.total_decisions * 100

    @property
    def bias_rate(self) -> float:
        """Biased decisions as a percentage"""
        if self.total_decisions == 0:
            return 0.0
        return self.bias_detected_count / self.total_decisions * 100


class FraudSummary(BaseModel):
    """Fixed-shape fraud alert counts"""

    total_alerts: int = Field(default=0, ge=0)
    high_risk_count: int = Field(default=0, ge=0, description="HIGH or CRITICAL alerts")
    blocked_count: int = Field(default=0, ge=0)

    class Config:
        frozen = True


class RiskLevelCounts(BaseModel):
    """Alerts counted per risk level, plus alerts still awaiting review"""

    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    flagged_count: int = 0

    class Config:
        frozen = True

"""Fraud alert aggregation"""

from typing import List, Sequence

from fairlens.constants import AlertStatus, RiskLevel, HIGH_RISK_LEVELS
from fairlens.models import FraudAlert, FraudSummary, RiskLevelCounts


def summarize(alerts: Sequence[FraudAlert]) -> FraudSummary:
    """
    Headline counts for a customer's alerts.

    Returns:
        FraudSummary with total, HIGH+CRITICAL and BLOCKED counts
        (all zero for an empty list)
    """
    return FraudSummary(
        total_alerts=len(alerts),
        high_risk_count=sum(1 for a in alerts if a.risk_level in HIGH_RISK_LEVELS),
        blocked_count=sum(1 for a in alerts if a.status == AlertStatus.BLOCKED),
    )


def sorted_by_recency(alerts: Sequence[FraudAlert]) -> List[FraudAlert]:
    """Newest first; alerts with the same timestamp keep their input order"""
    return sorted(alerts, key=lambda a: a.timestamp, reverse=True)


def count_by_risk_level(alerts: Sequence[FraudAlert]) -> RiskLevelCounts:
    counts = {level: 0 for level in RiskLevel}
    flagged = 0
    for alert in alerts:
        counts[alert.risk_level] += 1
        if alert.status == AlertStatus.FLAGGED:
            flagged += 1

    return RiskLevelCounts(
        critical=counts[RiskLevel.CRITICAL],
        high=counts[RiskLevel.HIGH],
        medium=counts[RiskLevel.MEDIUM],
        low=counts[RiskLevel.LOW],
        flagged_count=flagged,
    )

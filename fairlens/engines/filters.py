"""Non-mutating filters over alert and decision lists"""

from typing import List, Sequence, Union

from fairlens.constants import DecisionOutcome, RiskFilter, RiskLevel
from fairlens.models import DecisionRecord, FraudAlert


def filter_by_risk(
    alerts: Sequence[FraudAlert],
    level: Union[RiskFilter, RiskLevel, str]
) -> List[FraudAlert]:
    """
    Alerts at exactly the given risk level, in input order.

    ALL returns a copy of the whole list. CRITICAL and HIGH are separate
    buckets: filtering on HIGH never returns CRITICAL alerts.

    Args:
        alerts: Alerts to filter (never modified)
        level: RiskFilter member, RiskLevel member, or its name

    Returns:
        New list of matching alerts
    """
    risk_filter = RiskFilter(level.value if isinstance(level, RiskLevel) else level)
    if risk_filter == RiskFilter.ALL:
        return list(alerts)

    target = RiskLevel(risk_filter.value)
    return [a for a in alerts if a.risk_level == target]


def filter_by_outcome(
    decisions: Sequence[DecisionRecord],
    outcome: Union[DecisionOutcome, str]
) -> List[DecisionRecord]:
    target = DecisionOutcome(outcome)
    return [d for d in decisions if d.outcome == target]


def filter_by_bank(decisions: Sequence[DecisionRecord], bank_name: str) -> List[DecisionRecord]:
    """Decisions from one bank, matched case-insensitively"""
    wanted = bank_name.casefold()
    return [d for d in decisions if d.bank_name.casefold() == wanted]


def search_decisions(decisions: Sequence[DecisionRecord], query: str) -> List[DecisionRecord]:
    """
    Case-insensitive substring search over id, bank, loan type and outcome.
    A blank query matches everything.
    """
    needle = query.strip().casefold()
    if not needle:
        return list(decisions)

    def matches(decision: DecisionRecord) -> bool:
        haystack = (
            decision.id,
            decision.bank_name,
            decision.loan_type.value,
            decision.outcome.value,
        )
        return any(needle in field.casefold() for field in haystack)

    return [d for d in decisions if matches(d)]

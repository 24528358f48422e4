"""Per-bank and per-loan-type grouping of decisions"""

from typing import Dict, List, Sequence

from fairlens.constants import (
    BiasSeverity,
    DecisionOutcome,
    LoanType,
    LOAN_TYPE_DISPLAY_NAMES,
)
from fairlens.models import BankSummary, DecisionRecord, LoanTypeSummary, UserStats


def _outcome_counts(decisions: Sequence[DecisionRecord]) -> Dict[DecisionOutcome, int]:
    counts = {outcome: 0 for outcome in DecisionOutcome}
    for decision in decisions:
        counts[decision.outcome] += 1
    return counts


def group_by_bank(decisions: Sequence[DecisionRecord]) -> List[BankSummary]:
    """
    Partition decisions by bank name.

    Groups come out in order of each bank's first appearance in the input,
    and decisions inside a group keep their input order. An empty bank name
    is a group of its own.

    Args:
        decisions: Decision history in source order

    Returns:
        One BankSummary per distinct bank name
    """
    groups: Dict[str, List[DecisionRecord]] = {}
    for decision in decisions:
        groups.setdefault(decision.bank_name, []).append(decision)

    summaries = []
    for bank_name, bank_decisions in groups.items():
        counts = _outcome_counts(bank_decisions)
        summaries.append(BankSummary(
            bank_name=bank_name,
            decisions=bank_decisions,
            approved_count=counts[DecisionOutcome.APPROVED],
            denied_count=counts[DecisionOutcome.DENIED],
            pending_count=counts[DecisionOutcome.PENDING],
            latest_timestamp=max(d.timestamp for d in bank_decisions),
        ))
    return summaries


def group_by_loan_type(decisions: Sequence[DecisionRecord]) -> List[LoanTypeSummary]:
    """Decisions per loan product, in first-appearance order, with total amount"""
    groups: Dict[LoanType, List[DecisionRecord]] = {}
    for decision in decisions:
        groups.setdefault(decision.loan_type, []).append(decision)

    return [
        LoanTypeSummary(
            loan_type=loan_type,
            display_name=LOAN_TYPE_DISPLAY_NAMES[loan_type],
            decisions=loan_decisions,
            total_amount=sum(d.loan_amount for d in loan_decisions),
        )
        for loan_type, loan_decisions in groups.items()
    ]


def compute_user_stats(decisions: Sequence[DecisionRecord]) -> UserStats:
    counts = _outcome_counts(decisions)
    biased = [d for d in decisions if d.bias_detected]

    return UserStats(
        total_decisions=len(decisions),
        approved_count=counts[DecisionOutcome.APPROVED],
        denied_count=counts[DecisionOutcome.DENIED],
        pending_count=counts[DecisionOutcome.PENDING],
        bias_detected_count=len(biased),
        high_risk_bias_count=sum(1 for d in biased if d.bias_severity == BiasSeverity.HIGH),
        banks_count=len({d.bank_name for d in decisions}),
        loan_types_count=len({d.loan_type for d in decisions}),
    )

"""Bias severity classification and ordering"""

from typing import List, Sequence

from fairlens.constants import BiasSeverity, SEVERITY_RANK
from fairlens.models import DecisionRecord


def classify(record: DecisionRecord) -> BiasSeverity:
    """
    Severity of a biased decision.

    Raises:
        ValueError: If the record has no detected bias
    """
    if not record.bias_detected:
        raise ValueError(f"Decision {record.id} has no detected bias to classify")
    return record.bias_severity


def severity_rank(severity: BiasSeverity) -> int:
    """Total order HIGH > MEDIUM > LOW > NONE"""
    return SEVERITY_RANK[BiasSeverity(severity)]


def biased_decisions(decisions: Sequence[DecisionRecord]) -> List[DecisionRecord]:
    return [d for d in decisions if d.bias_detected]


def sort_by_severity(decisions: Sequence[DecisionRecord]) -> List[DecisionRecord]:
    """Biased decisions, most severe first; equal severities keep source order"""
    return sorted(
        biased_decisions(decisions),
        key=lambda d: severity_rank(classify(d)),
        reverse=True
    )

"""Fairness scoring over a user's decision history"""

from typing import Sequence

from fairlens.constants import (
    BiasSeverity,
    FairnessLabel,
    FAIRNESS_FLOOR_LABEL,
    FAIRNESS_LABEL_THRESHOLDS,
    MAX_FAIRNESS_SCORE,
    MIN_FAIRNESS_SCORE,
)
from fairlens.models import DecisionRecord, FairnessScore, RiskBreakdown
from fairlens.utils.logging import get_logger

logger = get_logger(__name__)


def label_for_score(score: int) -> FairnessLabel:
    """Map a 0-100 score to its band; first threshold met wins"""
    for threshold, label in FAIRNESS_LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return FAIRNESS_FLOOR_LABEL


def compute_fairness_score(decisions: Sequence[DecisionRecord]) -> FairnessScore:
    """
    Score a user's decisions by the share that carry no detected bias.

    An empty history scores 100 (EXCELLENT): there is no evidence of bias.
    Otherwise score = round((n - biased) / n * 100), halves rounded up,
    clamped to [0, 100].

    Args:
        decisions: Complete decision history for one user

    Returns:
        FairnessScore with score and label
    """
    total = len(decisions)
    if total == 0:
        return FairnessScore(score=MAX_FAIRNESS_SCORE, label=FairnessLabel.EXCELLENT)

    biased = sum(1 for d in decisions if d.bias_detected)
    unbiased = total - biased

    # Integer round-half-up of unbiased / total * 100
    score = (200 * unbiased + total) // (2 * total)
    score = max(MIN_FAIRNESS_SCORE, min(MAX_FAIRNESS_SCORE, score))

    logger.debug("Fairness score computed", decisions=total, biased=biased, score=score)
    return FairnessScore(score=score, label=label_for_score(score))


def risk_breakdown(decisions: Sequence[DecisionRecord]) -> RiskBreakdown:
    """
    Count biased decisions by severity.

    Unbiased decisions are left out entirely; there is no NONE bucket.
    """
    counts = {BiasSeverity.HIGH: 0, BiasSeverity.MEDIUM: 0, BiasSeverity.LOW: 0}
    for decision in decisions:
        if decision.bias_detected:
            counts[decision.bias_severity] += 1

    return RiskBreakdown(
        high=counts[BiasSeverity.HIGH],
        medium=counts[BiasSeverity.MEDIUM],
        low=counts[BiasSeverity.LOW],
    )

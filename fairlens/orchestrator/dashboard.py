"""Dashboard orchestrator - fetches records and builds the derived views"""

import time
import uuid
from typing import Any, Dict, List, Optional, Union

from fairlens.constants import RiskFilter
from fairlens.engines import (
    compute_fairness_score,
    compute_user_stats,
    count_by_risk_level,
    filter_by_risk,
    group_by_bank,
    group_by_loan_type,
    risk_breakdown,
    sort_by_severity,
    sorted_by_recency,
    summarize,
)
from fairlens.models import DecisionRecord, DecisionReport, FraudAlert, FraudReport
from fairlens.orchestrator.retry_handler import retry_with_exponential_backoff
from fairlens.sources import CachedDecisionSource, DecisionDataSource
from fairlens.utils.config_loader import get_section
from fairlens.utils.errors import DataUnavailable
from fairlens.utils.logging import get_logger
from fairlens.utils.metrics import (
    biased_decisions_seen,
    data_source_failures,
    decisions_analyzed,
    fairness_score,
    fraud_alerts_summarized,
)

logger = get_logger(__name__)


class FairnessDashboard:
    """Builds decision and fraud reports for the presentation layer"""

    def __init__(self, source: DecisionDataSource, config: Optional[Dict[str, Any]] = None):
        self.source = source
        self.config = config or {}
        self.retry = get_section(self.config, "retry")

    def _fetch(self, func, operation: str, *args, **kwargs):
        try:
            return retry_with_exponential_backoff(
                func,
                self.retry["max_retries"],
                self.retry["base_delay"],
                self.retry["max_delay"],
                *args,
                **kwargs
            )
        except DataUnavailable:
            data_source_failures.labels(operation=operation).inc()
            raise

    def load_decisions(self, user_id: str, force_refresh: bool = False) -> List[DecisionRecord]:
        """
        Fetch a user's decisions with retries.

        Raises:
            DataUnavailable: If the source stays unreachable
        """
        if force_refresh and isinstance(self.source, CachedDecisionSource):
            return self._fetch(self.source.fetch_all_decisions, "fetch_all_decisions", user_id, force_refresh=True)
        return self._fetch(self.source.fetch_all_decisions, "fetch_all_decisions", user_id)

    def load_alerts(self, customer_id: str) -> List[FraudAlert]:
        return self._fetch(self.source.fetch_fraud_alerts, "fetch_fraud_alerts", customer_id)

    def build_decision_report(self, user_id: str, force_refresh: bool = False) -> DecisionReport:
        """
        Fairness score, bias breakdown, per-bank and per-loan-type views.

        Args:
            user_id: Customer whose decisions are analysed
            force_refresh: Bypass the decision cache

        Returns:
            DecisionReport

        Raises:
            DataUnavailable: If decisions cannot be fetched; nothing is computed
        """
        start = time.time()
        decisions = self.load_decisions(user_id, force_refresh=force_refresh)

        score = compute_fairness_score(decisions)
        breakdown = risk_breakdown(decisions)
        report = DecisionReport(
            report_id=str(uuid.uuid4()),
            user_id=user_id,
            fairness=score,
            risk_breakdown=breakdown,
            stats=compute_user_stats(decisions),
            banks=group_by_bank(decisions),
            loan_types=group_by_loan_type(decisions),
            biased_decisions=sort_by_severity(decisions),
        )

        decisions_analyzed.inc(len(decisions))
        fairness_score.set(score.score)
        biased_decisions_seen.labels(severity="HIGH").inc(breakdown.high)
        biased_decisions_seen.labels(severity="MEDIUM").inc(breakdown.medium)
        biased_decisions_seen.labels(severity="LOW").inc(breakdown.low)

        logger.info(
            "Decision report built",
            user_id=user_id,
            decisions=len(decisions),
            fairness_score=score.score,
            label=score.label.value,
            banks=len(report.banks),
            duration_ms=int((time.time() - start) * 1000)
        )
        return report

    def build_fraud_report(
        self,
        customer_id: str,
        risk_filter: Union[RiskFilter, str] = RiskFilter.ALL
    ) -> FraudReport:
        """
        Alert counts, recency-ordered list and the filtered view.

        Raises:
            DataUnavailable: If alerts cannot be fetched; nothing is computed
        """
        risk_filter = RiskFilter(risk_filter)
        alerts = self.load_alerts(customer_id)

        ordered = sorted_by_recency(alerts)
        summary = summarize(ordered)
        for alert in ordered:
            fraud_alerts_summarized.labels(risk_level=alert.risk_level.value).inc()

        report = FraudReport(
            report_id=str(uuid.uuid4()),
            customer_id=customer_id,
            summary=summary,
            risk_levels=count_by_risk_level(ordered),
            alerts=ordered,
            risk_filter=risk_filter,
            filtered_alerts=filter_by_risk(ordered, risk_filter),
        )

        logger.info(
            "Fraud report built",
            customer_id=customer_id,
            total_alerts=summary.total_alerts,
            high_risk=summary.high_risk_count,
            blocked=summary.blocked_count,
            risk_filter=risk_filter.value,
            shown=len(report.filtered_alerts)
        )
        return report

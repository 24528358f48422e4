"""TTL cache in front of a decision data source"""

import threading
import time
from typing import Dict, List, Tuple

from fairlens.constants import AlertStatus, DEFAULT_CACHE_TTL_SECONDS
from fairlens.models import DecisionRecord, FraudAlert
from fairlens.sources.base import DecisionDataSource
from fairlens.utils.errors import DataUnavailable
from fairlens.utils.logging import get_logger
from fairlens.utils.metrics import decision_cache_lookups

logger = get_logger(__name__)


class CachedDecisionSource(DecisionDataSource):
    """
    Caches decision fetches per user for ttl_seconds.

    If a refresh fails and an earlier list for the user is cached, the stale
    list is served and the failure logged. With nothing cached the
    DataUnavailable error propagates. Fraud alerts are not cached since the
    user acts on their status.
    """

    def __init__(self, source: DecisionDataSource, ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS, clock=time.monotonic):
        self.source = source
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._cache: Dict[str, Tuple[float, List[DecisionRecord]]] = {}

    def fetch_all_decisions(self, user_id: str, force_refresh: bool = False) -> List[DecisionRecord]:
        now = self._clock()
        with self._lock:
            cached = self._cache.get(user_id)

        if cached and not force_refresh and (now - cached[0]) < self.ttl_seconds:
            decision_cache_lookups.labels(result="hit").inc()
            logger.debug(f"Using cached decisions ({len(cached[1])} items)", user_id=user_id)
            return list(cached[1])

        decision_cache_lookups.labels(result="miss").inc()
        try:
            decisions = self.source.fetch_all_decisions(user_id)
        except DataUnavailable as e:
            if cached:
                decision_cache_lookups.labels(result="stale").inc()
                logger.warning(f"Refresh failed, serving stale decisions: {e}", user_id=user_id)
                return list(cached[1])
            raise

        with self._lock:
            self._cache[user_id] = (now, list(decisions))
        return list(decisions)

    def fetch_fraud_alerts(self, customer_id: str) -> List[FraudAlert]:
        return self.source.fetch_fraud_alerts(customer_id)

    def update_alert_status(self, alert_id: str, new_status: AlertStatus) -> None:
        self.source.update_alert_status(alert_id, new_status)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.info("Decision cache cleared")

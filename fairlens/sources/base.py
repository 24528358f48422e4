"""Contract for the decision/alert data source"""

from abc import ABC, abstractmethod
from typing import List

from fairlens.constants import AlertStatus
from fairlens.models import DecisionRecord, FraudAlert


class DecisionDataSource(ABC):
    """
    Supplies decision and fraud-alert records to the core.

    Implementations raise DataUnavailable when the backing store cannot be
    reached or read. The core never computes over a partial fetch.
    """

    @abstractmethod
    def fetch_all_decisions(self, user_id: str) -> List[DecisionRecord]:
        """All decisions for a user, in source order"""

    @abstractmethod
    def fetch_fraud_alerts(self, customer_id: str) -> List[FraudAlert]:
        """All fraud alerts for a customer, in source order"""

    @abstractmethod
    def update_alert_status(self, alert_id: str, new_status: AlertStatus) -> None:
        """Persist a user-initiated alert status change"""

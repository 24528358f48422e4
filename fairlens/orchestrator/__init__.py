"""Report building, retries and user actions"""

from .alert_actions import confirm_transaction, next_status, report_fraud
from .dashboard import FairnessDashboard
from .retry_handler import retry_with_exponential_backoff

__all__ = [
    "confirm_transaction",
    "next_status",
    "report_fraud",
    "FairnessDashboard",
    "retry_with_exponential_backoff",
]

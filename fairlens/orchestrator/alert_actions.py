"""User actions on fraud alerts: confirm a transaction or report fraud"""

from typing import Callable

from fairlens.constants import AlertStatus
from fairlens.models import FraudAlert, check_transition
from fairlens.utils.errors import InvalidStatusTransition
from fairlens.utils.logging import get_logger
from fairlens.utils.metrics import alert_status_updates

logger = get_logger(__name__)

StatusUpdater = Callable[[str, AlertStatus], None]


def next_status(current: AlertStatus, target: AlertStatus) -> AlertStatus:
    """
    Validate and return the target status.

    Raises:
        InvalidStatusTransition: If the alert is already BLOCKED or APPROVED,
            or the target is FLAGGED
    """
    check_transition(current, target)
    return target


def _apply(alert: FraudAlert, target: AlertStatus, update_status: StatusUpdater) -> FraudAlert:
    try:
        status = next_status(alert.status, target)
    except InvalidStatusTransition:
        logger.warning(
            "Status change rejected", alert_id=alert.id, status=alert.status.value,
            target=target.value, closed=alert.is_terminal
        )
        raise
    update_status(alert.id, status)
    alert_status_updates.labels(status=status.value).inc()
    logger.info("Alert status changed", alert_id=alert.id, old=alert.status.value, new=status.value)
    return alert.model_copy(update={"status": status})


def confirm_transaction(alert: FraudAlert, update_status: StatusUpdater) -> FraudAlert:
    """User says "this was me": FLAGGED -> APPROVED"""
    return _apply(alert, AlertStatus.APPROVED, update_status)


def report_fraud(alert: FraudAlert, update_status: StatusUpdater) -> FraudAlert:
    """User reports the transaction: FLAGGED -> BLOCKED"""
    return _apply(alert, AlertStatus.BLOCKED, update_status)

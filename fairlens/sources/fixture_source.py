"""JSON fixture data source for local development and tests."""

import time
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd

from fairlens.constants import AlertStatus
from fairlens.models import DecisionRecord, FraudAlert, check_transition
from fairlens.models.normalize import normalize_enum
from fairlens.utils.errors import DataUnavailable, InvalidRecord
from fairlens.utils.logging import get_logger
from fairlens.utils.metrics import data_source_fetch_latency, records_rejected
from fairlens.sources.base import DecisionDataSource

logger = get_logger(__name__)


class FixtureDataSource(DecisionDataSource):
    """
    Reads decisions and fraud alerts from JSON files shaped like the
    realtime database export (a list of camelCase rows keyed by customerId).

    Rows that fail validation are skipped with a warning; the rest of the
    user's rows are still returned. Alert status updates are checked against
    the stored status, held in memory and applied on later fetches; the
    fixture files are never rewritten.
    """

    def __init__(
        self,
        fixture_dir: Union[str, Path] = "tests/fixtures",
        decisions_file: str = "sample_decisions.json",
        alerts_file: str = "sample_fraud_alerts.json"
    ):
        self.fixture_dir = Path(fixture_dir)
        self.decisions_path = self.fixture_dir / decisions_file
        self.alerts_path = self.fixture_dir / alerts_file
        self._status_overrides: Dict[str, AlertStatus] = {}

        logger.info("Fixture data source initialized", fixture_dir=str(self.fixture_dir))
    def _load_rows(self, path: Path, operation: str) -> List[Dict[str, Any]]:
        """Read a fixture file into a list of row dicts with NaN cleared to None"""
        start = time.time()
        try:
            df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Fixture load failed: {e}", path=str(path), operation=operation)
            raise DataUnavailable(f"Could not read fixture {path}: {e}") from e
        finally:
            data_source_fetch_latency.labels(operation=operation).observe(time.time() - start)

        if df.empty:
            return []

        df = df.astype(object).where(pd.notna(df), None)
        return df.to_dict("records")

    def _parse_rows(self, rows: List[Dict[str, Any]], model, record_type: str, owner: str) -> list:
        """Build records for one owner, skipping rows that fail validation"""
        records = []
        for row in rows:
            if row.get("customerId") != owner:
                continue
            try:
                records.append(model.from_source(row))
            except InvalidRecord as e:
                records_rejected.labels(record_type=record_type).inc()
                logger.warning(f"Skipping invalid {record_type} row: {e}", customer_id=owner, row_id=row.get("id"))
        return records

    def fetch_all_decisions(self, user_id: str) -> List[DecisionRecord]:
        rows = self._load_rows(self.decisions_path, "fetch_all_decisions")
        decisions = self._parse_rows(rows, DecisionRecord, "decision", user_id)
        logger.info(f"Loaded {len(decisions)} decisions", user_id=user_id)
        return decisions

    def fetch_fraud_alerts(self, customer_id: str) -> List[FraudAlert]:
        rows = self._load_rows(self.alerts_path, "fetch_fraud_alerts")
        alerts = []
        for alert in self._parse_rows(rows, FraudAlert, "fraud_alert", customer_id):
            override = self._status_overrides.get(alert.id)
            if override is not None:
                alert = alert.model_copy(update={"status": override})
            alerts.append(alert)

        logger.info(f"Loaded {len(alerts)} fraud alerts", customer_id=customer_id)
        return alerts

    def _stored_status(self, alert_id: str) -> AlertStatus:
        """Status currently held for an alert: the override if any, else the fixture row"""
        if alert_id in self._status_overrides:
            return self._status_overrides[alert_id]

        for row in self._load_rows(self.alerts_path, "update_alert_status"):
            if row.get("id") == alert_id:
                return normalize_enum(AlertStatus, row.get("status"), "status", default=AlertStatus.FLAGGED)
        raise InvalidRecord(f"No fraud alert with id {alert_id}")

    def update_alert_status(self, alert_id: str, new_status: AlertStatus) -> None:
        """
        Record a status change after checking it against the stored status.

        Raises:
            InvalidStatusTransition: If the stored alert is already closed
            InvalidRecord: If no alert has this id
        """
        new_status = AlertStatus(new_status)
        current = self._stored_status(alert_id)
        check_transition(current, new_status)

        self._status_overrides[alert_id] = new_status
        logger.info("Alert status updated", alert_id=alert_id, old=current.value, status=new_status.value)

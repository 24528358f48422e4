"""Shared fixtures and record factories"""

from pathlib import Path

import pytest

from fairlens.constants import (
    AlertStatus,
    BiasSeverity,
    DecisionOutcome,
    LoanType,
    RiskLevel,
    TransactionType,
)
from fairlens.models import DecisionRecord, FraudAlert

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def make_decision(
    id="dec_x",
    bank="HDFC",
    outcome=DecisionOutcome.APPROVED,
    bias=False,
    severity=None,
    loan_type=LoanType.PERSONAL,
    amount=100000.0,
    timestamp=1730000000000,
    message=""
) -> DecisionRecord:
    if severity is None:
        severity = BiasSeverity.HIGH if bias else BiasSeverity.NONE
    return DecisionRecord(
        id=id,
        bank_name=bank,
        loan_type=loan_type,
        loan_amount=amount,
        outcome=outcome,
        timestamp=timestamp,
        bias_detected=bias,
        bias_severity=severity,
        bias_message=message,
    )


def make_alert(
    id="fa_x",
    risk=RiskLevel.LOW,
    status=AlertStatus.FLAGGED,
    timestamp=1730000000000,
    amount=1000.0,
    customer_id="CUST_001",
    transaction_type=TransactionType.PURCHASE
) -> FraudAlert:
    return FraudAlert(
        id=id,
        customer_id=customer_id,
        risk_level=risk,
        status=status,
        amount=amount,
        transaction_type=transaction_type,
        timestamp=timestamp,
    )


@pytest.fixture
def decision_factory():
    return make_decision


@pytest.fixture
def alert_factory():
    return make_alert


@pytest.fixture
def fixture_dir():
    return FIXTURE_DIR


@pytest.fixture
def scenario_decisions():
    """Three decisions from two banks, one of them biased"""
    return [
        make_decision(id="d1", bank="HDFC", outcome=DecisionOutcome.APPROVED, timestamp=1730000000000),
        make_decision(id="d2", bank="ICICI", outcome=DecisionOutcome.DENIED, bias=True,
                      severity=BiasSeverity.HIGH, timestamp=1730000001000),
        make_decision(id="d3", bank="HDFC", outcome=DecisionOutcome.PENDING, timestamp=1730000002000),
    ]


@pytest.fixture
def scenario_alerts():
    return [
        make_alert(id="a1", risk=RiskLevel.CRITICAL, status=AlertStatus.FLAGGED, timestamp=1730000000000),
        make_alert(id="a2", risk=RiskLevel.LOW, status=AlertStatus.BLOCKED, timestamp=1730000005000),
    ]


@pytest.fixture
def test_config():
    """Config pointing at the JSON fixtures with instant retries"""
    return {
        'version': '1.0',
        'data_source': {
            'backend': 'fixture',
            'fixture_dir': str(FIXTURE_DIR),
            'decisions_file': 'sample_decisions.json',
            'alerts_file': 'sample_fraud_alerts.json',
            'cache_ttl_seconds': 0,
        },
        'retry': {'max_retries': 2, 'base_delay': 0, 'max_delay': 0},
        'logging': {'level': 'DEBUG'},
    }

"""Tests for the fixture data source, decision cache and source factory"""

from unittest.mock import MagicMock

import pytest
from prometheus_client import REGISTRY

from fairlens.constants import AlertStatus, BiasSeverity, FraudFlag, LoanType
from fairlens.sources import (
    CachedDecisionSource,
    FixtureDataSource,
    get_data_source,
)
from fairlens.utils.errors import (
    ConfigurationError,
    DataUnavailable,
    InvalidRecord,
    InvalidStatusTransition,
)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def _rejected(record_type):
    return REGISTRY.get_sample_value(
        'fairlens_records_rejected_total', {'record_type': record_type}
    ) or 0.0


@pytest.fixture
def fixture_source(fixture_dir):
    return FixtureDataSource(fixture_dir=fixture_dir)


class TestFixtureDataSource:
    """Reading camelCase fixture rows"""

    def test_decisions_for_user(self, fixture_source):
        decisions = fixture_source.fetch_all_decisions("CUST_001")
        assert [d.id for d in decisions] == ["dec_001", "dec_002", "dec_003", "dec_004", "dec_005", "dec_006"]

    def test_decision_rows_are_normalized(self, fixture_source):
        decisions = {d.id: d for d in fixture_source.fetch_all_decisions("CUST_001")}
        assert decisions["dec_001"].loan_type == LoanType.PERSONAL
        assert decisions["dec_002"].bias_severity == BiasSeverity.HIGH
        assert decisions["dec_003"].loan_type == LoanType.CAR
        assert decisions["dec_003"].bias_severity == BiasSeverity.NONE
        assert decisions["dec_005"].bias_severity == BiasSeverity.NONE
        assert decisions["dec_006"].bank_name == ""

    def test_other_user(self, fixture_source):
        assert [d.id for d in fixture_source.fetch_all_decisions("CUST_002")] == ["dec_101"]

    def test_unknown_user_has_no_records(self, fixture_source):
        assert fixture_source.fetch_all_decisions("NOBODY") == []
        assert fixture_source.fetch_fraud_alerts("NOBODY") == []

    def test_alerts_for_customer(self, fixture_source):
        alerts = fixture_source.fetch_fraud_alerts("CUST_001")
        assert [a.id for a in alerts] == ["fa_001", "fa_002", "fa_003", "fa_004"]

        by_id = {a.id: a for a in alerts}
        assert by_id["fa_001"].flags == frozenset({FraudFlag.UNUSUAL_AMOUNT, FraudFlag.NEW_MERCHANT})
        assert by_id["fa_002"].flags == frozenset({FraudFlag.UNUSUAL_TIME})
        assert by_id["fa_003"].flags == frozenset({FraudFlag.DEVICE_MISMATCH, FraudFlag.MULTIPLE_ATTEMPTS})
        assert by_id["fa_001"].merchant_name == "QuickPay Wallet"
        assert by_id["fa_003"].location == "Pune"
        assert by_id["fa_004"].risk_score == 55

    def test_missing_file_raises(self, tmp_path):
        source = FixtureDataSource(fixture_dir=tmp_path)
        with pytest.raises(DataUnavailable):
            source.fetch_all_decisions("CUST_001")
        with pytest.raises(DataUnavailable):
            source.fetch_fraud_alerts("CUST_001")

    def test_malformed_file_raises(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json")
        source = FixtureDataSource(fixture_dir=tmp_path, decisions_file="broken.json")
        with pytest.raises(DataUnavailable):
            source.fetch_all_decisions("CUST_001")

    def test_empty_file(self, fixture_dir):
        source = FixtureDataSource(
            fixture_dir=fixture_dir,
            decisions_file="empty.json",
            alerts_file="empty.json"
        )
        assert source.fetch_all_decisions("CUST_001") == []
        assert source.fetch_fraud_alerts("CUST_001") == []

    def test_status_update_applies_to_later_fetches(self, fixture_source):
        fixture_source.update_alert_status("fa_001", AlertStatus.BLOCKED)
        alerts = {a.id: a for a in fixture_source.fetch_fraud_alerts("CUST_001")}
        assert alerts["fa_001"].status == AlertStatus.BLOCKED
        assert alerts["fa_003"].status == AlertStatus.FLAGGED

    def test_invalid_decision_rows_are_skipped(self, fixture_dir):
        source = FixtureDataSource(fixture_dir=fixture_dir, decisions_file="decisions_with_bad_rows.json")
        before = _rejected("decision")

        decisions = source.fetch_all_decisions("CUST_003")

        assert [d.id for d in decisions] == ["dec_201", "dec_204"]
        assert _rejected("decision") - before == 2

    def test_invalid_alert_rows_are_skipped(self, fixture_dir):
        source = FixtureDataSource(fixture_dir=fixture_dir, alerts_file="alerts_with_bad_rows.json")
        before = _rejected("fraud_alert")

        assert [a.id for a in source.fetch_fraud_alerts("CUST_003")] == ["fa_202"]
        assert _rejected("fraud_alert") - before == 1

    def test_status_update_checks_stored_status(self, fixture_source):
        fixture_source.update_alert_status("fa_001", AlertStatus.BLOCKED)

        with pytest.raises(InvalidStatusTransition):
            fixture_source.update_alert_status("fa_001", AlertStatus.APPROVED)
        with pytest.raises(InvalidStatusTransition):
            fixture_source.update_alert_status("fa_001", AlertStatus.FLAGGED)

        alerts = {a.id: a for a in fixture_source.fetch_fraud_alerts("CUST_001")}
        assert alerts["fa_001"].status == AlertStatus.BLOCKED

    def test_closed_fixture_alert_cannot_change(self, fixture_source):
        # fa_002 is BLOCKED in the fixture file itself
        with pytest.raises(InvalidStatusTransition):
            fixture_source.update_alert_status("fa_002", AlertStatus.APPROVED)

        alerts = {a.id: a for a in fixture_source.fetch_fraud_alerts("CUST_001")}
        assert alerts["fa_002"].status == AlertStatus.BLOCKED

    def test_status_update_unknown_alert(self, fixture_source):
        with pytest.raises(InvalidRecord):
            fixture_source.update_alert_status("fa_missing", AlertStatus.BLOCKED)


class TestCachedDecisionSource:
    """TTL cache with stale fallback"""

    def _inner(self, decisions):
        inner = MagicMock()
        inner.fetch_all_decisions.return_value = decisions
        return inner

    def test_hit_within_ttl(self, scenario_decisions):
        inner = self._inner(scenario_decisions)
        clock = FakeClock()
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=clock)

        first = cached.fetch_all_decisions("CUST_001")
        clock.now = 29
        second = cached.fetch_all_decisions("CUST_001")

        assert first == second == scenario_decisions
        assert inner.fetch_all_decisions.call_count == 1

    def test_expires_after_ttl(self, scenario_decisions):
        inner = self._inner(scenario_decisions)
        clock = FakeClock()
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=clock)

        cached.fetch_all_decisions("CUST_001")
        clock.now = 30
        cached.fetch_all_decisions("CUST_001")
        assert inner.fetch_all_decisions.call_count == 2

    def test_cache_is_per_user(self, scenario_decisions):
        inner = self._inner(scenario_decisions)
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=FakeClock())

        cached.fetch_all_decisions("CUST_001")
        cached.fetch_all_decisions("CUST_002")
        assert inner.fetch_all_decisions.call_count == 2

    def test_force_refresh_bypasses_cache(self, scenario_decisions):
        inner = self._inner(scenario_decisions)
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=FakeClock())

        cached.fetch_all_decisions("CUST_001")
        cached.fetch_all_decisions("CUST_001", force_refresh=True)
        assert inner.fetch_all_decisions.call_count == 2

    def test_stale_served_on_failure(self, scenario_decisions):
        inner = self._inner(scenario_decisions)
        clock = FakeClock()
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=clock)
        cached.fetch_all_decisions("CUST_001")

        inner.fetch_all_decisions.side_effect = DataUnavailable("offline")
        clock.now = 100
        assert cached.fetch_all_decisions("CUST_001") == scenario_decisions

    def test_failure_without_cache_propagates(self):
        inner = MagicMock()
        inner.fetch_all_decisions.side_effect = DataUnavailable("offline")
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=FakeClock())

        with pytest.raises(DataUnavailable):
            cached.fetch_all_decisions("CUST_001")

    def test_returned_list_is_a_copy(self, scenario_decisions):
        inner = self._inner(scenario_decisions)
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=FakeClock())

        first = cached.fetch_all_decisions("CUST_001")
        first.clear()
        assert cached.fetch_all_decisions("CUST_001") == scenario_decisions

    def test_clear_cache(self, scenario_decisions):
        inner = self._inner(scenario_decisions)
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=FakeClock())

        cached.fetch_all_decisions("CUST_001")
        cached.clear_cache()
        cached.fetch_all_decisions("CUST_001")
        assert inner.fetch_all_decisions.call_count == 2

    def test_alert_calls_pass_through(self):
        inner = MagicMock()
        inner.fetch_fraud_alerts.return_value = []
        cached = CachedDecisionSource(inner, ttl_seconds=30, clock=FakeClock())

        cached.fetch_fraud_alerts("CUST_001")
        cached.fetch_fraud_alerts("CUST_001")
        cached.update_alert_status("fa_001", AlertStatus.BLOCKED)

        assert inner.fetch_fraud_alerts.call_count == 2
        inner.update_alert_status.assert_called_once_with("fa_001", AlertStatus.BLOCKED)


class TestGetDataSource:

    def test_fixture_backend_without_cache(self, test_config):
        source = get_data_source(test_config)
        assert isinstance(source, FixtureDataSource)

    def test_fixture_backend_with_cache(self, test_config):
        test_config['data_source']['cache_ttl_seconds'] = 30
        source = get_data_source(test_config)
        assert isinstance(source, CachedDecisionSource)
        assert isinstance(source.source, FixtureDataSource)
        assert source.ttl_seconds == 30

    def test_unknown_backend(self, test_config):
        test_config['data_source']['backend'] = 'firebase'
        with pytest.raises(ConfigurationError):
            get_data_source(test_config)

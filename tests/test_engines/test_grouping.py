"""Unit tests for bank grouping, loan-type grouping, stats and decision filters"""

from fairlens.constants import BiasSeverity, DecisionOutcome, LoanType
from fairlens.engines import (
    compute_user_stats,
    filter_by_bank,
    filter_by_outcome,
    group_by_bank,
    group_by_loan_type,
    search_decisions,
)


def test_scenario_bank_order(scenario_decisions):
    groups = group_by_bank(scenario_decisions)
    assert [g.bank_name for g in groups] == ["HDFC", "ICICI"]

    hdfc = groups[0]
    assert (hdfc.approved_count, hdfc.denied_count, hdfc.pending_count) == (1, 0, 1)
    assert [d.id for d in hdfc.decisions] == ["d1", "d3"]
    assert hdfc.latest_timestamp == 1730000002000


def test_group_order_is_first_appearance(decision_factory):
    decisions = [
        decision_factory(id="1", bank="Zeta"),
        decision_factory(id="2", bank="Alpha"),
        decision_factory(id="3", bank="Alpha"),
        decision_factory(id="4", bank="Alpha"),
        decision_factory(id="5", bank="Mid"),
        decision_factory(id="6", bank="Zeta"),
    ]
    assert [g.bank_name for g in group_by_bank(decisions)] == ["Zeta", "Alpha", "Mid"]


def test_empty_bank_name_is_its_own_group(decision_factory):
    decisions = [
        decision_factory(id="1", bank=""),
        decision_factory(id="2", bank="HDFC", outcome=DecisionOutcome.DENIED),
        decision_factory(id="3", bank="", outcome=DecisionOutcome.PENDING),
    ]
    groups = group_by_bank(decisions)
    assert [g.bank_name for g in groups] == ["", "HDFC"]
    assert [d.id for d in groups[0].decisions] == ["1", "3"]


def test_group_counts_sum_to_total(decision_factory):
    outcomes = list(DecisionOutcome)
    decisions = [
        decision_factory(id=str(i), bank=f"B{i % 3}", outcome=outcomes[i % 3])
        for i in range(10)
    ]
    groups = group_by_bank(decisions)
    total = sum(g.approved_count + g.denied_count + g.pending_count for g in groups)
    assert total == len(decisions)
    for g in groups:
        assert g.approved_count + g.denied_count + g.pending_count == len(g.decisions)


def test_group_by_bank_empty():
    assert group_by_bank([]) == []


def test_group_by_loan_type(decision_factory):
    decisions = [
        decision_factory(id="1", loan_type=LoanType.HOME, amount=100),
        decision_factory(id="2", loan_type=LoanType.CAR, amount=50),
        decision_factory(id="3", loan_type=LoanType.HOME, amount=25.5),
    ]
    groups = group_by_loan_type(decisions)
    assert [g.loan_type for g in groups] == [LoanType.HOME, LoanType.CAR]
    assert groups[0].display_name == "Home Loan"
    assert groups[0].total_amount == 125.5
    assert len(groups[0].decisions) == 2


def test_user_stats(decision_factory):
    decisions = [
        decision_factory(id="1", bank="HDFC", outcome=DecisionOutcome.APPROVED),
        decision_factory(id="2", bank="ICICI", outcome=DecisionOutcome.DENIED,
                         bias=True, severity=BiasSeverity.HIGH),
        decision_factory(id="3", bank="HDFC", outcome=DecisionOutcome.DENIED,
                         bias=True, severity=BiasSeverity.LOW, loan_type=LoanType.CAR),
        decision_factory(id="4", bank="SBI", outcome=DecisionOutcome.PENDING),
    ]
    stats = compute_user_stats(decisions)
    assert stats.total_decisions == 4
    assert (stats.approved_count, stats.denied_count, stats.pending_count) == (1, 2, 1)
    assert stats.bias_detected_count == 2
    assert stats.high_risk_bias_count == 1
    assert stats.banks_count == 3
    assert stats.loan_types_count == 2
    assert stats.approval_rate == 25.0


def test_filter_by_outcome(scenario_decisions):
    assert [d.id for d in filter_by_outcome(scenario_decisions, "DENIED")] == ["d2"]
    assert [d.id for d in filter_by_outcome(scenario_decisions, DecisionOutcome.APPROVED)] == ["d1"]


def test_filter_by_bank_is_case_insensitive(scenario_decisions):
    assert [d.id for d in filter_by_bank(scenario_decisions, "hdfc")] == ["d1", "d3"]


def test_search_decisions(scenario_decisions):
    assert [d.id for d in search_decisions(scenario_decisions, "icic")] == ["d2"]
    assert [d.id for d in search_decisions(scenario_decisions, "pending")] == ["d3"]
    assert search_decisions(scenario_decisions, "   ") == scenario_decisions
    assert search_decisions(scenario_decisions, "nowhere") == []

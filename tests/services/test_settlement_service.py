import pytest

from evensplit.services.settlement_service import SettlementService


def _pairs(transfers):
    return [(t.from_name, t.to_name, t.amount) for t in transfers]


def test_two_creditors_one_debtor(make_participants):
    # A:30, B:30, C:0 -> fair share 20, C pays both
    participants = make_participants(("A", 30), ("B", 30), ("C", 0))

    transfers = SettlementService.calculate_settlements(participants)

    assert _pairs(transfers) == [("C", "A", 10.0), ("C", "B", 10.0)]


def test_all_zero_totals(make_participants):
    participants = make_participants(("A", 0), ("B", 0))

    assert SettlementService.calculate_settlements(participants) == []


def test_single_participant(make_participants):
    participants = make_participants(("A", 50))

    assert SettlementService.calculate_settlements(participants) == []


def test_balanced_participant_excluded(make_participants):
    # A:100, B:0, C:50 -> fair share 50, C is already even
    participants = make_participants(("A", 100), ("B", 0), ("C", 50))

    transfers = SettlementService.calculate_settlements(participants)

    assert _pairs(transfers) == [("B", "A", 50.0)]
    assert transfers[0].from_id == participants[1].id
    assert transfers[0].to_id == participants[0].id


def test_empty_ledger():
    assert SettlementService.calculate_settlements([]) == []
    assert SettlementService.calculate_balances([]) == []


def test_equal_totals(make_participants):
    participants = make_participants(("A", 25), ("B", 25), ("C", 25))

    assert SettlementService.calculate_settlements(participants) == []


def test_walk_keeps_ledger_order(make_participants):
    # Fair share 20. Sorting by size would give two transfers; the
    # sequential walk gives three.
    participants = make_participants(("A", 25), ("B", 30), ("C", 10), ("D", 15))

    transfers = SettlementService.calculate_settlements(participants)

    assert _pairs(transfers) == [
        ("C", "A", 5.0),
        ("C", "B", 5.0),
        ("D", "B", 5.0),
    ]


def test_sub_tolerance_imbalance_is_suppressed(make_participants):
    participants = make_participants(("A", 10.005), ("B", 10))

    assert SettlementService.calculate_settlements(participants) == []


def test_settlement_equal_to_tolerance_is_suppressed(make_participants):
    participants = make_participants(("A", 2), ("B", 0))

    assert SettlementService.calculate_settlements(participants, tolerance=1.0) == []
    assert _pairs(SettlementService.calculate_settlements(participants, tolerance=0.5)) == [("B", "A", 1.0)]


def test_zero_tolerance_terminates(make_participants):
    participants = make_participants(("A", 3), ("B", 0), ("C", 0))

    transfers = SettlementService.calculate_settlements(participants, tolerance=0)

    assert _pairs(transfers) == [("B", "A", 1.0), ("C", "A", 1.0)]


def test_negative_tolerance_rejected(make_participants):
    with pytest.raises(ValueError):
        SettlementService.calculate_settlements(make_participants(("A", 1)), tolerance=-0.01)


def test_amounts_are_not_rounded(make_participants):
    participants = make_participants(("A", 10), ("B", 0), ("C", 0))

    transfers = SettlementService.calculate_settlements(participants)

    assert len(transfers) == 2
    assert transfers[0].amount == pytest.approx(10 / 3)
    assert transfers[0].amount != round(transfers[0].amount, 2)


def test_balances_sum_to_zero(make_participants):
    participants = make_participants(
        ("A", 12.34), ("B", 0), ("C", 7.5), ("D", 99.99), ("E", 3.33), ("F", 45)
    )

    balances = SettlementService.calculate_balances(participants)

    assert sum(b.difference for b in balances) == pytest.approx(0, abs=1e-9)
    assert [b.name for b in balances] == ["A", "B", "C", "D", "E", "F"]
    assert balances[3].is_creditor
    assert balances[1].is_debtor


def test_transfers_settle_every_balance(make_participants):
    participants = make_participants(
        ("A", 12.34), ("B", 0), ("C", 7.5), ("D", 99.99), ("E", 3.33), ("F", 45)
    )

    balances = {b.participant_id: b.difference for b in SettlementService.calculate_balances(participants)}
    for transfer in SettlementService.calculate_settlements(participants):
        assert transfer.amount > 0.01
        balances[transfer.from_id] += transfer.amount
        balances[transfer.to_id] -= transfer.amount

    for remaining in balances.values():
        assert abs(remaining) <= 0.01


def test_settlements_are_idempotent(make_participants):
    participants = make_participants(("A", 40), ("B", 5), ("C", 17.5))

    first = SettlementService.calculate_settlements(participants)
    second = SettlementService.calculate_settlements(participants)

    assert first == second


def test_summarize_ledger(ledger):
    alice = ledger.add_participant("Alice")
    ledger.add_participant("Bob")
    ledger.record_contribution(alice, 40)

    summary = SettlementService.summarize(ledger)

    assert summary.total == 40.0
    assert summary.fair_share == 20.0
    assert [p.name for p in summary.participants] == ["Alice", "Bob"]
    assert [b.difference for b in summary.balances] == [20.0, -20.0]
    assert _pairs(summary.transfers) == [("Bob", "Alice", 20.0)]
    assert summary.model_dump(by_alias=True)["transfers"][0]["from"] == "Bob"

from eisber.services import DedupLedger


def test_ledger_marks_identifiers_seen():
    ledger = DedupLedger()

    assert ledger.has_been_seen("ABC123") is False
    ledger.mark_seen("ABC123")
    assert ledger.has_been_seen("ABC123") is True
    assert "ABC123" in ledger
    assert "DEF456" not in ledger


def test_ledger_mark_seen_is_idempotent():
    ledger = DedupLedger()

    for _ in range(3):
        ledger.mark_seen("ABC123")

    assert ledger.has_been_seen("ABC123") is True
    assert len(ledger) == 1


def test_ledgers_are_independent():
    first = DedupLedger()
    first.mark_seen("ABC123")

    assert DedupLedger().has_been_seen("ABC123") is False

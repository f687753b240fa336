"""Tests for the completion ledger."""

from datetime import date, datetime

from habitkit.core.ledger import CompletionLedger, CompletionRecord


class TestCompletionLedger:
    def test_empty(self):
        ledger = CompletionLedger()
        assert ledger.is_completed("a", date(2024, 1, 1)) is False
        assert ledger.records() == []

    def test_toggle_on_and_off(self):
        ledger = CompletionLedger()
        assert ledger.toggle("a", date(2024, 1, 1)) is True
        assert ledger.is_completed("a", date(2024, 1, 1)) is True
        assert ledger.toggle("a", date(2024, 1, 1)) is False
        assert ledger.is_completed("a", date(2024, 1, 1)) is False

    def test_double_toggle_restores_original_state(self):
        original = [
            CompletionRecord("a", date(2024, 1, 1)),
            CompletionRecord("b", date(2024, 1, 2)),
        ]
        ledger = CompletionLedger(original)
        ledger.toggle("a", date(2024, 1, 1))
        ledger.toggle("a", date(2024, 1, 1))
        ledger.toggle("c", date(2024, 1, 3))
        ledger.toggle("c", date(2024, 1, 3))
        assert sorted(ledger.records(), key=lambda r: r.item_id) == original

    def test_per_day_records(self):
        ledger = CompletionLedger()
        ledger.toggle("a", date(2024, 1, 1))
        assert ledger.is_completed("a", date(2024, 1, 2)) is False
        assert ledger.is_completed("b", date(2024, 1, 1)) is False

    def test_time_of_day_ignored(self):
        ledger = CompletionLedger()
        ledger.toggle("a", datetime(2024, 1, 1, 7, 0))
        assert ledger.is_completed("a", datetime(2024, 1, 1, 22, 30)) is True
        assert ("a", date(2024, 1, 1)) in ledger

    def test_duplicate_records_collapse(self):
        record = CompletionRecord("a", date(2024, 1, 1))
        ledger = CompletionLedger([record, record])
        assert len(ledger) == 1

    def test_discard_item(self):
        ledger = CompletionLedger()
        ledger.toggle("a", date(2024, 1, 1))
        ledger.toggle("a", date(2024, 1, 2))
        ledger.toggle("b", date(2024, 1, 1))
        assert ledger.discard_item("a") == 2
        assert ledger.records() == [CompletionRecord("b", date(2024, 1, 1))]

    def test_records_keep_insertion_order(self):
        ledger = CompletionLedger()
        ledger.toggle("b", date(2024, 1, 2))
        ledger.toggle("a", date(2024, 1, 1))
        assert [r.item_id for r in ledger.records()] == ["b", "a"]


class TestCompletionRecord:
    def test_to_dict(self):
        record = CompletionRecord("a", date(2024, 1, 5))
        assert record.to_dict() == {"itemId": "a", "date": "2024-01-05"}

    def test_from_dict(self):
        record = CompletionRecord.from_dict({"itemId": "a", "date": "2024-01-05"})
        assert record == CompletionRecord("a", date(2024, 1, 5))

"""Tests for the JSON file checklist store."""

import json
import logging
from datetime import date

import pytest

from habitkit.adapters.file_store import COMPLETIONS_FILE, ITEMS_FILE, FileChecklistStore
from habitkit.checklist import Checklist
from habitkit.core.ledger import CompletionLedger, CompletionRecord
from habitkit.core.recurrence import ChecklistItem, ItemDraft, Recurrence
from habitkit.core.schedule import overdue_view, upcoming_view


@pytest.fixture
def store(tmp_path):
    return FileChecklistStore(tmp_path / "data")


class TestFileChecklistStore:
    def test_creates_data_dir(self, tmp_path):
        FileChecklistStore(tmp_path / "nested" / "data")
        assert (tmp_path / "nested" / "data").is_dir()

    def test_missing_files_load_empty(self, store):
        assert store.load_items() == []
        assert store.load_completions() == []

    def test_items_round_trip(self, store):
        items = [
            ChecklistItem(
                id="a",
                title="Stretch",
                recurrence=Recurrence.EVERY_N_DAYS,
                start_date=date(2024, 1, 1),
                created_at="2024-01-01T08:00:00",
                every_n_days=3,
            ),
            ChecklistItem(
                id="b",
                title="Gym",
                recurrence=Recurrence.SPECIFIC_DAYS,
                start_date=date(2024, 1, 2),
                specific_days=[1, 3],
            ),
        ]
        store.save_items(items)
        assert store.load_items() == items

    def test_writes_camelcase_json(self, store):
        store.save_completions([CompletionRecord("a", date(2024, 1, 4))])
        data = json.loads(store.completions_path.read_text())
        assert data == [{"itemId": "a", "date": "2024-01-04"}]
        assert store.completions_path.name == COMPLETIONS_FILE

    def test_corrupt_file_loads_empty(self, store, caplog):
        store.items_path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            assert store.load_items() == []
        assert ITEMS_FILE in caplog.text

    def test_non_array_loads_empty(self, store):
        store.completions_path.write_text('{"itemId": "a"}')
        assert store.load_completions() == []

    def test_malformed_records_skipped(self, store, caplog):
        store.items_path.write_text(
            json.dumps(
                [
                    {"id": "ok", "title": "Fine", "recurrence": "daily", "startDate": "2024-01-01"},
                    {"title": "No id", "recurrence": "daily", "startDate": "2024-01-01"},
                    {"id": "bad-date", "title": "X", "recurrence": "daily", "startDate": "soon"},
                ]
            )
        )
        with caplog.at_level(logging.WARNING):
            items = store.load_items()
        assert [i.id for i in items] == ["ok"]
        assert "Skipping malformed checklist item" in caplog.text

    def test_no_temp_file_left_behind(self, store):
        store.save_items([])
        assert [p.name for p in store.data_dir.iterdir()] == [ITEMS_FILE]


class TestChecklistPersistence:
    def test_state_survives_reload(self, tmp_path):
        data_dir = tmp_path / "data"
        first = Checklist(FileChecklistStore(data_dir))
        item = first.add_item(ItemDraft(title="Journal", start_date=date(2024, 1, 1)))
        first.toggle_completion(item.id, date(2024, 1, 1))

        second = Checklist(FileChecklistStore(data_dir))
        assert second.items == [item]
        assert second.is_completed(item.id, date(2024, 1, 1)) is True


class TestWronglyTypedRecords:
    def test_bad_parameters_skipped_and_views_survive(self, store, caplog):
        store.items_path.write_text(
            json.dumps(
                [
                    {"id": "ok", "title": "Fine", "recurrence": "every-n-days",
                     "everyNDays": "3", "startDate": "2024-01-01"},
                    {"id": "days", "title": "Bad days", "recurrence": "specific-days",
                     "specificDays": 3, "startDate": "2024-01-01"},
                    {"id": "interval", "title": "Bad interval", "recurrence": "every-n-days",
                     "everyNDays": "often", "startDate": "2024-01-01"},
                ]
            )
        )
        with caplog.at_level(logging.WARNING):
            items = store.load_items()
        assert [i.id for i in items] == ["ok"]
        assert caplog.text.count("Skipping malformed checklist item") == 2

        assert [o.day for o in upcoming_view(items, date(2024, 1, 2))] == [date(2024, 1, 4)]
        overdue = overdue_view(items, date(2024, 1, 2), CompletionLedger())
        assert [o.day for o in overdue] == [date(2024, 1, 1)]

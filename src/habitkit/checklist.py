"""Checklist service - the entry points a UI layer calls.

Holds the item list and completion ledger in memory, loads them from a
ChecklistStore on start and saves after every change. All scheduling is
derived from the snapshot on demand and never stored.
"""

import logging
import random
import string
from dataclasses import replace
from datetime import date, datetime
from typing import Callable

from .adapters.file_store import FileChecklistStore
from .config import Config
from .core.days import as_day
from .core.ledger import CompletionLedger, CompletionRecord
from .core.recurrence import ChecklistItem, ItemDraft, Recurrence, is_due_on
from .core.schedule import Occurrence, overdue_view, today_view, upcoming_view
from .errors import ItemNotFoundError
from .ports.checklist_store import ChecklistStore

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_item_id(now: datetime) -> str:
    """Generate an id like ``checklist-1718000000000-k3x9a``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=5))
    return f"checklist-{int(now.timestamp() * 1000)}-{suffix}"


class Checklist:
    """Checklist items, completions and their derived schedule views."""

    def __init__(self, store: ChecklistStore, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._clock = clock
        self._items: list[ChecklistItem] = store.load_items()
        self._ledger = CompletionLedger(store.load_completions())
        logger.debug(f"Loaded {len(self._items)} items, {len(self._ledger)} completions")

    @property
    def items(self) -> list[ChecklistItem]:
        return list(self._items)

    @property
    def completions(self) -> list[CompletionRecord]:
        return self._ledger.records()

    def today_date(self) -> date:
        return as_day(self._clock())

    def _index_of(self, item_id: str) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        raise ItemNotFoundError(f"No checklist item with id {item_id}")

    def get_item(self, id_or_prefix: str) -> ChecklistItem:
        """Look up an item by id, or by a unique id prefix."""
        for item in self._items:
            if item.id == id_or_prefix:
                return item
        matches = [item for item in self._items if item.id.startswith(id_or_prefix)]
        if len(matches) == 1:
            return matches[0]
        if matches:
            raise ItemNotFoundError(f"Ambiguous id prefix: {id_or_prefix}")
        raise ItemNotFoundError(f"No checklist item with id {id_or_prefix}")

    # ============== Mutations ==============

    def add_item(self, draft: ItemDraft) -> ChecklistItem:
        """Create an item from editor input. Assigns id, createdAt, startDate."""
        draft.validate()
        now = self._clock()
        base = ChecklistItem(
            id=new_item_id(now),
            title=draft.title.strip(),
            recurrence=Recurrence(draft.recurrence),
            start_date=as_day(draft.start_date or now),
            created_at=now.isoformat(timespec="seconds"),
        )
        item = base.with_recurrence(
            Recurrence(draft.recurrence),
            specific_days=draft.specific_days,
            every_n_days=draft.every_n_days,
        )
        self._items.append(item)
        self.store.save_items(self._items)
        logger.debug(f"Added item {item.id} ({item.recurrence.value})")
        return item

    def update_item(self, item: ChecklistItem) -> ChecklistItem:
        """Replace the stored item with the same id.

        The start date is normalized to a calendar day and parameters that do
        not belong to the item's recurrence are cleared.
        """
        index = self._index_of(item.id)
        item = replace(item, start_date=as_day(item.start_date))
        try:
            recurrence = Recurrence(item.recurrence)
        except ValueError:
            recurrence = None
        if recurrence is not None:
            item = item.with_recurrence(recurrence, item.specific_days, item.every_n_days)
        self._items[index] = item
        self.store.save_items(self._items)
        logger.debug(f"Updated item {item.id}")
        return item

    def delete_item(self, item_id: str) -> None:
        """Delete an item and its completion records."""
        index = self._index_of(item_id)
        del self._items[index]
        removed = self._ledger.discard_item(item_id)
        self.store.save_items(self._items)
        self.store.save_completions(self._ledger.records())
        logger.debug(f"Deleted item {item_id} and {removed} completions")

    def toggle_completion(self, item_id: str, day: date | datetime) -> bool:
        """Flip completion of an occurrence. Returns the new state."""
        completed = self._ledger.toggle(item_id, day)
        self.store.save_completions(self._ledger.records())
        logger.debug(f"Toggled {item_id} on {as_day(day)}: completed={completed}")
        return completed

    # ============== Queries ==============

    def get_items_for_date(self, day: date | datetime) -> list[ChecklistItem]:
        """Items due on a day, in list order."""
        return [item for item in self._items if is_due_on(item, day)]

    def is_completed(self, item_id: str, day: date | datetime) -> bool:
        return self._ledger.is_completed(item_id, day)

    def today(self, day: date | None = None) -> list[Occurrence]:
        return today_view(self._items, day or self.today_date())

    def upcoming(self, day: date | None = None) -> list[Occurrence]:
        return upcoming_view(self._items, day or self.today_date())

    def overdue(self, day: date | None = None) -> list[Occurrence]:
        return overdue_view(self._items, day or self.today_date(), self._ledger)


def get_checklist(config: Config) -> Checklist:
    """Build a Checklist backed by the configured data directory."""
    return Checklist(FileChecklistStore(config.resolved_data_dir()))

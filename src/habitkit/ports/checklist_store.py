"""Checklist storage interface."""

from typing import Protocol

from habitkit.core.ledger import CompletionRecord
from habitkit.core.recurrence import ChecklistItem


class ChecklistStore(Protocol):
    """Interface for persisting checklist items and completions."""

    def load_items(self) -> list[ChecklistItem]:
        """Load all items in insertion order. Empty if nothing is stored."""
        ...

    def save_items(self, items: list[ChecklistItem]) -> None:
        """Overwrite the stored item list."""
        ...

    def load_completions(self) -> list[CompletionRecord]:
        """Load all completion records."""
        ...

    def save_completions(self, records: list[CompletionRecord]) -> None:
        """Overwrite the stored completion records."""
        ...

"""Functional core - pure scheduling logic with no I/O."""

from .days import as_day, day_key, parse_day, add_days, end_of_year
from .recurrence import ChecklistItem, ItemDraft, Recurrence, is_due_on
from .ledger import CompletionLedger, CompletionRecord
from .schedule import (
    OVERDUE_WINDOW_DAYS,
    Occurrence,
    overdue_view,
    scan_window,
    today_view,
    upcoming_view,
)

__all__ = [
    # Days
    "as_day",
    "day_key",
    "parse_day",
    "add_days",
    "end_of_year",
    # Recurrence
    "ChecklistItem",
    "ItemDraft",
    "Recurrence",
    "is_due_on",
    # Ledger
    "CompletionLedger",
    "CompletionRecord",
    # Views
    "OVERDUE_WINDOW_DAYS",
    "Occurrence",
    "overdue_view",
    "scan_window",
    "today_view",
    "upcoming_view",
]

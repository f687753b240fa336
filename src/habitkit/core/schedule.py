"""Today / Upcoming / Overdue views over checklist items.

Pure functions - no I/O. Each call recomputes from the snapshot it is given.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable

from .days import add_days, end_of_year, iter_days, iter_days_back
from .ledger import CompletionLedger
from .recurrence import ChecklistItem, is_due_on

OVERDUE_WINDOW_DAYS = 30


@dataclass(frozen=True)
class Occurrence:
    """An item paired with a day it is due."""

    day: date
    item: ChecklistItem


def scan_window(
    items: list[ChecklistItem],
    days: Iterable[date],
    accept: Callable[[ChecklistItem, date], bool] | None = None,
) -> list[Occurrence]:
    """
    Walk days in the given order and emit each item at most once.

    The first day an item is due (and accepted) wins; later days are skipped.
    Within a day, items keep list order.
    """
    seen: set[str] = set()
    result = []
    for day in days:
        for item in items:
            if item.id in seen or not is_due_on(item, day):
                continue
            if accept is not None and not accept(item, day):
                continue
            seen.add(item.id)
            result.append(Occurrence(day=day, item=item))
    return result


def today_view(items: list[ChecklistItem], today: date) -> list[Occurrence]:
    """Items due today, in list order."""
    return [Occurrence(day=today, item=item) for item in items if is_due_on(item, today)]


def upcoming_view(items: list[ChecklistItem], today: date) -> list[Occurrence]:
    """
    Next single occurrence of each item after today, through Dec 31.

    Empty on Dec 31 - the horizon never wraps into next year.
    """
    return scan_window(items, iter_days(add_days(today, 1), end_of_year(today)))


def overdue_view(
    items: list[ChecklistItem],
    today: date,
    ledger: CompletionLedger,
    window: int = OVERDUE_WINDOW_DAYS,
) -> list[Occurrence]:
    """
    Latest missed occurrence of each item in the lookback window.

    Scans newest day first so only the most recent miss is kept. Items
    that are also due today are left to the Today view.
    """

    def missed(item: ChecklistItem, day: date) -> bool:
        return not ledger.is_completed(item.id, day) and not is_due_on(item, today)

    return scan_window(items, iter_days_back(today, window), missed)

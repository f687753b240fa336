"""Checklist items and the recurrence rule - no I/O dependencies."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum

from ..errors import InvalidDraftError
from .days import DAY_NAMES, as_day, day_key, days_between, parse_day, weekday_index

MIN_EVERY_N_DAYS = 2
MAX_EVERY_N_DAYS = 30


class Recurrence(str, Enum):
    """How often a checklist item comes due."""

    ONCE = "once"
    DAILY = "daily"
    WEEKDAYS = "weekdays"
    WEEKENDS = "weekends"
    SPECIFIC_DAYS = "specific-days"
    EVERY_N_DAYS = "every-n-days"

    @property
    def label(self) -> str:
        labels = {
            Recurrence.ONCE: "Once",
            Recurrence.DAILY: "Daily",
            Recurrence.WEEKDAYS: "Weekdays",
            Recurrence.WEEKENDS: "Weekends",
            Recurrence.SPECIFIC_DAYS: "Specific Days",
            Recurrence.EVERY_N_DAYS: "Every N Days",
        }
        return labels[self]


@dataclass
class ChecklistItem:
    """A checklist item and its recurrence.

    ``specific_days`` is meaningful only for SPECIFIC_DAYS (Sun=0 indices) and
    ``every_n_days`` only for EVERY_N_DAYS.
    """

    id: str
    title: str
    recurrence: Recurrence | str
    start_date: date
    created_at: str = ""
    specific_days: list[int] | None = None
    every_n_days: int | None = None

    def with_recurrence(
        self,
        recurrence: Recurrence,
        specific_days: list[int] | None = None,
        every_n_days: int | None = None,
    ) -> "ChecklistItem":
        """Copy with a new recurrence, dropping parameters of the old kind."""
        return replace(
            self,
            recurrence=recurrence,
            specific_days=sorted(set(specific_days or []))
            if recurrence == Recurrence.SPECIFIC_DAYS
            else None,
            every_n_days=every_n_days if recurrence == Recurrence.EVERY_N_DAYS else None,
        )

    def describe(self) -> str:
        """Human-readable recurrence summary."""
        match self.recurrence:
            case Recurrence.ONCE:
                return f"Once on {day_key(self.start_date)}"
            case Recurrence.SPECIFIC_DAYS:
                days = [DAY_NAMES[d] for d in sorted(self.specific_days or []) if 0 <= d <= 6]
                return f"Every {', '.join(days)}" if days else "Never (no days selected)"
            case Recurrence.EVERY_N_DAYS:
                return f"Every {self.every_n_days} days from {day_key(self.start_date)}"
            case Recurrence.DAILY | Recurrence.WEEKDAYS | Recurrence.WEEKENDS:
                return Recurrence(self.recurrence).label
            case _:
                return f"Unknown ({self.recurrence})"

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "recurrence": _recurrence_value(self.recurrence),
            "startDate": day_key(self.start_date),
            "createdAt": self.created_at,
        }
        if self.recurrence == Recurrence.SPECIFIC_DAYS and self.specific_days is not None:
            data["specificDays"] = list(self.specific_days)
        if self.recurrence == Recurrence.EVERY_N_DAYS and self.every_n_days is not None:
            data["everyNDays"] = self.every_n_days
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ChecklistItem":
        """Create an item from its stored JSON form.

        Unknown recurrence strings are kept as-is so the item survives a
        round trip; the predicate treats them as never due. Only the
        parameter of the item's own kind is read. A wrongly typed one
        raises TypeError or ValueError.
        """
        raw = data.get("recurrence", Recurrence.ONCE.value)
        try:
            recurrence: Recurrence | str = Recurrence(raw)
        except ValueError:
            recurrence = raw
        specific_days = None
        every_n_days = None
        if recurrence == Recurrence.SPECIFIC_DAYS:
            specific_days = _weekday_list(data.get("specificDays"))
        elif recurrence == Recurrence.EVERY_N_DAYS:
            every_n_days = _interval(data.get("everyNDays"))
        return cls(
            id=data["id"],
            title=data["title"],
            recurrence=recurrence,
            start_date=parse_day(data["startDate"]),
            created_at=data.get("createdAt", ""),
            specific_days=specific_days,
            every_n_days=every_n_days,
        )


def _interval(value) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"everyNDays must be an integer, got {value!r}")
    return int(value)


def _weekday_list(value) -> list[int] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"specificDays must be a list, got {value!r}")
    days = []
    for d in value:
        if isinstance(d, bool) or not isinstance(d, int):
            raise TypeError(f"specificDays entries must be integers, got {d!r}")
        days.append(d)
    return days


@dataclass
class ItemDraft:
    """Editor input for a new item, before an id is assigned."""

    title: str
    recurrence: Recurrence = Recurrence.DAILY
    specific_days: list[int] = field(default_factory=list)
    every_n_days: int = 2
    start_date: date | datetime | None = None

    def validate(self) -> None:
        """Raise InvalidDraftError if the draft would break item invariants."""
        if not self.title.strip():
            raise InvalidDraftError("Title must not be empty")
        try:
            recurrence = Recurrence(self.recurrence)
        except ValueError:
            raise InvalidDraftError(f"Unknown recurrence: {self.recurrence}") from None
        if recurrence == Recurrence.EVERY_N_DAYS and not (
            MIN_EVERY_N_DAYS <= self.every_n_days <= MAX_EVERY_N_DAYS
        ):
            raise InvalidDraftError(
                f"Interval must be between {MIN_EVERY_N_DAYS} and {MAX_EVERY_N_DAYS} days"
            )
        if recurrence == Recurrence.SPECIFIC_DAYS:
            bad = [d for d in self.specific_days if not 0 <= d <= 6]
            if bad:
                raise InvalidDraftError(f"Invalid weekday index: {bad[0]}")


def _recurrence_value(recurrence: Recurrence | str) -> str:
    return recurrence.value if isinstance(recurrence, Recurrence) else str(recurrence)


def is_due_on(item: ChecklistItem, day: date | datetime) -> bool:
    """
    Whether the item has an occurrence on the given calendar day.

    Pure function - never raises for malformed items, which are simply
    never due.
    """
    d = as_day(day)

    match item.recurrence:
        case Recurrence.ONCE:
            return d == _anchor(item)
        case Recurrence.DAILY:
            return True
        case Recurrence.WEEKDAYS:
            return 1 <= weekday_index(d) <= 5
        case Recurrence.WEEKENDS:
            return weekday_index(d) in (0, 6)
        case Recurrence.SPECIFIC_DAYS:
            days = item.specific_days
            if not isinstance(days, (list, tuple, set, frozenset)):
                return False
            return weekday_index(d) in days
        case Recurrence.EVERY_N_DAYS:
            n = item.every_n_days
            start = _anchor(item)
            if isinstance(n, bool) or not isinstance(n, int) or n <= 0 or start is None:
                return False
            diff = days_between(start, d)
            return diff >= 0 and diff % n == 0
        case _:
            return False


def _anchor(item: ChecklistItem) -> date | None:
    """The item's start date as a calendar day, or None if unusable."""
    try:
        return as_day(item.start_date)
    except (TypeError, ValueError, AttributeError):
        return None

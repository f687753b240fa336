"""Completion ledger - which occurrences were marked done."""

from dataclasses import dataclass
from datetime import date, datetime

from .days import as_day, day_key, parse_day


@dataclass(frozen=True)
class CompletionRecord:
    """The occurrence of item_id due on date was completed."""

    item_id: str
    date: date

    def to_dict(self) -> dict:
        return {"itemId": self.item_id, "date": day_key(self.date)}

    @classmethod
    def from_dict(cls, data: dict) -> "CompletionRecord":
        return cls(item_id=data["itemId"], date=parse_day(data["date"]))


class CompletionLedger:
    """
    Set of (item_id, day) completion pairs.

    Due-ness is not validated here; callers decide which days are togglable.
    """

    def __init__(self, records: list[CompletionRecord] | None = None):
        # dict keeps insertion order for stable persistence
        self._records: dict[tuple[str, date], CompletionRecord] = {}
        for record in records or []:
            self._records[(record.item_id, record.date)] = record

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: tuple[str, date]) -> bool:
        item_id, day = key
        return self.is_completed(item_id, day)

    def is_completed(self, item_id: str, day: date | datetime) -> bool:
        return (item_id, as_day(day)) in self._records

    def toggle(self, item_id: str, day: date | datetime) -> bool:
        """Flip completion for an occurrence. Returns the new state."""
        key = (item_id, as_day(day))
        if key in self._records:
            del self._records[key]
            return False
        self._records[key] = CompletionRecord(item_id=key[0], date=key[1])
        return True

    def discard_item(self, item_id: str) -> int:
        """Drop every record for an item. Returns how many were removed."""
        keys = [k for k in self._records if k[0] == item_id]
        for key in keys:
            del self._records[key]
        return len(keys)

    def records(self) -> list[CompletionRecord]:
        return list(self._records.values())

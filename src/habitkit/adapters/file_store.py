"""File-based checklist storage adapter."""

import json
import logging
from pathlib import Path

from habitkit.core.ledger import CompletionRecord
from habitkit.core.recurrence import ChecklistItem

logger = logging.getLogger(__name__)

ITEMS_FILE = "checklist_items.json"
COMPLETIONS_FILE = "checklist_completions.json"


class FileChecklistStore:
    """
    File-based checklist storage.

    Implements ChecklistStore protocol. Items and completions each live in
    a JSON array file under the data directory.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def items_path(self) -> Path:
        return self.data_dir / ITEMS_FILE

    @property
    def completions_path(self) -> Path:
        return self.data_dir / COMPLETIONS_FILE

    def _read_array(self, path: Path) -> list:
        """Read a JSON array. Missing or corrupt files read as empty."""
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read {path.name}: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Ignoring {path.name}: expected a JSON array")
            return []
        return data

    def _write_array(self, path: Path, data: list) -> None:
        # Atomic replace
        tmp = path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, indent=2))
        tmp.replace(path)

    def load_items(self) -> list[ChecklistItem]:
        items = []
        for entry in self._read_array(self.items_path):
            try:
                items.append(ChecklistItem.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed checklist item {entry!r}: {e}")
        return items

    def save_items(self, items: list[ChecklistItem]) -> None:
        self._write_array(self.items_path, [item.to_dict() for item in items])

    def load_completions(self) -> list[CompletionRecord]:
        records = []
        for entry in self._read_array(self.completions_path):
            try:
                records.append(CompletionRecord.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed completion {entry!r}: {e}")
        return records

    def save_completions(self, records: list[CompletionRecord]) -> None:
        self._write_array(self.completions_path, [r.to_dict() for r in records])

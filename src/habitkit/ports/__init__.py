"""Ports - interfaces/protocols for external dependencies."""

from .checklist_store import ChecklistStore

__all__ = [
    "ChecklistStore",
]

"""Adapters - I/O implementations of ports."""

from .file_store import FileChecklistStore

__all__ = [
    "FileChecklistStore",
]

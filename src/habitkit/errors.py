"""Exceptions raised outside the scheduling core."""


class HabitkitError(Exception):
    """Base class for habitkit errors."""

    pass


class ItemNotFoundError(HabitkitError):
    """Raised when an item id does not match any checklist item."""

    pass


class InvalidDraftError(HabitkitError):
    """Raised when editor input would produce a malformed item."""

    pass

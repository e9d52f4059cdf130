"""Exceptions raised by mixedlist."""

from __future__ import annotations


class MixedListError(Exception):
    """Base class for all mixedlist errors."""


class BoundsError(MixedListError, IndexError):
    """Raised when an index falls outside the range valid for an operation.

    ``insert`` accepts ``0 <= index <= size`` and ``pop`` accepts
    ``0 <= index < size``. Negative indices are never normalized.
    """


class NotFoundError(MixedListError, ValueError):
    """Raised when no element matches a searched value.

    Attributes:
        value: The value that was searched for
    """

    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not in list")
        self.value = value

    def __reduce__(self) -> tuple[type[NotFoundError], tuple[object]]:
        """Return pickle data carrying the searched value."""
        return (self.__class__, (self.value,))

from __future__ import annotations

from operator import index as op_index
from typing import TYPE_CHECKING, Any, overload

from mixedlist.errors import BoundsError, NotFoundError

if TYPE_CHECKING:
    import sys
    from collections.abc import Callable, Iterable
    from typing import SupportsIndex

    if sys.version_info < (3, 11):
        from typing_extensions import Self
    else:
        from typing import Self

# Returned by find() when no element matches
NOT_FOUND = -1

# Iterables of characters or bytes that are never treated as lists
_TEXT_TYPES = (str, bytes, bytearray)


def strict_equals(a: object, b: object) -> bool:
    """Return True if a and b have the same concrete type and compare equal.

    ``1``, ``1.0`` and ``True`` are all unequal to each other. There is no
    identity shortcut, so ``float("nan")`` never equals itself.
    """
    return type(a) is type(b) and bool(a == b)


def _fold_equals(a: object, b: object) -> bool:
    """Compare two strings ignoring case, anything else with strict_equals."""
    if isinstance(a, str) and isinstance(b, str):
        return a.lower() == b.lower()
    return strict_equals(a, b)


def _to_index(index: SupportsIndex, name: str) -> int:
    try:
        return op_index(index)
    except TypeError:
        raise TypeError(f"{name} must support __index__") from None


class mixedlist(list[Any]):  # noqa: N801
    """An ordered list of values of any type, compared by type and value."""

    def __init__(self, data: Iterable[Any] | None = None) -> None:
        """Initialize a mixedlist from data.

        Args:
            data: Initial elements (optional, defaults to empty). Any iterable
                  is accepted; its elements are stored in iteration order.
        """
        super().__init__()
        if data is not None:
            super().extend(data)

    @property
    def size(self) -> int:
        """Return the number of elements in the list."""
        return len(self)

    def __reduce_ex__(self, protocol: SupportsIndex) -> tuple[type[Self], tuple[list[Any]]]:
        """Return pickle data, preventing default list subclass behavior."""
        return (self.__class__, (list(self),))

    @overload
    def __getitem__(self, key: SupportsIndex) -> Any: ...

    @overload
    def __getitem__(self, key: slice) -> mixedlist: ...

    def __getitem__(self, key: SupportsIndex | slice) -> Any:
        """Get an element by index, or a new mixedlist for a slice."""
        if isinstance(key, slice):
            return mixedlist(super().__getitem__(key))
        return super().__getitem__(key)

    def __contains__(self, value: object) -> bool:
        """Check if value is in the list. See has()."""
        return self.has(value)

    def __eq__(self, other: object) -> bool:
        """Return True if other is a list with strictly equal elements. See equals()."""
        if not isinstance(other, list):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        """Return True if self does not equal other."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> None:  # type: ignore[override]
        """Raise TypeError as mixedlists are not hashable.

        Raises:
            TypeError: Always raised since mixedlists are mutable
        """
        raise TypeError("unhashable type: 'mixedlist'")

    def _order(self, other: list[Any], op: str) -> int:
        """Compare self with other lexicographically.

        Strictly equal pairs are skipped. The first differing pair decides,
        and must share a concrete type.

        Args:
            other: List to compare with
            op: Operator symbol used in error messages

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other

        Raises:
            TypeError: If the first differing elements have different types
                or cannot be ordered
        """
        for self_val, other_val in zip(self, other):
            if strict_equals(self_val, other_val):
                continue

            if type(self_val) is not type(other_val):
                raise TypeError(
                    f"{op!r} not supported between instances of "
                    f"{type(self_val).__name__!r} and {type(other_val).__name__!r} in mixedlist"
                )
            if self_val < other_val:
                return -1
            if self_val > other_val:
                return 1

            # Same type, unequal and unordered, e.g. NaN
            raise TypeError(f"{op!r} not supported between unordered {type(self_val).__name__!r} values")

        # Common prefix is equal, the shorter list is smaller
        if len(self) < len(other):
            return -1
        if len(self) > len(other):
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        """Return True if self is lexicographically less than other.

        Args:
            other: List to compare with

        Returns:
            True if self < other, False otherwise
        """
        if not isinstance(other, list):
            return NotImplemented
        return self._order(other, "<") < 0

    def __le__(self, other: object) -> bool:
        """Return True if self is lexicographically less than or equal to other."""
        if not isinstance(other, list):
            return NotImplemented
        return self._order(other, "<=") <= 0

    def __gt__(self, other: object) -> bool:
        """Return True if self is lexicographically greater than other."""
        if not isinstance(other, list):
            return NotImplemented
        return self._order(other, ">") > 0

    def __ge__(self, other: object) -> bool:
        """Return True if self is lexicographically greater than or equal to other."""
        if not isinstance(other, list):
            return NotImplemented
        return self._order(other, ">=") >= 0

    def __add__(self, other: Iterable[Any]) -> mixedlist:  # type: ignore[override]
        """Return a new mixedlist with the elements of self followed by other."""
        if isinstance(other, _TEXT_TYPES):
            return NotImplemented
        result = self.copy()
        result.extend(other)
        return result

    def __radd__(self, other: Iterable[Any]) -> mixedlist:
        """Return a new mixedlist with the elements of other followed by self."""
        if isinstance(other, _TEXT_TYPES):
            return NotImplemented
        result = mixedlist(other)
        result.extend(self)
        return result

    def __iadd__(self, other: Iterable[Any]) -> Self:  # type: ignore[override]
        """Extend self in place with other."""
        self.extend(other)
        return self

    def __mul__(self, other: SupportsIndex) -> mixedlist:
        """Return a new mixedlist repeating self other times."""
        result = super().__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return mixedlist(result)

    def __rmul__(self, other: SupportsIndex) -> mixedlist:
        """Return a new mixedlist repeating self other times."""
        return self.__mul__(other)

    def __copy__(self) -> mixedlist:
        """Return a shallow copy of the mixedlist."""
        return self.copy()

    def __repr__(self) -> str:
        """Return a string representation, e.g. ``mixedlist([1, 'two', 3.0])``."""
        return f"mixedlist({super().__repr__()})"

    def has(self, item: object) -> bool:
        """Return True if some element is strictly equal to item.

        Elements of a different concrete type than item never match, so
        ``mixedlist([1]).has(1.0)`` is False.
        """
        return any(strict_equals(element, item) for element in self)

    def append(self, item: Any) -> None:
        """Add item to the end of the list.

        Args:
            item: Value to append
        """
        super().append(item)

    def extend(self, iterable: Iterable[Any]) -> None:
        """Extend list by appending elements from iterable.

        Args:
            iterable: Iterable of values to append, may be empty
        """
        super().extend(iterable)

    def insert(self, index: SupportsIndex, item: Any) -> None:
        """Insert item so that it becomes the element at index.

        Args:
            index: Position for the new element, ``0 <= index <= size``
            item: Value to insert

        Raises:
            TypeError: If index doesn't support __index__
            BoundsError: If index is negative or greater than size
        """
        idx = _to_index(index, "index")

        # size itself is valid and appends
        if not 0 <= idx <= len(self):
            raise BoundsError("insert index out of range")

        super().insert(idx, item)

    def pop(self, index: SupportsIndex) -> Any:
        """Remove and return the element at index.

        Args:
            index: Position to remove, ``0 <= index < size``

        Returns:
            The removed element

        Raises:
            TypeError: If index doesn't support __index__
            BoundsError: If the list is empty or index is out of range
        """
        idx = _to_index(index, "index")

        if not self:
            raise BoundsError("pop from empty list")

        if not 0 <= idx < len(self):
            raise BoundsError("pop index out of range")

        return super().pop(idx)

    def clear(self) -> None:
        """Remove all items from the list."""
        super().clear()

    def find(self, item: object, start: SupportsIndex = 0, stop: SupportsIndex | None = None) -> int:
        """Return the first index of an element strictly equal to item, or -1.

        Args:
            item: Value to search for
            start: Start index (default 0)
            stop: Stop index (default None, meaning end of list)

        Returns:
            Index of the first match, or NOT_FOUND
        """
        size = len(self)
        start_int = _to_index(start, "start")
        stop_int = size if stop is None else _to_index(stop, "stop")

        # Normalize like slice bounds
        start_int = max(0, size + start_int) if start_int < 0 else min(start_int, size)
        stop_int = max(0, size + stop_int) if stop_int < 0 else min(stop_int, size)

        for i in range(start_int, stop_int):
            if strict_equals(super().__getitem__(i), item):
                return i

        return NOT_FOUND

    def index_of(self, item: object) -> int:
        """Return the index of the first element strictly equal to item.

        Raises:
            NotFoundError: If no element matches
        """
        idx = self.find(item)
        if idx == NOT_FOUND:
            raise NotFoundError(item)
        return idx

    def index(self, value: object, start: SupportsIndex = 0, stop: SupportsIndex | None = None) -> int:
        """Return first index of value within [start, stop).

        Raises:
            NotFoundError: If value is not found in the specified range
        """
        idx = self.find(value, start, stop)
        if idx == NOT_FOUND:
            raise NotFoundError(value)
        return idx

    def count(self, value: object) -> int:
        """Return number of elements strictly equal to value."""
        return sum(1 for element in self if strict_equals(element, value))

    def remove(self, value: object) -> None:
        """Remove the first element strictly equal to value.

        Raises:
            NotFoundError: If value is not found
        """
        super().__delitem__(self.index_of(value))

    def reverse(self) -> None:
        """Reverse the list in place."""
        super().reverse()

    def copy(self) -> mixedlist:
        """Return a shallow copy of the mixedlist.

        Returns:
            New mixedlist holding the same element objects in the same order
        """
        return mixedlist(self)

    def equals(self, other: Iterable[Any]) -> bool:
        """Return True if other has the same length and strictly equal elements.

        Args:
            other: List or other iterable to compare with. Strings and bytes
                   are never equal to a list.

        Returns:
            True if every pair at the same index has the same type and value
        """
        return self._compare(other, strict_equals)

    def equals_ignore_case(self, other: Iterable[Any]) -> bool:
        """Return True if other equals self, comparing strings case-insensitively.

        Only positions where both elements are strings are lowercased; every
        other pair, including a string against a non-string, uses strict
        equality.

        Args:
            other: List or other iterable to compare with
        """
        return self._compare(other, _fold_equals)

    def _compare(self, other: Iterable[Any], eq: Callable[[object, object], bool]) -> bool:
        if isinstance(other, _TEXT_TYPES):
            return False

        if not hasattr(other, "__len__"):
            other = list(other)

        # Length mismatch short-circuits
        if len(self) != len(other):  # type: ignore[arg-type]
            return False

        return all(eq(a, b) for a, b in zip(self, other))

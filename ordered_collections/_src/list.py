from __future__ import annotations
import operator
from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable, Iterator
from heapq import merge
from typing import Any, Generic, Optional, SupportsIndex, Type, TypeVar, Union, overload

from ordered_collections._src.comparable import SupportsRichComparison
from .mutable_sequence import OrderedMutableSequence

__all__ = ["OrderedList"]

Self = TypeVar("Self", bound="OrderedList")
T = TypeVar("T", bound=SupportsRichComparison)

# Batches smaller than len(self) // EXTEND_RATIO are inserted one at a time.
EXTEND_RATIO: int = 8


class OrderedList(OrderedMutableSequence[T], Generic[T]):
    """
    A list that keeps its elements in ascending order.

    Elements are placed by binary search, so each `add`, `remove`, and
    indexed assignment costs O(log n) comparisons plus an O(n) shift of
    the underlying list. Equal elements are kept, newer ones after older
    ones.

    Indices must satisfy 0 <= index < len(self). Negative indices are not
    wrapped around and raise IndexError. None cannot be stored.

    OrderedList does no locking. Callers sharing one between threads must
    synchronize around it themselves. Modifying the list while iterating
    over it makes the iterator raise RuntimeError.
    """
    _items: list[T]
    _version: int

    __slots__ = {
        "_items":
            "The elements in ascending order.",
        "_version":
            "Incremented on every change, used to invalidate running iterators.",
    }

    def __init__(self: Self, iterable: Optional[Iterable[T]] = None, /) -> None:
        items: list[T]
        if iterable is None:
            items = []
        elif isinstance(iterable, Iterable):
            items = [*iterable]
            self._check_elements(items)
            items.sort()
        else:
            raise TypeError(f"{type(self).__name__} expected an iterable, got {iterable!r}")
        self._items = items
        self._version = 0

    def __contains__(self: Self, value: Any, /) -> bool:
        if value is None:
            return False
        items = self._items
        i = bisect_left(items, value)
        return i < len(items) and not value < items[i]

    def __copy__(self: Self, /) -> Self:
        return type(self).__from_sorted__(self._items)

    def __delitem__(self: Self, index: Union[int, slice], /) -> None:
        items = self._items
        if isinstance(index, slice):
            len_ = len(items)
            del items[index]
            if len(items) != len_:
                self._version += 1
            return
        del items[self._check_index(index)]
        self._version += 1

    @classmethod
    def __from_sorted__(cls: Type[Self], iterable: Iterable[T], /) -> Self:
        self = cls()
        self._items = [*iterable]
        return self

    @overload
    def __getitem__(self: Self, index: int, /) -> T: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> Self: ...

    def __getitem__(self, index, /):
        if isinstance(index, slice):
            data = self._items[index]
            if range(len(self._items))[index].step < 0:
                data.reverse()
            return type(self).__from_sorted__(data)
        return self._items[self._check_index(index)]

    def __iter__(self: Self, /) -> Iterator[T]:
        return self._guarded(iter(self._items), self._version)

    def __len__(self: Self, /) -> int:
        return len(self._items)

    def __reversed__(self: Self, /) -> Iterator[T]:
        return self._guarded(reversed(self._items), self._version)

    @overload
    def __setitem__(self: Self, index: int, element: T, /) -> None: ...

    @overload
    def __setitem__(self: Self, index: slice, element: Iterable[T], /) -> None: ...

    def __setitem__(self, index, element, /):
        if isinstance(index, slice):
            return super().__setitem__(index, element)
        items = self._items
        index = self._check_index(index)
        self._check_elements((element,))
        # Position is found before the list is touched.
        i = bisect_right(items, element)
        if i > index:
            i -= 1
        del items[index]
        items.insert(i, element)
        self._version += 1

    def _check_elements(self: Self, elements: Iterable[Any], /) -> None:
        if any(element is None for element in elements):
            raise TypeError(f"{type(self).__name__} does not accept None")

    def _check_index(self: Self, index: Any, /) -> int:
        if isinstance(index, int):
            pass
        elif isinstance(index, SupportsIndex):
            index = operator.index(index)
        else:
            raise TypeError(f"{type(self).__name__} indices must be integers or slices, got {index!r}")
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} is out of range for {type(self).__name__}"
                f" of length {len(self._items)}, expected 0 <= index < {len(self._items)}"
            )
        return index

    def _guarded(self: Self, iterator: Iterator[T], version: int, /) -> Iterator[T]:
        for element in iterator:
            yield element
            if self._version != version:
                raise RuntimeError(f"{type(self).__name__} mutated during iteration")

    def add(self: Self, element: T, /) -> None:
        self._check_elements((element,))
        insort(self._items, element)
        self._version += 1

    def clear(self: Self, /) -> None:
        if self._items:
            self._items.clear()
            self._version += 1

    def discard(self: Self, element: Any, /) -> None:
        if element is None:
            return
        items = self._items
        i = bisect_left(items, element)
        if i < len(items) and not element < items[i]:
            del items[i]
            self._version += 1

    def extend(self: Self, iterable: Iterable[T], /) -> None:
        items = self._items
        if not isinstance(iterable, Iterable):
            raise TypeError(f"extend expected an iterable, got {iterable!r}")
        data = [*iterable]
        self._check_elements(data)
        if len(data) == 0:
            return
        data.sort()
        if len(data) < len(items) // EXTEND_RATIO:
            for element in data:
                insort(items, element)
        else:
            items[:] = [*merge(items, data)]
        self._version += 1

import copy
import operator
from abc import ABC, abstractmethod
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from heapq import merge
from inspect import isabstract
from typing import Any, Generic, Literal, Optional, SupportsIndex, Type, TypeVar, overload

from ordered_collections._src.comparable import SupportsRichComparison

T_co = TypeVar("T_co", bound=SupportsRichComparison, covariant=True)

Self = TypeVar("Self", bound="OrderedSequence")

reprs_seen: set[int] = set()


class OrderedSequence(Sequence[T_co], ABC, Generic[T_co]):
    """
    A sequence whose elements are always in ascending order.

    Two elements are considered equal when neither is less than the other.
    """

    __slots__ = ()

    def __add__(self: Self, other: "OrderedSequence[T_co]", /) -> "OrderedSequence[T_co]":
        # Find common non-abstract parent class.
        for cls in type(self).mro():
            if isinstance(other, cls) and issubclass(cls, OrderedSequence) and not isabstract(cls):
                return cls.__from_sorted__(merge(self, other))
        return NotImplemented

    def __contains__(self: Self, value: Any, /) -> bool:
        if value is None:
            return False
        i = bisect_left(self, value)
        return i < len(self) and not value < self[i]

    def __copy__(self: Self, /) -> Self:
        return type(self).__from_sorted__(self)

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, OrderedSequence):
            return NotImplemented
        return len(self) == len(other) and all(x == y for x, y in zip(self, other))

    @classmethod
    @abstractmethod
    def __from_sorted__(cls: Type[Self], iterable: Iterable[T_co], /) -> Self:
        raise NotImplementedError(f"__from_sorted__ is a required method for ordered sequences")

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> "OrderedSequence[T_co]": ...

    @abstractmethod
    def __getitem__(self, index, /):
        raise NotImplementedError(f"__getitem__ is a required method for ordered sequences")

    @abstractmethod
    def __len__(self: Self, /) -> int:
        raise NotImplementedError(f"__len__ is a required method for ordered sequences")

    def __repr__(self: Self, /) -> str:
        if id(self) in reprs_seen:
            return "..."
        elif len(self) == 0:
            return f"{type(self).__name__}()"
        reprs_seen.add(id(self))
        try:
            data = ", ".join([repr(x) for x in self])
            return f"{type(self).__name__}([{data}])"
        finally:
            reprs_seen.remove(id(self))

    def copy(self: Self, /) -> Self:
        return copy.copy(self)

    def count(self: Self, value: Any, /) -> int:
        if value is None:
            return 0
        lo = self.index(value, mode="left")
        hi = self.index(value, lo, mode="right")
        return hi - lo

    @classmethod
    def from_sorted(cls: Type[Self], iterable: Iterable[T_co], /) -> Self:
        """Build an instance from elements that are already in ascending order."""
        if not isinstance(iterable, Iterable):
            raise TypeError(f"{cls.__name__}.from_sorted expected an iterable, got {iterable!r}")
        return cls.__from_sorted__(iterable)

    def index(self: Self, value: Any, /, start: int = 0, stop: Optional[int] = None, *, mode: Literal["left", "exact", "right"] = "exact") -> int:
        """
        Find the position of `value` between `start` and `stop`.

        mode="left" and mode="right" return the leftmost and rightmost
        positions where `value` could be inserted while keeping the order.
        mode="exact" returns the position of the first equal element and
        raises ValueError if there is none.
        """
        if isinstance(start, int):
            pass
        elif isinstance(start, SupportsIndex):
            start = operator.index(start)
        else:
            raise TypeError(f"could not interpret the start as an integer, got {start!r}")
        if stop is None:
            stop = len(self)
        elif isinstance(stop, int):
            pass
        elif isinstance(stop, SupportsIndex):
            stop = operator.index(stop)
        else:
            raise TypeError(f"could not interpret the stop as an integer, got {stop!r}")
        start = max(0, min(start, len(self)))
        stop = max(start, min(stop, len(self)))
        if not isinstance(mode, str):
            raise TypeError(f"expected 'left', 'exact', or 'right' for the mode, got {mode!r}")
        elif mode == "left":
            return bisect_left(self, value, start, stop)
        elif mode == "right":
            return bisect_right(self, value, start, stop)
        elif mode == "exact":
            i = bisect_left(self, value, start, stop)
            if i >= stop or value < self[i]:
                raise ValueError(f"{value!r} is not in the {type(self).__name__}")
            return i
        else:
            raise ValueError(f"expected 'left', 'exact', or 'right' for the mode, got {mode!r}")

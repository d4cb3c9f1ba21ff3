from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence
from typing import Any, Generic, Optional, TypeVar, Union, overload

from ordered_collections._src.comparable import SupportsRichComparison
from .sequence import OrderedSequence

T = TypeVar("T", bound=SupportsRichComparison)

Self = TypeVar("Self", bound="OrderedMutableSequence")


class OrderedMutableSequence(OrderedSequence[T], MutableSequence[T], ABC, Generic[T]):
    """
    An ordered sequence that can be modified while staying in order.

    Elements are added by value rather than by position, so `insert`,
    `reverse`, and slice assignment are not supported. `remove` does not
    raise if the element is missing.
    """

    __slots__ = ()

    @abstractmethod
    def __delitem__(self: Self, index: Union[int, slice], /) -> None:
        raise NotImplementedError(f"__delitem__ is a required method for ordered mutable sequences")

    @overload
    def __getitem__(self: Self, index: int, /) -> T: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> Self: ...

    @abstractmethod
    def __getitem__(self, index, /):
        raise NotImplementedError(f"__getitem__ is a required method for ordered mutable sequences")

    def __iadd__(self: Self, other: Iterable[T], /) -> Self:
        if not isinstance(other, Iterable):
            return NotImplemented
        self.extend(other)
        return self

    @overload
    def __setitem__(self: Self, index: int, element: T, /) -> None: ...

    @overload
    def __setitem__(self: Self, index: slice, element: Iterable[T], /) -> None: ...

    def __setitem__(self, index, element, /):
        if isinstance(index, slice):
            raise NotImplementedError(f"{type(self).__name__} does not support slice assignment")
        old = self[index]
        if element is None:
            raise TypeError(f"{type(self).__name__} does not accept None")
        del self[index]
        try:
            self.add(element)
        except Exception:
            self.add(old)
            raise

    @abstractmethod
    def add(self: Self, element: T, /) -> None:
        raise NotImplementedError(f"add is a required method for ordered mutable sequences")

    def append(self: Self, element: T, /) -> None:
        self.add(element)

    @abstractmethod
    def discard(self: Self, element: Any, /) -> None:
        raise NotImplementedError(f"discard is a required method for ordered mutable sequences")

    def extend(self: Self, iterable: Iterable[T], /) -> None:
        if not isinstance(iterable, Iterable):
            raise TypeError(f"extend expected an iterable, got {iterable!r}")
        # Iterating over self while adding to it would never end.
        for element in ([*iterable] if iterable is self else iterable):
            self.add(element)

    def insert(self: Self, index: int, element: T, /) -> None:
        raise NotImplementedError(
            f"ordered mutable sequences do not support indexed insertion, use"
            f" {type(self).__name__}.add instead"
        )

    def pop(self: Self, index: Optional[int] = None, /) -> T:
        if len(self) == 0:
            raise IndexError(f"pop from empty {type(self).__name__}")
        if index is None:
            index = len(self) - 1
        element = self[index]
        del self[index]
        return element

    def remove(self: Self, element: Any, /) -> None:
        """Remove one element equal to `element`, doing nothing if there is none."""
        self.discard(element)

    def reverse(self: Self, /) -> None:
        raise NotImplementedError(f"{type(self).__name__} cannot be reversed in place, use reversed() instead")

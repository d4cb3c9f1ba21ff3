from bisect import bisect_left, insort

import pytest

from ordered_collections import OrderedList
from ordered_collections.abc import OrderedMutableSequence, OrderedSequence, SupportsRichComparison


class PlainOrderedList(OrderedMutableSequence):
    """Implements only the abstract methods, everything else comes from the mixins."""

    __slots__ = ("_data",)

    def __init__(self, iterable=()):
        self._data = sorted(iterable)

    def __delitem__(self, index):
        del self._data[index]

    @classmethod
    def __from_sorted__(cls, iterable):
        self = cls()
        self._data = [*iterable]
        return self

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self).__from_sorted__(self._data[index])
        return self._data[index]

    def __len__(self):
        return len(self._data)

    def add(self, element):
        insort(self._data, element)

    def discard(self, element):
        i = bisect_left(self._data, element)
        if i < len(self._data) and self._data[i] == element:
            del self._data[i]


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        OrderedSequence()
    with pytest.raises(TypeError):
        OrderedMutableSequence()


def test_builtin_types_support_rich_comparison():
    assert isinstance(3, SupportsRichComparison)
    assert isinstance("a", SupportsRichComparison)


def test_setitem_mixin_resorts():
    ordered = PlainOrderedList([5, 10])
    ordered[1] = 1
    assert list(ordered) == [1, 5]


def test_setitem_mixin_rejects_none():
    ordered = PlainOrderedList([5, 10])
    with pytest.raises(TypeError):
        ordered[0] = None
    assert list(ordered) == [5, 10]


def test_setitem_mixin_restores_on_failed_comparison():
    ordered = PlainOrderedList([5, 10])
    with pytest.raises(TypeError):
        ordered[1] = "a"
    assert list(ordered) == [5, 10]


def test_remove_mixin_is_forgiving():
    ordered = PlainOrderedList([1, 2])
    ordered.remove(3)
    ordered.remove(1)
    assert list(ordered) == [2]


def test_append_and_extend_mixins():
    ordered = PlainOrderedList([3])
    ordered.append(1)
    ordered.extend([4, 2])
    ordered += [0]
    assert list(ordered) == [0, 1, 2, 3, 4]


def test_extend_mixin_with_itself():
    ordered = PlainOrderedList([1, 2])
    ordered.extend(ordered)
    assert list(ordered) == [1, 1, 2, 2]


def test_pop_and_clear_mixins():
    ordered = PlainOrderedList([1, 2, 3])
    assert ordered.pop() == 3
    ordered.clear()
    assert len(ordered) == 0
    with pytest.raises(IndexError):
        ordered.pop()


def test_sequence_mixins():
    ordered = PlainOrderedList([3, 1, 2, 2])
    assert 2 in ordered
    assert 5 not in ordered
    assert ordered.index(2) == 1
    assert ordered.count(2) == 2
    assert list(reversed(ordered)) == [3, 2, 2, 1]
    assert repr(ordered) == "PlainOrderedList([1, 2, 2, 3])"
    assert repr(PlainOrderedList()) == "PlainOrderedList()"


def test_copy_and_add_mixins():
    ordered = PlainOrderedList([2, 1])
    duplicate = ordered.copy()
    duplicate.add(0)
    assert list(ordered) == [1, 2]
    merged = ordered + PlainOrderedList([3])
    assert isinstance(merged, PlainOrderedList)
    assert list(merged) == [1, 2, 3]


def test_equality_across_implementations():
    assert PlainOrderedList([2, 1]) == OrderedList([1, 2])
    assert PlainOrderedList([1]) != OrderedList([2])


def test_positional_mutation_is_not_supported():
    ordered = PlainOrderedList([1])
    with pytest.raises(NotImplementedError):
        ordered.insert(0, 2)
    with pytest.raises(NotImplementedError):
        ordered.reverse()
    with pytest.raises(NotImplementedError):
        ordered[:] = [2]

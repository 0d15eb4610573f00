from typing import Any, Optional, Iterable, Iterator, Callable, TypeVar, Generic
from functools import cmp_to_key

from rtkit.errors import IndexOutOfRange
from rtkit.util.buffer import GrowthBuffer
from rtkit.containers.base import ListLike
from rtkit.containers.values import same_value, compare_values


# -----------------------------------------------------------------------------


_T = TypeVar('_T')

Predicate = Callable[[Any], Any]
Comparer = Callable[[Any, Any], int]


class ArrayList(Generic[_T], ListLike[_T]):
    """ Sequence of values addressed by a zero-based index.

        Valid indices are `[0, count())`. Elements live in a contiguous
        growth buffer; insertions and removals in the middle shift the
        trailing elements, so their relative order is always preserved.
    """

    def __init__(self, values: 'Optional[Iterable[_T]]' = None) -> 'None':
        self.__items: 'GrowthBuffer[_T]' = GrowthBuffer()
        if values is not None:
            for value in values:
                self.add(value)

    def clear(self) -> 'None':
        self.__items.clear()

    def count(self) -> 'int':
        return len(self.__items)

    def iterate(self) -> 'Iterator[_T]':
        return iter(self.__items)

    def contains(self, value: 'Any') -> 'bool':
        return self.index_of(value) != -1

    def index_of(self, value: 'Any') -> 'int':
        """ Returns the index of the first occurrence of `value`, or -1.
        """
        for i, e in enumerate(self.__items):
            if same_value(value, e):
                return i
        return -1

    def last_index_of(self, value: 'Any') -> 'int':
        """ Returns the index of the last occurrence of `value`, or -1.
        """
        items = self.__items
        for i in range(len(items) - 1, -1, -1):
            if same_value(value, items[i]):
                return i
        return -1

    def add(self, value: '_T') -> 'None':
        self.__items.append(value)

    def add_range(self, values: 'Iterable[_T]') -> 'None':
        self.__items.insert_range(len(self.__items), values)

    def get(self, index: 'int') -> '_T':
        return self.__items[index]

    def set(self, index: 'int', value: '_T') -> 'None':
        self.__items[index] = value

    def insert(self, index: 'int', value: '_T') -> 'None':
        """ Inserts `value` before position `index`; `index == count()`
            appends.
        """
        self.__items.insert(index, value)

    def insert_range(self, index: 'int', values: 'Iterable[_T]') -> 'None':
        self.__items.insert_range(index, values)

    def remove(self, value: 'Any') -> 'bool':
        index = self.index_of(value)
        if index < 0:
            return False
        self.__items.remove_at(index)
        return True

    def remove_at(self, index: 'int') -> 'None':
        self.__items.remove_at(index)

    def remove_range(self, index: 'int', count: 'int') -> 'None':
        """ Removes up to `count` elements starting at `index`.

            `index` must be a valid index. `count` is clamped to the number
            of elements available from `index`; a count of zero or less
            removes nothing.
        """
        self.__items.remove_range(index, count)

    def remove_all(self, match: 'Predicate') -> 'int':
        """ Removes every element satisfying `match` in a single pass and
            returns the number of removed elements.
        """
        items = self.__items
        # The list is left untouched if `match` raises.
        survivors = [e for e in items if not match(e)]
        removed = len(items) - len(survivors)
        items.replace(survivors)
        return removed

    def reverse(self) -> 'None':
        start, end = 0, len(self.__items) - 1
        while start < end:
            self.__items.swap(start, end)
            start += 1
            end -= 1

    def slice(self, index: 'int', count: 'int') -> 'ArrayList[_T]':
        """ Returns a new list holding up to `count` elements beginning at
            `index`. A count of zero or less gives an empty list.
        """
        size = len(self.__items)
        if index < 0 or index >= size:
            raise IndexOutOfRange(index, size)
        count = min(count, size - index)
        return ArrayList(self.__items[i] for i in range(index, index + count))

    def sort(self, comparer: 'Optional[Comparer]' = None) -> 'None':
        """ Sorts the list in place.

            Without a comparer, elements implementing `Comparable` are ordered
            by their `compare` method and any other element by `<`. A
            comparer receives two elements and returns a negative number,
            zero or a positive number when the first one is respectively
            less than, equal to or greater than the second. The sort is
            stable.
        """
        key = cmp_to_key(compare_values if comparer is None else comparer)
        self.__items.replace(sorted(self.__items, key=key))

    def all(self, match: 'Predicate') -> 'bool':
        for e in self.__items:
            if not match(e):
                return False
        return True

    def any(self, match: 'Predicate') -> 'bool':
        for e in self.__items:
            if match(e):
                return True
        return False

    def filter(self, match: 'Predicate') -> 'ArrayList[_T]':
        return ArrayList(e for e in self.__items if match(e))

    def __reversed__(self) -> 'Iterator[_T]':
        return reversed(self.__items)

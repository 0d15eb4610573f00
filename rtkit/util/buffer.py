from typing import List, Iterable, Iterator, Optional, TypeVar, Generic

from rtkit.errors import IndexOutOfRange


# -----------------------------------------------------------------------------


_E = TypeVar('_E')


class GrowthBuffer(Generic[_E]):
    """ Contiguous storage with amortized growth.

        The buffer keeps `capacity` slots, of which the first `count` hold
        valid elements. When an insertion needs more room, capacity is doubled
        (or raised to the required size, whichever is larger), so appending
        costs O(1) on average. Slots past `count` are kept cleared, so removed
        elements are not retained.

        Index checks are made against `count`, never against `capacity`.
    """

    MIN_CAPACITY = 4

    def __init__(self, capacity: 'int' = 0) -> 'None':
        self.__count = 0
        self.__slots: 'List[Optional[_E]]' = [None] * max(capacity, 0)

    @property
    def capacity(self) -> 'int':
        return len(self.__slots)

    def ensure_capacity(self, required: 'int') -> 'None':
        capacity = len(self.__slots)
        if required <= capacity:
            return
        new_capacity = max(required, capacity * 2, GrowthBuffer.MIN_CAPACITY)
        self.__slots.extend([None] * (new_capacity - capacity))

    def append(self, e: '_E') -> 'None':
        count = self.__count
        self.ensure_capacity(count + 1)
        self.__slots[count] = e
        self.__count = count + 1

    def pop(self) -> '_E':
        self.__check_index(self.__count - 1)
        self.__count -= 1
        e = self.__slots[self.__count]
        self.__slots[self.__count] = None
        return e

    def insert(self, index: 'int', e: '_E') -> 'None':
        self.insert_range(index, (e,))

    def insert_range(self, index: 'int', elements: 'Iterable[_E]') -> 'None':
        count = self.__count
        if index < 0 or index > count:
            raise IndexOutOfRange(index, count)
        # Materialize first: `elements` may be a view of this very buffer.
        items = list(elements)
        length = len(items)
        if length == 0:
            return
        self.ensure_capacity(count + length)
        slots = self.__slots
        for i in range(count - 1, index - 1, -1):
            slots[i + length] = slots[i]
        slots[index:index + length] = items
        self.__count = count + length

    def remove_range(self, index: 'int', length: 'int') -> 'None':
        count = self.__count
        self.__check_index(index)
        length = min(length, count - index)
        if length <= 0:
            return
        slots = self.__slots
        for i in range(index + length, count):
            slots[i - length] = slots[i]
        for i in range(count - length, count):
            slots[i] = None
        self.__count = count - length

    def remove_at(self, index: 'int') -> '_E':
        self.__check_index(index)
        e = self.__slots[index]
        self.remove_range(index, 1)
        return e

    def compact(self, keep: 'int', start: 'int') -> 'None':
        """ Moves `keep` elements beginning at `start` to the front,
            dropping everything else.
        """
        slots = self.__slots
        for i in range(keep):
            slots[i] = slots[start + i]
        for i in range(keep, self.__count):
            slots[i] = None
        self.__count = keep

    def truncate(self, count: 'int') -> 'None':
        for i in range(max(count, 0), self.__count):
            self.__slots[i] = None
        self.__count = min(max(count, 0), self.__count)

    def clear(self) -> 'None':
        self.__count = 0
        self.__slots = []

    def swap(self, i: 'int', j: 'int') -> 'None':
        slots = self.__slots
        slots[i], slots[j] = slots[j], slots[i]

    def replace(self, elements: 'Iterable[_E]') -> 'None':
        items = list(elements)
        self.clear()
        self.ensure_capacity(len(items))
        self.__slots[:len(items)] = items
        self.__count = len(items)

    def __setitem__(self, index: 'int', e: '_E') -> 'None':
        self.__check_index(index)
        self.__slots[index] = e

    def __getitem__(self, index: 'int') -> '_E':
        self.__check_index(index)
        return self.__slots[index]

    def __iter__(self) -> 'Iterator[_E]':
        return (self.__slots[i] for i in range(self.__count))

    def __reversed__(self) -> 'Iterator[_E]':
        return (self.__slots[i] for i in reversed(range(self.__count)))

    def __len__(self) -> 'int':
        return self.__count

    def __check_index(self, index: 'int') -> 'None':
        if index < 0 or index >= self.__count:
            raise IndexOutOfRange(index, self.__count)


from typing import Optional, Iterable, Iterator, Tuple, TypeVar, Generic

from rtkit.errors import EmptyContainerError
from rtkit.util.buffer import GrowthBuffer
from rtkit.containers.base import Collection


# -----------------------------------------------------------------------------


_T = TypeVar('_T')


class Queue(Generic[_T], Collection[_T]):
    """ First-in-first-out collection.

        Elements are appended to a growth buffer and consumed by advancing a
        head cursor, so dequeuing does not shift the remaining elements. The
        consumed prefix is dropped once it makes up at least half of the
        buffer (and at least `COMPACT_THRESHOLD` slots), which keeps both
        operations amortized O(1).
    """

    COMPACT_THRESHOLD = 32

    def __init__(self, values: 'Optional[Iterable[_T]]' = None) -> 'None':
        self.__items: 'GrowthBuffer[Optional[_T]]' = GrowthBuffer()
        self.__head = 0
        if values is not None:
            for value in values:
                self.enqueue(value)

    def clear(self) -> 'None':
        self.__items.clear()
        self.__head = 0

    def count(self) -> 'int':
        return len(self.__items) - self.__head

    def iterate(self) -> 'Iterator[_T]':
        items = self.__items
        return (items[i] for i in range(self.__head, len(items)))

    def enqueue(self, value: '_T') -> 'None':
        self.__items.append(value)

    def dequeue(self) -> '_T':
        if self.is_empty():
            raise EmptyContainerError("queue")
        return self.__take()

    def try_dequeue(self) -> 'Tuple[bool, Optional[_T]]':
        if self.is_empty():
            return False, None
        return True, self.__take()

    def peek(self) -> '_T':
        if self.is_empty():
            raise EmptyContainerError("queue")
        return self.__items[self.__head]

    def try_peek(self) -> 'Tuple[bool, Optional[_T]]':
        if self.is_empty():
            return False, None
        return True, self.__items[self.__head]

    def __take(self) -> '_T':
        items = self.__items
        value = items[self.__head]
        items[self.__head] = None
        self.__head += 1
        remaining = len(items) - self.__head
        if remaining == 0:
            items.truncate(0)
            self.__head = 0
        elif self.__head >= Queue.COMPACT_THRESHOLD and self.__head * 2 >= len(items):
            items.compact(remaining, self.__head)
            self.__head = 0
        return value

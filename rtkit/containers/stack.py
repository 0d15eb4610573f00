from typing import Optional, Iterable, Iterator, Tuple, TypeVar, Generic

from rtkit.errors import EmptyContainerError
from rtkit.util.buffer import GrowthBuffer
from rtkit.containers.base import Collection


# -----------------------------------------------------------------------------


_T = TypeVar('_T')


class Stack(Generic[_T], Collection[_T]):
    """ Last-in-first-out collection.

        The top of the stack is the high end of a growth buffer. Iteration,
        `to_array` and `copy_to` go from the top down, i.e. the most recently
        pushed element comes first.
    """

    def __init__(self, values: 'Optional[Iterable[_T]]' = None) -> 'None':
        self.__items: 'GrowthBuffer[_T]' = GrowthBuffer()
        if values is not None:
            for value in values:
                self.push(value)

    def clear(self) -> 'None':
        self.__items.clear()

    def count(self) -> 'int':
        return len(self.__items)

    def iterate(self) -> 'Iterator[_T]':
        return reversed(self.__items)

    def push(self, value: '_T') -> 'None':
        self.__items.append(value)

    def pop(self) -> '_T':
        if self.is_empty():
            raise EmptyContainerError("stack")
        return self.__items.pop()

    def try_pop(self) -> 'Tuple[bool, Optional[_T]]':
        if self.is_empty():
            return False, None
        return True, self.__items.pop()

    def peek(self) -> '_T':
        if self.is_empty():
            raise EmptyContainerError("stack")
        return self.__items[len(self.__items) - 1]

    def try_peek(self) -> 'Tuple[bool, Optional[_T]]':
        if self.is_empty():
            return False, None
        return True, self.__items[len(self.__items) - 1]

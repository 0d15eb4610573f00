from typing import Any, List, Iterator, MutableSequence, Tuple, TypeVar, Generic
from abc import ABC, abstractmethod

from rtkit.errors import IndexOutOfRange
from rtkit.containers.values import same_value


# -----------------------------------------------------------------------------


_T = TypeVar('_T')


class Collection(Generic[_T], ABC):
    """ Capability shared by every container.

        Subclasses provide `clear`, `count` and `iterate`; everything else is
        derived from those and may be overridden where a container can do
        better. `iterate` must return a fresh iterator on every call, so a
        container can be traversed any number of times.
    """

    @abstractmethod
    def clear(self) -> 'None':
        pass

    @abstractmethod
    def count(self) -> 'int':
        pass

    @abstractmethod
    def iterate(self) -> 'Iterator[_T]':
        pass

    def is_empty(self) -> 'bool':
        return self.count() == 0

    def contains(self, value: 'Any') -> 'bool':
        return any(same_value(value, e) for e in self.iterate())

    def copy_to(self, destination: 'MutableSequence[Any]', index: 'int' = 0) -> 'None':
        """ Writes the elements in iteration order into `destination`,
            starting at `index`. The destination is never resized, so it must
            already have room for `count()` elements past `index`.
        """
        length = len(destination)
        if index < 0 or index + self.count() > length:
            raise IndexOutOfRange(index, length, "destination has no room at index")
        for e in self.iterate():
            destination[index] = e
            index += 1

    def to_array(self) -> 'List[_T]':
        return list(self.iterate())

    def __len__(self) -> 'int':
        return self.count()

    def __iter__(self) -> 'Iterator[_T]':
        return self.iterate()

    def __contains__(self, value: 'Any') -> 'bool':
        return self.contains(value)

    def __bool__(self) -> 'bool':
        return not self.is_empty()

    def __repr__(self) -> 'str':
        return f"{type(self).__name__}({self.to_array()!r})"


# -----------------------------------------------------------------------------


class ListLike(Generic[_T], Collection[_T], ABC):
    """ Collection whose elements are addressed by a zero-based index.
    """

    @abstractmethod
    def add(self, value: '_T') -> 'None':
        pass

    @abstractmethod
    def get(self, index: 'int') -> '_T':
        pass

    @abstractmethod
    def set(self, index: 'int', value: '_T') -> 'None':
        pass

    @abstractmethod
    def index_of(self, value: 'Any') -> 'int':
        pass

    @abstractmethod
    def insert(self, index: 'int', value: '_T') -> 'None':
        pass

    @abstractmethod
    def remove(self, value: 'Any') -> 'bool':
        pass

    @abstractmethod
    def remove_at(self, index: 'int') -> 'None':
        pass

    def __getitem__(self, index: 'int') -> '_T':
        return self.get(index)

    def __setitem__(self, index: 'int', value: '_T') -> 'None':
        self.set(index, value)

    def __delitem__(self, index: 'int') -> 'None':
        self.remove_at(index)


# -----------------------------------------------------------------------------


_K = TypeVar('_K')
_V = TypeVar('_V')


class KeyValueCollection(Generic[_K, _V], Collection[Tuple[_K, _V]], ABC):
    """ Collection of key/value pairs, iterated as `(key, value)` tuples.

        `contains` looks for a value; `contains_key` and the `in` operator
        look for a key.
    """

    @abstractmethod
    def add(self, key: '_K', value: '_V') -> 'None':
        pass

    @abstractmethod
    def get(self, key: '_K') -> '_V':
        pass

    @abstractmethod
    def set(self, key: '_K', value: '_V') -> 'None':
        pass

    @abstractmethod
    def remove(self, key: '_K') -> 'bool':
        pass

    @abstractmethod
    def contains_key(self, key: '_K') -> 'bool':
        pass

    @abstractmethod
    def get_keys(self) -> 'List[_K]':
        pass

    @abstractmethod
    def get_values(self) -> 'List[_V]':
        pass

    def contains(self, value: 'Any') -> 'bool':
        return any(same_value(value, v) for _, v in self.iterate())

    def __contains__(self, key: 'Any') -> 'bool':
        return self.contains_key(key)

    def __repr__(self) -> 'str':
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.iterate())
        return f"{type(self).__name__}({{{pairs}}})"

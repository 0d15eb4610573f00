from typing import Any, Dict, Hashable, List, Optional, Iterable, Iterator, Tuple, TypeVar, Generic

from rtkit.errors import DuplicateKeyError, KeyNotFoundError
from rtkit.containers.base import KeyValueCollection
from rtkit.containers.values import normalize_key


# -----------------------------------------------------------------------------


_K = TypeVar('_K')
_V = TypeVar('_V')


class KeyValueEntry(Generic[_K, _V]):
    """ Key and value stored by a `Dictionary`. The key is fixed; the value
        may be replaced in place.
    """

    __slots__ = ('__key', 'value')

    def __init__(self, key: '_K', value: '_V') -> 'None':
        self.__key = key
        self.value = value

    @property
    def key(self) -> '_K':
        return self.__key

    def __repr__(self) -> 'str':
        return f"KeyValueEntry({self.__key!r}, {self.value!r})"


class Dictionary(Generic[_K, _V], KeyValueCollection[_K, _V]):
    """ Associative container with keys of any type.

        Keys are looked up by their normalized form (see `normalize_key`):
        plain values by type and value, other objects by identity. `None` is
        not a valid key for any operation. Iteration follows the order in
        which keys were first inserted; replacing the value of an existing
        key does not move it.
    """

    def __init__(self, pairs: 'Optional[Iterable[Tuple[_K, _V]]]' = None) -> 'None':
        self.__entries: 'Dict[Hashable, KeyValueEntry[_K, _V]]' = {}
        if pairs is not None:
            for key, value in pairs:
                self.set(key, value)

    def clear(self) -> 'None':
        self.__entries.clear()

    def count(self) -> 'int':
        return len(self.__entries)

    def iterate(self) -> 'Iterator[Tuple[_K, _V]]':
        return ((entry.key, entry.value) for entry in self.__entries.values())

    def entries(self) -> 'Iterator[KeyValueEntry[_K, _V]]':
        return iter(self.__entries.values())

    def items(self) -> 'Iterator[Tuple[_K, _V]]':
        return self.iterate()

    def add(self, key: '_K', value: '_V') -> 'None':
        normalized = normalize_key(key)
        if normalized in self.__entries:
            raise DuplicateKeyError(key)
        self.__entries[normalized] = KeyValueEntry(key, value)

    def get(self, key: '_K') -> '_V':
        entry = self.__entries.get(normalize_key(key))
        if entry is None:
            raise KeyNotFoundError(key)
        return entry.value

    def set(self, key: '_K', value: '_V') -> 'None':
        normalized = normalize_key(key)
        entry = self.__entries.get(normalized)
        if entry is None:
            self.__entries[normalized] = KeyValueEntry(key, value)
        else:
            entry.value = value

    def remove(self, key: '_K') -> 'bool':
        return self.__entries.pop(normalize_key(key), None) is not None

    def contains_key(self, key: '_K') -> 'bool':
        return normalize_key(key) in self.__entries

    def contains_value(self, value: 'Any') -> 'bool':
        return self.contains(value)

    def get_keys(self) -> 'List[_K]':
        return [entry.key for entry in self.__entries.values()]

    def get_values(self) -> 'List[_V]':
        return [entry.value for entry in self.__entries.values()]

    def flip(self) -> 'Dictionary[_V, _K]':
        """ Returns a new dictionary mapping each value to its key. When a
            value appears under several keys, the last of those keys wins.
        """
        flipped: 'Dictionary[_V, _K]' = Dictionary()
        for key, value in self.iterate():
            flipped.set(value, key)
        return flipped

    def __getitem__(self, key: '_K') -> '_V':
        return self.get(key)

    def __setitem__(self, key: '_K', value: '_V') -> 'None':
        self.set(key, value)

    def __delitem__(self, key: '_K') -> 'None':
        if not self.remove(key):
            raise KeyNotFoundError(key)

from typing import Any, Hashable, Optional, Tuple
from typing_extensions import Protocol, runtime_checkable
from abc import abstractmethod
from decimal import Decimal
from enum import Enum
from fractions import Fraction

from rtkit.errors import InvalidArgument


# -----------------------------------------------------------------------------


# Types compared by type and value; every other object is compared by identity.
VALUE_TYPES: 'Tuple[type, ...]' = (bool, int, float, complex, str, bytes, Decimal, Fraction, tuple)


def value_type(value: 'Any') -> 'Optional[type]':
    """ Returns the value type `value` is compared as, or None when it is
        compared by identity.

        Subclasses of a value type (a `str` subclass, a named tuple) count as
        that type. Enum members are compared by identity even when they
        derive from `int` or `str`.
    """
    t = type(value)
    if t in VALUE_TYPES:
        return t
    if isinstance(value, Enum):
        return None
    for base in VALUE_TYPES:
        if isinstance(value, base):
            return base
    return None


def same_value(a: 'Any', b: 'Any') -> 'bool':
    """ Strict equality used by `contains`, `index_of` and friends.

        Values of the plain value types are equal when both their value
        types (see `value_type`) and their values match, so `1`, `1.0` and
        `True` are all different. Tuples are compared element-wise with the
        same rule. Any other object is only equal to itself, whatever its
        `__eq__` says.
    """
    if a is b:
        return True
    t = value_type(a)
    if t is None or t is not value_type(b):
        return False
    if t is tuple:
        return len(a) == len(b) and all(same_value(x, y) for x, y in zip(a, b))
    return a == b


# -----------------------------------------------------------------------------


class _Identity:
    __slots__ = ()

    def __repr__(self) -> 'str':
        return "<identity>"


_IDENTITY = _Identity()


def normalize_key(key: 'Any') -> 'Hashable':
    """ Returns the canonical lookup form of a dictionary key.

        Value-type keys normalize to `(value_type(key), key)`, with tuples
        normalized element by element. Other objects normalize to their
        identity; the dictionary keeps the raw key alive alongside its entry,
        so the identity cannot be reused while the entry exists.
    """
    if key is None:
        raise InvalidArgument("the key cannot be None")
    return _normalize(key)


def _normalize(key: 'Any') -> 'Hashable':
    t = value_type(key)
    if t is tuple:
        return (tuple, tuple(_normalize(k) for k in key))
    if t is not None:
        return (t, key)
    return (_IDENTITY, id(key))


# -----------------------------------------------------------------------------


@runtime_checkable
class Comparable(Protocol):
    """ Objects that define their own total order.

        `compare` returns a negative number, zero or a positive number when
        `self` is respectively less than, equal to or greater than `other`.
    """

    @abstractmethod
    def compare(self, other: 'Any') -> 'int':
        pass


def compare_values(a: 'Any', b: 'Any') -> 'int':
    if isinstance(a, Comparable):
        return a.compare(b)
    if a < b:
        return -1
    if b < a:
        return 1
    return 0

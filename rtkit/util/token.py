from typing import Tuple
from functools import total_ordering


# -----------------------------------------------------------------------------


@total_ordering
class Token:
    """ Opaque identity marker.

        Tokens are equal only to themselves. Every token receives a serial
        number at creation, which gives tokens a stable hash and orders them
        by creation time.
    """

    __key: 'Tuple[str, int]'
    __precomputed_hash: 'int'

    __count: 'int' = 0

    def __init__(self, label: 'str' = "token") -> 'None':
        self.__key = (label, Token.__count)
        Token.__count += 1
        self.__precomputed_hash = hash(self.__key)

    @property
    def label(self) -> 'str':
        return self.__key[0]

    @property
    def serial(self) -> 'int':
        return self.__key[1]

    def __eq__(self, other) -> 'bool':
        return self is other

    def __lt__(self, other) -> 'bool':
        assert isinstance(other, Token)
        return self.serial < other.serial

    def __hash__(self) -> 'int':
        return self.__precomputed_hash

    def __repr__(self) -> 'str':
        return f"Token({self.label}#{self.serial})"


# -----------------------------------------------------------------------------

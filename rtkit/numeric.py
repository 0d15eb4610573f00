from typing import Union, Tuple
import math
import re

from rtkit.errors import InvalidArgument, ArithmeticOverflow, ArithmeticUnderflow


# -----------------------------------------------------------------------------


Number = Union[int, float]

# Checked arithmetic works on signed 64-bit integers.
INT_MAX = 2 ** 63 - 1
INT_MIN = -2 ** 63


def clamp(value: 'Number', min_value: 'Number', max_value: 'Number') -> 'Number':
    """ Returns `value` limited to the inclusive range `[min_value, max_value]`.
    """
    if min_value > max_value:
        raise InvalidArgument(f"{min_value} cannot be greater than {max_value}")
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def digits_of(value: 'int') -> 'int':
    """ Returns the number of decimal digits of `value`, ignoring the sign.
    """
    return len(str(abs(value)))


def factorial(n: 'int') -> 'int':
    if n < 0:
        raise InvalidArgument("base value must be equal to or greater than zero")
    return math.factorial(n)


def div_rem(a: 'Number', b: 'Number') -> 'Tuple[float, Number]':
    """ Returns the quotient `a / b` and the remainder of the division.
    """
    quotient = a / b
    return quotient, abs(a - round(quotient) * b)


# -----------------------------------------------------------------------------


_INT_PATTERN = re.compile(r'[+-]?(0|[1-9][0-9]*)')
_FLOAT_PATTERN = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?')


def try_parse_int(s: 'str') -> 'Tuple[bool, int]':
    """ Converts a decimal integer string, allowing surrounding whitespace.

        Returns `(True, value)` on success and `(False, 0)` when `s` is not
        an integer or does not fit in 64 bits.
    """
    text = s.strip()
    if _INT_PATTERN.fullmatch(text) is None:
        return False, 0
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return False, 0
    return True, value


def try_parse_float(s: 'str') -> 'Tuple[bool, float]':
    """ Converts a decimal number string. Returns `(True, value)` on success
        and `(False, 0.0)` otherwise.
    """
    text = s.strip()
    if _FLOAT_PATTERN.fullmatch(text) is None:
        return False, 0.0
    return True, float(text)


# -----------------------------------------------------------------------------


def _check_range(expression: 'str', result: 'int') -> 'int':
    if result > INT_MAX:
        raise ArithmeticOverflow(f"{expression} overflows")
    if result < INT_MIN:
        raise ArithmeticUnderflow(f"{expression} underflows")
    return result


def checked_add(a: 'int', b: 'int') -> 'int':
    return _check_range(f"{a} + {b}", a + b)


def try_checked_add(a: 'int', b: 'int') -> 'Tuple[bool, int]':
    result = a + b
    if result < INT_MIN or result > INT_MAX:
        return False, 0
    return True, result


def checked_subtract(a: 'int', b: 'int') -> 'int':
    return _check_range(f"{a} - {b}", a - b)


def try_checked_subtract(a: 'int', b: 'int') -> 'Tuple[bool, int]':
    result = a - b
    if result < INT_MIN or result > INT_MAX:
        return False, 0
    return True, result

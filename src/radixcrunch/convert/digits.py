"""Digit vectors: non-negative integers as little-endian lists of digits.

The base is not stored with the digits, it is passed alongside. A digit
vector is canonical when it has no trailing (most significant) zeros,
except for zero itself which is exactly [0].
"""

import numbers
import numpy as np

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 65536


def isinteger(x):
    return isinstance(x, numbers.Integral) and not isinstance(x, (bool, np.bool_))


def validate_base(base):
    """
    Args:
        base(int)
    Returns:
        int
    Raises:
        InvalidBase
    """
    if not isinteger(base) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base, MIN_BASE, MAX_BASE)
    return int(base)


def asdigits(digits):
    """Digit vector as a new list of python integers

    Args:
        digits(Sequence(int) or 1D integer array)
    Returns:
        list(int)
    """
    if isinstance(digits, np.ndarray):
        if digits.ndim != 1:
            raise ValueError(
                "Digit arrays must be one-dimensional, not {}D".format(digits.ndim)
            )
        return digits.tolist()
    return list(digits)


def validate_digits(digits, base):
    """
    Args:
        digits(Sequence(int))
        base(int)
    Raises:
        InvalidDigit
    """
    for i, digit in enumerate(digits):
        if not isinteger(digit) or digit < 0 or digit >= base:
            raise InvalidDigit(digit, i, base)


def canonicalize(digits):
    """Strip the most significant zeros

    Args:
        digits(Sequence(int))
    Returns:
        list(int): [0] for empty or all-zero input
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return [0]
    return list(digits[:end])


def is_canonical(digits):
    n = len(digits)
    if n == 0:
        return False
    return n == 1 or digits[-1] != 0


def to_int(digits, base):
    value = 0
    for digit in reversed(digits):
        value = value * base + digit
    return value


def from_int(value, base):
    """
    Args:
        value(int): non-negative
        base(int)
    Returns:
        list(int): canonical digit vector
    """
    if value < 0:
        raise ValueError("Only non-negative integers have a digit vector")
    if value == 0:
        return [0]
    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(digit)
    return digits


def compare_digits(a, b):
    """Compare the values of two digit vectors in the same base

    Returns:
        int: -1, 0 or 1
    """
    a = canonicalize(a)
    b = canonicalize(b)
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def is_power_of_two(n):
    return n > 0 and (n & (n - 1)) == 0


def log2_power_of_two(n):
    """Exponent of a power of two"""
    if not is_power_of_two(n):
        raise ValueError("{} is not a power of two".format(n))
    return n.bit_length() - 1

"""Conversion through a single fixed-width unsigned accumulator.

Python integers do not overflow, so the accumulator width is enforced
explicitly: exceeding it is answered by the baseline converter.
"""

import logging

from . import baseline
from .digits import from_int
from .errors import OverflowDetected

logger = logging.getLogger(__name__)

FASTPATH_BITS = 128


def accumulate(digits, base, bits=FASTPATH_BITS):
    """Horner evaluation, most significant digit first

    Args:
        digits(Sequence(int)): little-endian digit vector
        base(int)
        bits(int): accumulator width
    Returns:
        int
    Raises:
        OverflowDetected: value does not fit in the accumulator
    """
    limit = 1 << bits
    value = 0
    for i in range(len(digits) - 1, -1, -1):
        value *= base
        if value >= limit:
            raise OverflowDetected(
                "{}-bit accumulator overflows at digit {}".format(bits, i)
            )
        value += digits[i]
        if value >= limit:
            raise OverflowDetected(
                "{}-bit accumulator overflows at digit {}".format(bits, i)
            )
    return value


def convert(digits, from_base, to_base, bits=FASTPATH_BITS):
    try:
        value = accumulate(digits, from_base, bits=bits)
    except OverflowDetected as e:
        logger.debug("{}: fall back to baseline conversion".format(e))
        return baseline.convert(digits, from_base, to_base)
    return from_int(value, to_base)

"""Choice of conversion strategy from the shape of a conversion request"""

import math

from .aligned import MAX_ALIGNMENT_EXPONENT, aligned_exponents
from .digits import is_power_of_two
from .smallvalue import FASTPATH_BITS
from ..utils.Enum import Enum

# In order of precedence
strategy = Enum(["poweroftwo", "alignedbase", "smallvalue", "baseline"])


def fits_fastpath(from_base, digit_count, fastpath_bits=FASTPATH_BITS):
    """Estimate whether digit_count digits in from_base fit the accumulator"""
    return digit_count * math.log2(from_base) <= fastpath_bits


def select(
    from_base,
    to_base,
    digit_count,
    max_exponent=MAX_ALIGNMENT_EXPONENT,
    fastpath_bits=FASTPATH_BITS,
    cache=None,
):
    """
    Args:
        from_base(int)
        to_base(int)
        digit_count(int)
        max_exponent(int): alignment search bound
        fastpath_bits(int): accumulator width of the small-value path
        cache(Optional(MemoCache))
    Returns:
        str: strategy
    """
    if is_power_of_two(from_base) and is_power_of_two(to_base):
        return strategy.poweroftwo
    if aligned_exponents(from_base, to_base, max_exponent, cache=cache) is not None:
        return strategy.alignedbase
    if fits_fastpath(from_base, digit_count, fastpath_bits):
        return strategy.smallvalue
    return strategy.baseline

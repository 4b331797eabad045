"""Conversion between power-of-two bases by re-slicing the bit stream.

Each digit of the source contributes log2(from_base) bits, least significant
digit first. The stream is cut into log2(to_base)-bit groups, the last
group being zero-padded on the high side.

Two packers produce identical output: a scalar bit buffer and a vectorized
numpy version for long digit vectors.
"""

import logging
import numpy as np

from . import baseline
from .digits import canonicalize, is_power_of_two, log2_power_of_two
from .errors import StrategyPreconditionViolated
from ..utils.Enum import Enum

logger = logging.getLogger(__name__)

packerType = Enum(["auto", "scalar", "numpy"])

# Digit count from which "auto" switches to the numpy packer
NUMPY_THRESHOLD = 512


def pack_scalar(digits, from_shift, to_shift):
    mask = (1 << to_shift) - 1
    result = []
    buffer = 0
    nbits = 0
    for digit in digits:
        buffer |= digit << nbits
        nbits += from_shift
        while nbits >= to_shift:
            result.append(buffer & mask)
            buffer >>= to_shift
            nbits -= to_shift
    if nbits > 0:
        result.append(buffer)
    return result


def pack_numpy(digits, from_shift, to_shift):
    digits = np.asarray(digits, dtype=np.uint32)
    # little-endian bit stream: bit j of digit i at position i*from_shift + j
    shifts = np.arange(from_shift, dtype=np.uint32)
    bits = ((digits[:, np.newaxis] >> shifts) & 1).astype(np.uint32).ravel()
    ngroups = -(-bits.size // to_shift)
    npad = ngroups * to_shift - bits.size
    if npad:
        bits = np.concatenate([bits, np.zeros(npad, dtype=np.uint32)])
    weights = np.left_shift(np.uint32(1), np.arange(to_shift, dtype=np.uint32))
    groups = bits.reshape(ngroups, to_shift)
    return (groups * weights).sum(axis=1, dtype=np.uint32).tolist()


PACKERS = {packerType.scalar: pack_scalar, packerType.numpy: pack_numpy}


def getpacker(packer, ndigits):
    """
    Args:
        packer(Optional(str)): packerType
        ndigits(int)
    Returns:
        callable
    """
    if packer is None:
        packer = packerType.auto
    else:
        packer = packerType(packer)
    if packer == packerType.auto:
        if ndigits >= NUMPY_THRESHOLD:
            packer = packerType.numpy
        else:
            packer = packerType.scalar
    return PACKERS[packer]


def bitshifts(from_base, to_base):
    """
    Returns:
        tuple: log2(from_base), log2(to_base)
    Raises:
        StrategyPreconditionViolated
    """
    if not (is_power_of_two(from_base) and is_power_of_two(to_base)):
        raise StrategyPreconditionViolated(
            "Bases {} and {} are not both powers of two".format(from_base, to_base)
        )
    return log2_power_of_two(from_base), log2_power_of_two(to_base)


def convert(digits, from_base, to_base, packer=None):
    try:
        from_shift, to_shift = bitshifts(from_base, to_base)
    except StrategyPreconditionViolated as e:
        logger.warning("{}: fall back to baseline conversion".format(e))
        return baseline.convert(digits, from_base, to_base)
    func = getpacker(packer, len(digits))
    return canonicalize(func(digits, from_shift, to_shift))

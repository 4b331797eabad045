import random

from ..convert.digits import MAX_BASE, MIN_BASE, canonicalize

MAXDIGITS = 40
SMALLBASES = 2, 3, 4, 8, 9, 10, 16, 27, 32, 36, 64, 81, 100, 243, 256, 1000, 65536


def random_base(small=False):
    """
    Args:
        small(Optional(bool)): pick from a list of common and aligned bases
    Returns:
        int
    """
    if small:
        return random.choice(SMALLBASES)
    return random.randint(MIN_BASE, MAX_BASE)


def random_digits(base, ndigits=None, canonical=True):
    """
    Args:
        base(int)
        ndigits(Optional(int)): random length in [1, MAXDIGITS] by default
        canonical(Optional(bool)): most significant digit is never zero
    Returns:
        list(int)
    """
    if ndigits is None:
        ndigits = random.randint(1, MAXDIGITS)
    digits = [random.randrange(base) for _ in range(ndigits)]
    if canonical:
        if ndigits > 1 and digits[-1] == 0:
            digits[-1] = random.randrange(1, base)
        digits = canonicalize(digits)
    return digits


def factory(small=True, ndigits=None, canonical=True):
    """Random conversion request

    Returns:
        tuple: digits, from_base, to_base
    """
    from_base = random_base(small=small)
    to_base = random_base(small=small)
    return random_digits(from_base, ndigits=ndigits, canonical=canonical), from_base, to_base

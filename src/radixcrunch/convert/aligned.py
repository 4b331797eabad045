"""Conversion between aligned bases, i.e. from_base^a == to_base^b.

A group of a source digits holds exactly the same range of values as a
group of b target digits, so groups convert independently:

    digits   [d0 d1 | d2 d3 | d4 0]    (a = 2, last group zero-extended)
    values    v0      v1      v2        v = d_even + d_odd * from_base
    result   [e0 | e1 | e2]             (b = 1 here: from_base^2 == to_base)

Every group costs O(a + b) instead of a full division pass over the number.
"""

import logging
import math

from . import baseline
from .digits import canonicalize
from .errors import StrategyPreconditionViolated
from ..utils.cache import memoized

logger = logging.getLogger(__name__)

MAX_ALIGNMENT_EXPONENT = 20


@memoized("factors")
def factorize(n):
    """Prime factorization by trial division

    Args:
        n(int): n >= 1
    Returns:
        tuple: ((prime, multiplicity), ...) with increasing primes
    """
    factors = []
    p = 2
    while p * p <= n:
        if n % p == 0:
            count = 0
            while n % p == 0:
                n //= p
                count += 1
            factors.append((p, count))
        p += 1 if p == 2 else 2
    if n > 1:
        factors.append((n, 1))
    return tuple(factors)


def _aligned_exponents(from_base, to_base, max_exponent, cache=None):
    ffrom = factorize(from_base, cache=cache)
    fto = factorize(to_base, cache=cache)
    if [p for p, _ in ffrom] != [p for p, _ in fto]:
        return None
    # a*e == b*f for every prime with e, f the multiplicities in from_base, to_base
    e, f = ffrom[0][1], fto[0][1]
    g = math.gcd(e, f)
    a, b = f // g, e // g
    for (_, e), (_, f) in zip(ffrom, fto):
        if a * e != b * f:
            return None
    if a > max_exponent or b > max_exponent:
        return None
    return a, b


def aligned_exponents(
    from_base, to_base, max_exponent=MAX_ALIGNMENT_EXPONENT, cache=None
):
    """Smallest positive (a, b) with from_base^a == to_base^b

    Args:
        from_base(int)
        to_base(int)
        max_exponent(int): upper bound for a and b
        cache(Optional(MemoCache))
    Returns:
        tuple or None: (a, b) or None when no pair exists within the bound
    """
    if cache is None:
        return _aligned_exponents(from_base, to_base, max_exponent)
    return cache.get(
        "exponents",
        (from_base, to_base, max_exponent),
        lambda *key: _aligned_exponents(*key, cache=cache),
    )


@memoized("powers")
def power_table(base, n):
    """
    Returns:
        tuple: base^0, ..., base^(n-1)
    """
    powers = [1]
    for _ in range(1, n):
        powers.append(powers[-1] * base)
    return tuple(powers)


def checked_exponents(from_base, to_base, exponents, cache=None):
    if exponents is None:
        exponents = aligned_exponents(from_base, to_base, cache=cache)
        if exponents is None:
            raise StrategyPreconditionViolated(
                "Bases {} and {} are not aligned".format(from_base, to_base)
            )
    a, b = exponents
    if a < 1 or b < 1 or from_base**a != to_base**b:
        raise StrategyPreconditionViolated(
            "{}^{} != {}^{}".format(from_base, a, to_base, b)
        )
    return a, b


def convert(digits, from_base, to_base, exponents=None, cache=None):
    """
    Args:
        digits(Sequence(int))
        from_base(int)
        to_base(int)
        exponents(Optional(tuple)): (a, b) with from_base^a == to_base^b
        cache(Optional(MemoCache))
    Returns:
        list(int)
    """
    try:
        a, b = checked_exponents(from_base, to_base, exponents, cache=cache)
    except StrategyPreconditionViolated as e:
        logger.warning("{}: fall back to baseline conversion".format(e))
        return baseline.convert(digits, from_base, to_base)
    powers = power_table(from_base, a, cache=cache)
    result = []
    for start in range(0, len(digits), a):
        value = sum(d * p for d, p in zip(digits[start : start + a], powers))
        for _ in range(b):
            value, digit = divmod(value, to_base)
            result.append(digit)
    return canonicalize(result)

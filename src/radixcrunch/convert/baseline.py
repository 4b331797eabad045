"""Generic base conversion by repeated long division.

Always correct, used as fallback of the specialized converters and as
the reference for checking them.
"""

from .digits import canonicalize


def divmod_digits(msdigits, from_base, divisor):
    """Divide a number by a small divisor

    Args:
        msdigits(list(int)): most significant digit first
        from_base(int)
        divisor(int)
    Returns:
        tuple: quotient (most significant digit first, no leading zeros), remainder
    """
    quotient = []
    remainder = 0
    for digit in msdigits:
        remainder = remainder * from_base + digit
        q, remainder = divmod(remainder, divisor)
        if quotient or q:
            quotient.append(q)
    return quotient, remainder


def convert(digits, from_base, to_base):
    """
    Args:
        digits(Sequence(int)): valid digit vector in from_base
        from_base(int)
        to_base(int)
    Returns:
        list(int): canonical digit vector in to_base
    """
    digits = canonicalize(digits)
    if from_base == to_base or digits == [0]:
        return digits
    current = digits[::-1]
    result = []
    while current:
        current, remainder = divmod_digits(current, from_base, to_base)
        result.append(remainder)
    return result

class ConversionException(Exception):
    pass


class InvalidBase(ConversionException, ValueError):
    """Base outside [MIN_BASE, MAX_BASE]"""

    def __init__(self, base, minbase, maxbase):
        self.base = base
        super(InvalidBase, self).__init__(
            "Base {!r} is not an integer in [{}, {}]".format(base, minbase, maxbase)
        )


class InvalidDigit(ConversionException, ValueError):
    """Digit not in [0, base)"""

    def __init__(self, digit, position, base):
        self.digit = digit
        self.position = position
        self.base = base
        super(InvalidDigit, self).__init__(
            "Invalid digit {!r} at position {} for base {}".format(
                digit, position, base
            )
        )


class OverflowDetected(ConversionException):
    """Fixed-width accumulator would overflow (never leaves the fast path)"""

    pass


class StrategyPreconditionViolated(ConversionException):
    """A specialized converter was called for bases it cannot handle
    (never leaves the converter)
    """

    pass

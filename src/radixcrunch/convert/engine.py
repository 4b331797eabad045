import logging

from . import aligned
from . import baseline
from . import bitpack
from . import smallvalue
from .digits import asdigits, canonicalize, validate_base, validate_digits
from .selector import strategy, select
from ..utils.cache import MemoCache

logger = logging.getLogger(__name__)


class ConversionEngine(object):
    """Dispatches conversions to the cheapest applicable strategy.

    Holds the tuning constants and the cache of precomputed tables
    (alignment exponents, power tables), which may be shared with
    other engines.
    """

    def __init__(
        self,
        max_exponent=aligned.MAX_ALIGNMENT_EXPONENT,
        fastpath_bits=smallvalue.FASTPATH_BITS,
        packer=None,
        cache=None,
    ):
        """
        Args:
            max_exponent(Optional(int)): bound of the aligned-base exponent search
            fastpath_bits(Optional(int)): accumulator width of the small-value path
            packer(Optional(str)): bit packer of the power-of-two path
            cache(Optional(MemoCache))
        """
        if max_exponent < 1:
            raise ValueError("The alignment exponent bound must be positive")
        if fastpath_bits < 1:
            raise ValueError("The fast-path accumulator needs at least one bit")
        if packer is not None:
            packer = bitpack.packerType(packer)
        if cache is None:
            cache = MemoCache()
        self.max_exponent = max_exponent
        self.fastpath_bits = fastpath_bits
        self.packer = packer
        self.cache = cache
        self._converters = {
            strategy.poweroftwo: self._convert_poweroftwo,
            strategy.alignedbase: self._convert_alignedbase,
            strategy.smallvalue: self._convert_smallvalue,
            strategy.baseline: baseline.convert,
        }

    def __repr__(self):
        return "{}(max_exponent={}, fastpath_bits={}, packer={})".format(
            type(self).__name__, self.max_exponent, self.fastpath_bits, self.packer
        )

    @property
    def config(self):
        """Constructor arguments, without the cache"""
        return {
            "max_exponent": self.max_exponent,
            "fastpath_bits": self.fastpath_bits,
            "packer": self.packer,
        }

    def prepare(self, digits, from_base, to_base):
        """Validate a conversion request

        Returns:
            tuple: canonical digits (new list), from_base, to_base
        Raises:
            InvalidBase, InvalidDigit
        """
        from_base = validate_base(from_base)
        to_base = validate_base(to_base)
        digits = asdigits(digits)
        validate_digits(digits, from_base)
        return canonicalize(digits), from_base, to_base

    def select(self, from_base, to_base, digit_count):
        return select(
            from_base,
            to_base,
            digit_count,
            max_exponent=self.max_exponent,
            fastpath_bits=self.fastpath_bits,
            cache=self.cache,
        )

    def convert(self, digits, from_base, to_base):
        """
        Args:
            digits(Sequence(int)): little-endian digits in from_base
            from_base(int)
            to_base(int)
        Returns:
            list(int): canonical little-endian digits in to_base
        Raises:
            InvalidBase, InvalidDigit
        """
        digits, from_base, to_base = self.prepare(digits, from_base, to_base)
        if from_base == to_base or digits == [0]:
            return digits
        tag = self.select(from_base, to_base, len(digits))
        logger.debug(
            "%s conversion of %d digits from base %d to base %d",
            tag,
            len(digits),
            from_base,
            to_base,
        )
        return self._converters[tag](digits, from_base, to_base)

    def convert_baseline(self, digits, from_base, to_base):
        """Reference conversion (see convert)"""
        digits, from_base, to_base = self.prepare(digits, from_base, to_base)
        return baseline.convert(digits, from_base, to_base)

    def _convert_poweroftwo(self, digits, from_base, to_base):
        return bitpack.convert(digits, from_base, to_base, packer=self.packer)

    def _convert_alignedbase(self, digits, from_base, to_base):
        exponents = aligned.aligned_exponents(
            from_base, to_base, self.max_exponent, cache=self.cache
        )
        return aligned.convert(
            digits, from_base, to_base, exponents=exponents, cache=self.cache
        )

    def _convert_smallvalue(self, digits, from_base, to_base):
        return smallvalue.convert(digits, from_base, to_base, bits=self.fastpath_bits)


_default_engine = ConversionEngine()


def default_engine():
    return _default_engine


def convert(digits, from_base, to_base):
    """Convert with the cheapest applicable strategy"""
    return _default_engine.convert(digits, from_base, to_base)


convert_optimized = convert


def convert_baseline(digits, from_base, to_base):
    """Convert by repeated long division"""
    return _default_engine.convert_baseline(digits, from_base, to_base)

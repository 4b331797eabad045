# -*- coding: utf-8 -*-

import logging
from .utils.cli import logging_cliconfig

try:
    from ._version import version as __version__
except ImportError:
    import os

    __version__ = "Local version ({})".format(
        os.path.dirname(os.path.abspath(__file__))
    )

logger = logging.getLogger(__name__)
logging_cliconfig(logger)

from .convert.engine import (  # noqa: E402
    ConversionEngine,
    convert,
    convert_baseline,
    convert_optimized,
)
from .convert.errors import ConversionException, InvalidBase, InvalidDigit  # noqa: E402
from .convert.selector import strategy, select  # noqa: E402
from .benchmark.harness import BenchmarkResult, run_benchmark  # noqa: E402

"""Timing of the baseline converter against the strategy-dispatching engine"""

import logging
import math
import multiprocessing

from ..convert.digits import asdigits, canonicalize
from ..convert.engine import ConversionEngine, default_engine
from ..utils import timing

logger = logging.getLogger(__name__)


def speedup_ratio(baseline_elapsed, optimized_elapsed):
    """baseline/optimized, 0 when the optimized time is 0 (or the ratio is not finite)"""
    if optimized_elapsed <= 0:
        return 0.0
    ratio = baseline_elapsed / float(optimized_elapsed)
    if not math.isfinite(ratio):
        return 0.0
    return ratio


class BenchmarkResult(object):
    def __init__(
        self,
        kind,
        iterations,
        baseline_elapsed,
        optimized_elapsed,
        baseline_output,
        optimized_output,
    ):
        """
        Args:
            kind(str): label of the benchmark
            iterations(int)
            baseline_elapsed(num): total time of the baseline loop (ms)
            optimized_elapsed(num): total time of the optimized loop (ms)
            baseline_output(list(int))
            optimized_output(list(int))
        """
        self.kind = kind
        self.iterations = iterations
        self.baseline_elapsed = baseline_elapsed
        self.optimized_elapsed = optimized_elapsed
        self.baseline_output = canonicalize(baseline_output)
        self.optimized_output = canonicalize(optimized_output)
        self.speedup = speedup_ratio(baseline_elapsed, optimized_elapsed)
        self.is_correct = self.baseline_output == self.optimized_output

    def __eq__(self, other):
        if not isinstance(other, BenchmarkResult):
            return False
        return self.__dict__ == other.__dict__

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "{}({!r}, {} iterations, {:.3f} ms / {:.3f} ms, speedup {:.2f}, {})".format(
            type(self).__name__,
            self.kind,
            self.iterations,
            self.baseline_elapsed,
            self.optimized_elapsed,
            self.speedup,
            "correct" if self.is_correct else "INCORRECT",
        )

    def todict(self):
        return {
            "baselineElapsedMs": self.baseline_elapsed,
            "optimizedElapsedMs": self.optimized_elapsed,
            "speedup": self.speedup,
            "baselineOutput": list(self.baseline_output),
            "optimizedOutput": list(self.optimized_output),
            "isCorrect": self.is_correct,
        }


def _converter(engine, baseline):
    if baseline:
        return engine.convert_baseline
    return engine.convert


def _run_loop(config, baseline, iterations, digits, from_base, to_base):
    """Timed loop in a worker process, with its own engine and input copy"""
    engine = ConversionEngine(**config)
    return timing.time_loop(
        _converter(engine, baseline), iterations, digits, from_base, to_base
    )


def _run_parallel(engine, iterations, digits, from_base, to_base):
    with multiprocessing.Pool(2) as pool:
        results = [
            pool.apply_async(
                _run_loop,
                (engine.config, baseline, iterations, list(digits), from_base, to_base),
            )
            for baseline in (True, False)
        ]
        return [result.get() for result in results]


def _run_sequential(engine, iterations, digits, from_base, to_base):
    return [
        timing.time_loop(
            _converter(engine, baseline), iterations, digits, from_base, to_base
        )
        for baseline in (True, False)
    ]


def run_benchmark(
    kind, iterations, digits, from_base, to_base, engine=None, parallel=False
):
    """Time iterations calls of the baseline and of the optimized conversion

    Args:
        kind(str): label of the benchmark
        iterations(int): number of calls per converter (at least 1)
        digits(Sequence(int)): little-endian digits in from_base
        from_base(int)
        to_base(int)
        engine(Optional(ConversionEngine))
        parallel(Optional(bool)): run both loops in separate worker processes
    Returns:
        BenchmarkResult
    Raises:
        InvalidBase, InvalidDigit
    """
    if engine is None:
        engine = default_engine()
    iterations = max(int(iterations), 1)
    digits = asdigits(digits)
    engine.prepare(digits, from_base, to_base)

    if parallel:
        run = _run_parallel
    else:
        run = _run_sequential
    (baseline_elapsed, baseline_output), (optimized_elapsed, optimized_output) = run(
        engine, iterations, digits, from_base, to_base
    )

    result = BenchmarkResult(
        kind,
        iterations,
        baseline_elapsed,
        optimized_elapsed,
        baseline_output,
        optimized_output,
    )
    if result.is_correct:
        logger.debug(repr(result))
    else:
        logger.warning(
            "{}: baseline {} != optimized {}".format(
                result, result.baseline_output, result.optimized_output
            )
        )
    return result

"""Standard benchmark scenarios, one per conversion strategy (and a few more)"""

import logging
import pandas as pd

from . import harness
from ..convert.errors import ConversionException
from ..patch import jsonpickle
from ..utils import timing

logger = logging.getLogger(__name__)


class Scenario(object):
    def __init__(
        self, name, kind, description, iterations, digits, from_base, to_base
    ):
        """
        Args:
            name(str)
            kind(str): label passed to the harness
            description(str)
            iterations(int)
            digits(list(int)): little-endian
            from_base(int)
            to_base(int)
        """
        self.name = name
        self.kind = kind
        self.description = description
        self.iterations = iterations
        self.digits = digits
        self.from_base = from_base
        self.to_base = to_base

    def __eq__(self, other):
        if not isinstance(other, Scenario):
            return False
        return self.__dict__ == other.__dict__

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.name)

    def scaled(self, scale):
        iterations = max(int(round(self.iterations * scale)), 1)
        return Scenario(
            self.name,
            self.kind,
            self.description,
            iterations,
            list(self.digits),
            self.from_base,
            self.to_base,
        )

    def run(self, engine=None, parallel=False):
        return harness.run_benchmark(
            self.kind,
            self.iterations,
            self.digits,
            self.from_base,
            self.to_base,
            engine=engine,
            parallel=parallel,
        )


def power_of_ten(exponent):
    digits = [0] * (exponent + 1)
    digits[-1] = 1
    return digits


def scenarios(scale=1.0):
    """
    Args:
        scale(Optional(num)): multiplies the iteration counts
    Returns:
        list(Scenario)
    """
    lst = [
        Scenario(
            "Small Number",
            "small-number",
            "12345 (10→16)",
            20000,
            [5, 4, 3, 2, 1],
            10,
            16,
        ),
        Scenario(
            "Power of Two",
            "power-of-two",
            "65535 (16→8)",
            20000,
            [15, 15, 15, 15],
            16,
            8,
        ),
        Scenario(
            "Aligned Bases", "aligned-bases", "123 (4→16)", 20000, [3, 2, 1, 0], 4, 16
        ),
        Scenario(
            "Large Number",
            "large-number",
            "10^100 (10→16)",
            200,
            power_of_ten(100),
            10,
            16,
        ),
        Scenario(
            "Huge Number",
            "large-number",
            "10^1000 (10→16)",
            5,
            power_of_ten(1000),
            10,
            16,
        ),
        Scenario(
            "Binary to Hex",
            "power-of-two",
            "10101010 (2→16)",
            20000,
            [0, 1, 0, 1, 0, 1, 0, 1],
            2,
            16,
        ),
        Scenario(
            "Hex to Decimal",
            "general",
            "FF252541 (16→10)",
            10000,
            [1, 4, 5, 2, 5, 2, 15, 15],
            16,
            10,
        ),
        Scenario(
            "Base 32 to 64",
            "power-of-two",
            "2O1R2O (32→64)",
            20000,
            [24, 2, 27, 1, 24, 2],
            32,
            64,
        ),
        Scenario(
            "Octal to Binary",
            "power-of-two",
            "755 (8→2)",
            20000,
            [5, 5, 7],
            8,
            2,
        ),
    ]
    if scale != 1:
        lst = [scenario.scaled(scale) for scenario in lst]
    return lst


def failed_result(scenario):
    result = harness.BenchmarkResult(scenario.kind, scenario.iterations, 0, 0, [], [])
    result.is_correct = False
    return result


def run_suite(lst=None, engine=None, parallel=False, scale=1.0):
    """Run benchmark scenarios, a scenario that cannot run is reported as incorrect

    Args:
        lst(Optional(list(Scenario))): standard scenarios by default
        engine(Optional(ConversionEngine))
        parallel(Optional(bool))
        scale(Optional(num)): multiplies the iteration counts of the standard scenarios
    Returns:
        list(tuple): (Scenario, BenchmarkResult)
    """
    if lst is None:
        lst = scenarios(scale=scale)
    results = []
    with timing.timeit_logger(logger, name="benchmark suite"):
        for i, scenario in enumerate(lst, 1):
            logger.info(
                "Running {} ... ({}/{})".format(scenario.name, i, len(lst))
            )
            try:
                result = scenario.run(engine=engine, parallel=parallel)
            except ConversionException as e:
                logger.error("{} failed: {}".format(scenario.name, e))
                result = failed_result(scenario)
            results.append((scenario, result))
    return results


COLUMNS = [
    "name",
    "kind",
    "description",
    "iterations",
    "baseline_ms",
    "optimized_ms",
    "speedup",
    "correct",
]


def table(results):
    """
    Args:
        results(list(tuple)): see run_suite
    Returns:
        pandas.DataFrame
    """
    rows = [
        [
            scenario.name,
            result.kind,
            scenario.description,
            result.iterations,
            result.baseline_elapsed,
            result.optimized_elapsed,
            result.speedup,
            result.is_correct,
        ]
        for scenario, result in results
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def summary(results):
    """
    Args:
        results(list(tuple)): see run_suite
    Returns:
        tuple: pandas.DataFrame, dict with average_speedup, best_speedup,
               ncorrect, ntotal and time_percentage (optimized/baseline in %)
    """
    df = table(results)
    ntotal = len(df)
    stats = {
        "average_speedup": float(df["speedup"].mean()) if ntotal else 0.0,
        "best_speedup": float(df["speedup"].max()) if ntotal else 0.0,
        "ncorrect": int(df["correct"].sum()),
        "ntotal": ntotal,
    }
    total_baseline = float(df["baseline_ms"].sum())
    if total_baseline > 0:
        stats["time_percentage"] = (
            float(df["optimized_ms"].sum()) / total_baseline * 100
        )
    else:
        stats["time_percentage"] = 0.0
    return df, stats


def save_results(results, filename):
    jsonpickle.dump(results, filename)


def load_results(filename):
    return jsonpickle.load(filename)

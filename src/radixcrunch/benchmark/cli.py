"""
Command-line benchmark of the baseline against the optimized conversion
"""

import argparse
import logging

from . import suite
from ..convert import bitpack
from ..convert.aligned import MAX_ALIGNMENT_EXPONENT
from ..convert.engine import ConversionEngine
from ..convert.smallvalue import FASTPATH_BITS
from ..utils import cli

logger = logging.getLogger(__name__)


def parse_digits(text):
    """Comma separated, least significant digit first: "5,4,3,2,1" is 12345"""
    try:
        return [int(s) for s in text.split(",") if s.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            "Digits must be comma separated integers, not {!r}".format(text)
        )


def argparser():
    parser = argparse.ArgumentParser(
        description=__doc__.strip(), parents=[cli.logging_argparser()]
    )
    engine = parser.add_argument_group("engine")
    engine.add_argument(
        "--max-exponent",
        default=MAX_ALIGNMENT_EXPONENT,
        type=int,
        help="Bound of the aligned-base exponent search",
    )
    engine.add_argument(
        "--fastpath-bits",
        default=FASTPATH_BITS,
        type=int,
        help="Accumulator width of the small-value fast path",
    )
    engine.add_argument(
        "--packer",
        default=bitpack.packerType.auto,
        choices=list(bitpack.packerType),
        help="Bit packer of the power-of-two conversion",
    )
    run = parser.add_argument_group("benchmark")
    run.add_argument(
        "--digits",
        default=None,
        type=parse_digits,
        help="Benchmark these digits only (comma separated, least significant first)",
    )
    run.add_argument("--from-base", default=10, type=int, help="Base of --digits")
    run.add_argument("--to-base", default=16, type=int, help="Target base of --digits")
    run.add_argument(
        "--iterations", default=1000, type=int, help="Iterations for --digits"
    )
    run.add_argument("--kind", default="custom", type=str, help="Label for --digits")
    run.add_argument(
        "--scale",
        default=1.0,
        type=float,
        help="Multiplies the iterations of the standard scenarios",
    )
    run.add_argument(
        "--parallel",
        action="store_true",
        help="Run baseline and optimized loops in separate processes",
    )
    out = parser.add_argument_group("output")
    out.add_argument("--output", default="", type=str, help="Save results (json)")
    out.add_argument("--csv", default="", type=str, help="Save the summary table")
    return parser


def main(argv=None):
    """
    Returns:
        int: exit code (1 when a benchmark produced an incorrect result)
    """
    args = argparser().parse_args(argv)
    engine = ConversionEngine(
        max_exponent=args.max_exponent,
        fastpath_bits=args.fastpath_bits,
        packer=args.packer,
    )
    if args.digits is None:
        lst = suite.scenarios(scale=args.scale)
    else:
        lst = [
            suite.Scenario(
                args.kind,
                args.kind,
                "{} digits ({}→{})".format(
                    len(args.digits), args.from_base, args.to_base
                ),
                args.iterations,
                args.digits,
                args.from_base,
                args.to_base,
            )
        ]
    results = suite.run_suite(lst, engine=engine, parallel=args.parallel)
    df, stats = suite.summary(results)

    print(df.to_string(index=False))
    print("Average speedup: {:.2f}x".format(stats["average_speedup"]))
    print("Best speedup: {:.2f}x".format(stats["best_speedup"]))
    print("Tests passed: {}/{}".format(stats["ncorrect"], stats["ntotal"]))
    print("Optimized/baseline time: {:.1f}%".format(stats["time_percentage"]))

    if args.output:
        suite.save_results(results, args.output)
        logger.info("Results saved in {}".format(args.output))
    if args.csv:
        df.to_csv(args.csv, index=False)
        logger.info("Summary saved in {}".format(args.csv))

    if stats["ncorrect"] == stats["ntotal"]:
        return 0
    return 1

"""Command-line front end: ``calc "2 ^ 3 ^ 2"``."""
import argparse
import logging
import sys

import pandas as pd

from calc.config import validate_config
from calc.errors import CalcError
from calc.pipeline import evaluate_expression, to_rpn, trace_expression
from calc.trace import format_rpn, steps_to_frame

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate an infix arithmetic expression")
    parser.add_argument("expr", nargs="+", help="expression; several arguments are joined with spaces")
    parser.add_argument("--rpn", action="store_true", help="print the RPN form instead of the result")
    parser.add_argument("--trace", action="store_true", help="print every conversion/evaluation step")
    parser.add_argument("--max-depth", type=int, default=None, help="stack capacity override")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    validate_config()

    src = " ".join(args.expr)
    logger.debug("evaluating %r", src)
    try:
        if args.rpn:
            print(format_rpn(to_rpn(src, max_depth=args.max_depth)))
        elif args.trace:
            result, steps = trace_expression(src, max_depth=args.max_depth)
            with pd.option_context("display.max_colwidth", None, "display.width", 200):
                print(steps_to_frame(steps).to_string(index=False))
            print(f"result = {result!r}")
        else:
            print(repr(evaluate_expression(src, max_depth=args.max_depth)))
    except CalcError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

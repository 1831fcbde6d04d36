# Command line front end for showwork
# Usage: python show_work.py "sqrt(9 + 7) * 2"

from argparse import ArgumentParser
from dotenv import load_dotenv
import logging
import sys

# env must be loaded before importing the local modules
load_dotenv()

# Local dependencies
from showwork.calculator import calculator
from showwork.errors import CalculatorError
from showwork.global_vars import LOG_LEVEL


def get_parser():
    parser = ArgumentParser(description="Evaluate an arithmetic expression and show every step.")
    parser.add_argument("expression", nargs='+',
                        help="expression to evaluate, e.g. \"(1 + 2) * 3\"")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log each pipeline stage to stderr")

    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL)

    try:
        calculator(' '.join(args.expression))
    except CalculatorError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

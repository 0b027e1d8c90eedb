import argparse
import logging
from typing import Optional, Sequence

from listcalc.errors import CalculatorError
from listcalc.runtime import calculate

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="listcalc", description="Evaluate arithmetic expressions line by line")
    parser.add_argument("-e", "--expression", help="evaluate a single expression and exit")
    parser.add_argument("--prompt", default="> ", help="prompt shown before each line (default: %(default)r)")
    parser.add_argument("--strict", action="store_true", help="exit with status 1 on the first malformed line")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def _evaluate_and_print(line: str) -> bool:
    try:
        answer = calculate(line)
    except CalculatorError as e:
        logger.info("evaluation of %r failed: %s", line, e.errmsg)
        print(e)
        return False
    print(f"answer = {answer}")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.expression is not None:
        return 0 if _evaluate_and_print(args.expression) else 1

    while True:
        try:
            line = input(args.prompt)
        except EOFError:
            return 0

        if not line:
            return 0

        if not _evaluate_and_print(line) and args.strict:
            return 1

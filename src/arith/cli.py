"""Command-line entry point: ``arith ( -small-step | -big-step ) file``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Sequence

from arith.errors import ArithError
from arith.eval import Strategy, evaluate
from arith.pretty import render_tree
from arith.syntax.parse import parse_file

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "arith is an implementation of the untyped calculus "
    "of booleans and numbers (TAPL chapter 3 & 4)."
)


class _StrategyAction(argparse.Action):
    """Store a strategy, rejecting a second strategy flag of any kind."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest) is not None:
            parser.error(f"argument {option_string}: strategy given more than once")
        setattr(namespace, self.dest, self.const)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``arith`` command."""

    parser = argparse.ArgumentParser(
        prog="arith",
        usage="%(prog)s ( -small-step | -big-step ) file",
        description=DESCRIPTION,
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "-small-step",
        dest="strategy",
        action=_StrategyAction,
        nargs=0,
        const=Strategy.SMALL_STEP,
        help="run the small-step evaluator",
    )
    group.add_argument(
        "-big-step",
        dest="strategy",
        action=_StrategyAction,
        nargs=0,
        const=Strategy.BIG_STEP,
        help="run the big-step evaluator",
    )
    parser.add_argument("file", help="program to evaluate")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log every reduction step to standard error",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interpreter and return the process exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        stream = open(args.file, "rb")
    except OSError as exc:
        print(exc, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    try:
        with stream:
            term = parse_file(stream, args.file)
        logger.debug("parsed %s, evaluating with %s", args.file, args.strategy.value)
        result = evaluate(term, args.strategy)
    except ArithError as exc:
        print(exc, file=sys.stderr)
        return 1
    except RecursionError:
        print(f"{args.file}: term nested too deeply", file=sys.stderr)
        return 1

    sys.stdout.write(render_tree(result))
    return 0


__all__ = ["build_parser", "main"]

"""Roll dice expressions from the command line."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from src.config import get_settings
from src.engine import DiceError, evaluate
from src.utils import format_roll_block, format_roll_error, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate dice notation such as 2d20kh1+5.")
    parser.add_argument("expressions", nargs="+", metavar="EXPR", help="dice expression to roll")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible rolls")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    rng = random.Random(args.seed) if args.seed is not None else settings.make_rng()

    failed = False
    for expression in args.expressions:
        if len(expression) > settings.max_expression_length:
            print(  # noqa: T201
                f"Expression is too long ({len(expression)} characters, "
                f"limit {settings.max_expression_length})."
            )
            failed = True
            continue
        try:
            result = evaluate(expression, rng=rng, max_dice=settings.max_dice)
        except DiceError as exc:
            print(format_roll_error(expression, exc))  # noqa: T201
            failed = True
            continue
        print(format_roll_block(expression, result))  # noqa: T201

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

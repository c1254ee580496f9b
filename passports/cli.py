from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .models import ValidationMode
from .parser import PassportParseError, read_passports
from .report import format_result
from .validator import count_valid

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count valid passport records in a batch file.")
    parser.add_argument("part", type=int, help="1 for presence rules, any other value for strict rules.")
    parser.add_argument("input", help="Batch file of blank-line separated records.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode = ValidationMode.from_selector(args.part)
    try:
        passports = read_passports(args.input)
    except (PassportParseError, OSError) as exc:
        logger.error("cannot read passports from %s: %s", args.input, exc)
        return 1

    valid_count = count_valid(passports, mode)
    logger.info("%d of %d records valid under %s rules", valid_count, len(passports), mode.value)
    print(format_result(valid_count))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

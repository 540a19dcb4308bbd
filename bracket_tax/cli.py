#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from bracket_tax.config import Settings, get_settings
from bracket_tax.core.brackets import calculate
from bracket_tax.core.loader import load_brackets
from bracket_tax.core.numbers import format_money
from bracket_tax.core.validate import parse_income
from bracket_tax.error_map import describe
from bracket_tax.errors import TaxTableError

logger = logging.getLogger("bracket_tax")

PROMPT = "Enter taxable income: "


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bracket-tax",
        description=(
            "Compute income tax owed from a progressive bracket table. "
            "The table path is taken from TAX_TABLE_PATH (default tax_table.csv)."
        ),
    )
    return parser.parse_args(argv)


def _configure_logging(settings: Settings) -> None:
    logger.setLevel(settings.log_level_number())
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logger.addHandler(handler)


def run(settings: Settings, stdin: TextIO, stdout: TextIO) -> int:
    try:
        brackets = load_brackets(settings.tax_table_path)
        stdout.write(PROMPT)
        stdout.flush()
        income = parse_income(stdin.readline())
        tax = calculate(income, brackets)
        result = f"Tax owed: {format_money(tax)}"
    except TaxTableError as exc:
        info = describe(exc)
        logger.info("Run failed (%s): %s", info.kind, info.message)
        print(info.console_line, file=stdout)
        return info.exit_code
    except Exception as exc:
        logger.exception("Unexpected failure computing tax")
        info = describe(exc)
        print(info.console_line, file=stdout)
        return info.exit_code

    print(result, file=stdout)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parse_args(argv)
    settings = get_settings()
    _configure_logging(settings)
    return run(settings, sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())

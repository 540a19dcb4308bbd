from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from bracket_tax.core.brackets import TaxBracket
from bracket_tax.core.numbers import parse_decimal
from bracket_tax.errors import (
    InvalidTableDataError,
    TableNotFoundError,
    TablePermissionError,
)

logger = logging.getLogger("bracket_tax")

COLUMNS = ("min_income", "max_income", "base_tax", "rate", "threshold")


def _read_lines(path: Path) -> list[str]:
    # read_text translates \r\n and \r to \n; other separators stay in the line.
    try:
        return path.read_text(encoding="utf-8-sig").split("\n")
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise TableNotFoundError(path) from exc
    except PermissionError as exc:
        raise TablePermissionError(path) from exc
    except UnicodeDecodeError as exc:
        raise InvalidTableDataError(f"{path.name} is not valid UTF-8 text.") from exc


def _parse_row(line: str, row: int) -> TaxBracket:
    parts = line.split(",")
    if len(parts) < len(COLUMNS):
        raise InvalidTableDataError(f"CSV row {row} does not have 5 columns.", row=row)
    try:
        values = [parse_decimal(part) for part in parts[: len(COLUMNS)]]
    except ValueError as exc:
        raise InvalidTableDataError(f"CSV row {row} has an invalid number format.", row=row) from exc
    bracket = TaxBracket(**dict(zip(COLUMNS, values)))
    if bracket.min_income > bracket.max_income:
        raise InvalidTableDataError(
            f"CSV row {row} has min income greater than max income.", row=row
        )
    return bracket


def _warn_overlaps(brackets: tuple[TaxBracket, ...]) -> None:
    for lower, upper in zip(brackets, brackets[1:]):
        if upper.min_income <= lower.max_income:
            logger.warning(
                "Tax brackets overlap: %s-%s and %s-%s; the lower bracket wins",
                lower.min_income,
                lower.max_income,
                upper.min_income,
                upper.max_income,
            )


def load_brackets(path: str | PathLike[str]) -> tuple[TaxBracket, ...]:
    """Load a comma-delimited bracket table, sorted by ``min_income``.

    The first line is a header and is not inspected. Row numbers in error
    messages count every physical line, header included.
    """

    table_path = Path(path)
    lines = _read_lines(table_path)

    parsed: list[TaxBracket] = []
    for row, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if not line:
            continue
        parsed.append(_parse_row(line, row))

    if not parsed:
        raise InvalidTableDataError(f"{table_path.name} is empty or missing data rows.")

    brackets = tuple(sorted(parsed, key=lambda b: b.min_income))
    logger.debug("Loaded %d tax brackets from %s", len(brackets), table_path)
    _warn_overlaps(brackets)
    return brackets


__all__ = ["COLUMNS", "load_brackets"]

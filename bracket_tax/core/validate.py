from __future__ import annotations

from decimal import Decimal

from bracket_tax.core.numbers import (
    MAX_FRACTION_DIGITS,
    MAX_INTEGER_DIGITS,
    NumberTooLongError,
    parse_decimal,
)
from bracket_tax.errors import InvalidIncomeError

MSG_EMPTY = "No income was entered."
MSG_NOT_A_NUMBER = "Income must be a valid number (example: 25000 or 25000.00)."
MSG_TOO_LONG = (
    f"Income must have at most {MAX_INTEGER_DIGITS} digits before "
    f"and {MAX_FRACTION_DIGITS} after the decimal point."
)
MSG_NEGATIVE = "Income must be non-negative."


def parse_income(text: str | None) -> Decimal:
    if text is None or not text.strip():
        raise InvalidIncomeError(MSG_EMPTY)
    try:
        income = parse_decimal(text)
    except NumberTooLongError as exc:
        raise InvalidIncomeError(MSG_TOO_LONG) from exc
    except ValueError as exc:
        raise InvalidIncomeError(MSG_NOT_A_NUMBER) from exc
    if income < 0:
        raise InvalidIncomeError(MSG_NEGATIVE)
    return income


__all__ = ["parse_income", "MSG_EMPTY", "MSG_NOT_A_NUMBER", "MSG_TOO_LONG", "MSG_NEGATIVE"]

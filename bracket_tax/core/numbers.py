from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext

D = Decimal

MAX_INTEGER_DIGITS = 18
MAX_FRACTION_DIGITS = 10

# Wide enough that base + (income - threshold) * rate is exact for any
# pair of values within the digit limits above.
ARITHMETIC_CONTEXT = Context(prec=64, rounding=ROUND_HALF_UP)

_CENT = D("0.01")
# ASCII digits and a period decimal separator only; no grouping, exponents
# or special values.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?P<int>\d*)(?:\.(?P<frac>\d*))?", re.ASCII)


class NumberTooLongError(ValueError):
    pass


def parse_decimal(text: str) -> D:
    """Parse ``text`` as a plain decimal number independent of host locale.

    Raises ``ValueError`` when the trimmed text is not of the form
    ``[+-]digits[.digits]``, and ``NumberTooLongError`` when it carries more
    than ``MAX_INTEGER_DIGITS`` integer or ``MAX_FRACTION_DIGITS`` fraction
    digits.
    """

    value = text.strip()
    match = _DECIMAL_PATTERN.fullmatch(value)
    if match is None or not (match["int"] or match["frac"]):
        raise ValueError(f"not a decimal number: {text!r}")
    integer_digits = match["int"].lstrip("0")
    fraction_digits = match["frac"] or ""
    if len(integer_digits) > MAX_INTEGER_DIGITS or len(fraction_digits) > MAX_FRACTION_DIGITS:
        raise NumberTooLongError(f"too many digits: {text!r}")
    return D(value)


def quantize_cents(amount: D) -> D:
    with localcontext(ARITHMETIC_CONTEXT):
        return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_money(amount: D) -> str:
    return f"${quantize_cents(amount):f}"


__all__ = [
    "ARITHMETIC_CONTEXT",
    "MAX_FRACTION_DIGITS",
    "MAX_INTEGER_DIGITS",
    "NumberTooLongError",
    "parse_decimal",
    "quantize_cents",
    "format_money",
]

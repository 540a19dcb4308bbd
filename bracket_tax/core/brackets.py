from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Iterable

from bracket_tax.core.numbers import ARITHMETIC_CONTEXT
from bracket_tax.errors import UnmatchedIncomeError

D = Decimal

_ZERO = D("0")


@dataclass(frozen=True)
class TaxBracket:
    min_income: D
    max_income: D
    base_tax: D
    rate: D
    threshold: D

    def contains(self, income: D) -> bool:
        return self.min_income <= income <= self.max_income

    def tax_for(self, income: D) -> D:
        return self.base_tax + (income - self.threshold) * self.rate


def calculate(income: D, brackets: Iterable[TaxBracket]) -> D:
    """Return tax owed on ``income`` using the first bracket containing it.

    The result is exact; callers round for display. Brackets that would
    imply a rebate are floored at zero.
    """

    for bracket in brackets:
        if bracket.contains(income):
            with localcontext(ARITHMETIC_CONTEXT):
                return max(_ZERO, bracket.tax_for(income))
    raise UnmatchedIncomeError(income)


__all__ = ["TaxBracket", "calculate"]

from __future__ import annotations

from bracket_tax.core.brackets import TaxBracket, calculate
from bracket_tax.core.loader import load_brackets
from bracket_tax.core.validate import parse_income

__all__ = ["TaxBracket", "calculate", "load_brackets", "parse_income"]

from __future__ import annotations

from decimal import Decimal
from os import PathLike
from pathlib import Path
from typing import Literal

ErrorKind = Literal[
    "NotFound",
    "PermissionDenied",
    "InvalidData",
    "InvalidInput",
    "UnmatchedIncome",
]

__all__ = [
    "ErrorKind",
    "TaxTableError",
    "TableNotFoundError",
    "TablePermissionError",
    "InvalidTableDataError",
    "InvalidIncomeError",
    "UnmatchedIncomeError",
]


class TaxTableError(Exception):
    """Base class for every failure a single run can end with."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TableNotFoundError(TaxTableError, FileNotFoundError):
    kind: ErrorKind = "NotFound"

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"Could not find {self.path.name}.")


class TablePermissionError(TaxTableError, PermissionError):
    kind: ErrorKind = "PermissionDenied"

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"Permission issue reading {self.path.name}.")


class InvalidTableDataError(TaxTableError):
    kind: ErrorKind = "InvalidData"

    def __init__(self, message: str, row: int | None = None) -> None:
        super().__init__(message)
        self.row = row


class InvalidIncomeError(TaxTableError, ValueError):
    kind: ErrorKind = "InvalidInput"


class UnmatchedIncomeError(TaxTableError):
    kind: ErrorKind = "UnmatchedIncome"

    def __init__(self, income: Decimal) -> None:
        super().__init__("Income did not match any tax bracket. Check the CSV ranges.")
        self.income = income

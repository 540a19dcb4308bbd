from decimal import Decimal as D

import pytest

from bracket_tax.error_map import ErrorInfo, describe
from bracket_tax.errors import (
    InvalidIncomeError,
    InvalidTableDataError,
    TableNotFoundError,
    TablePermissionError,
    UnmatchedIncomeError,
)


def test_not_found_names_file():
    info = describe(TableNotFoundError("/srv/tables/tax_table.csv"))
    assert info.kind == "NotFound"
    assert info.console_line == (
        "Error: Could not find tax_table.csv. Make sure it is in the working directory."
    )


def test_permission_denied():
    info = describe(TablePermissionError("tax_table.csv"))
    assert info.console_line == "Error: Permission issue reading tax_table.csv."


@pytest.mark.parametrize(
    "exc,kind,category,exit_code",
    [
        (InvalidIncomeError("No income was entered."), "InvalidInput", "User input", 2),
        (TableNotFoundError("tax_table.csv"), "NotFound", "Bracket table", 3),
        (TablePermissionError("tax_table.csv"), "PermissionDenied", "Bracket table", 4),
        (InvalidTableDataError("CSV row 2 does not have 5 columns.", row=2), "InvalidData", "Bracket table", 5),
        (UnmatchedIncomeError(D("5")), "UnmatchedIncome", "Configuration", 6),
    ],
)
def test_kinds_map_to_distinct_exit_codes(exc, kind, category, exit_code):
    info = describe(exc)
    assert isinstance(info, ErrorInfo)
    assert info.kind == kind
    assert info.category == category
    assert info.exit_code == exit_code


def test_message_passthrough():
    info = describe(InvalidTableDataError("CSV row 7 has an invalid number format.", row=7))
    assert info.console_line == "Error: CSV row 7 has an invalid number format."


def test_unexpected_exception():
    info = describe(RuntimeError("boom"))
    assert info.kind == "Unexpected"
    assert info.exit_code == 1
    assert info.console_line == "Error: boom"

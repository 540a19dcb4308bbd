from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from bracket_tax.errors import (
    TableNotFoundError,
    TablePermissionError,
    TaxTableError,
)


@dataclass(frozen=True)
class ErrorInfo:
    """How a failed run is reported on the console."""

    kind: str
    category: str
    exit_code: int
    message: str

    @property
    def console_line(self) -> str:
        return f"Error: {self.message}"


@dataclass(frozen=True)
class _KindInfo:
    category: str
    exit_code: int


_KINDS: Dict[str, _KindInfo] = {
    "InvalidInput": _KindInfo(category="User input", exit_code=2),
    "NotFound": _KindInfo(category="Bracket table", exit_code=3),
    "PermissionDenied": _KindInfo(category="Bracket table", exit_code=4),
    "InvalidData": _KindInfo(category="Bracket table", exit_code=5),
    "UnmatchedIncome": _KindInfo(category="Configuration", exit_code=6),
}

_UNEXPECTED = _KindInfo(category="Unexpected", exit_code=1)


def describe(exc: BaseException) -> ErrorInfo:
    """Return the console message and exit code for a failed run."""

    if isinstance(exc, TableNotFoundError):
        message = f"Could not find {exc.path.name}. Make sure it is in the working directory."
    elif isinstance(exc, TablePermissionError):
        message = f"Permission issue reading {exc.path.name}."
    else:
        message = str(exc) or exc.__class__.__name__

    if isinstance(exc, TaxTableError):
        info = _KINDS[exc.kind]
        kind = exc.kind
    else:
        info = _UNEXPECTED
        kind = "Unexpected"
    return ErrorInfo(kind=kind, category=info.category, exit_code=info.exit_code, message=message)


__all__ = ["ErrorInfo", "describe"]

import logging
import pathlib
import sys

import pytest

p = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.insert(0, p) if p not in sys.path else None

from bracket_tax.config import get_settings  # noqa: E402

HEADER = "minIncome,maxIncome,baseTax,rate,threshold"
SIMPLE_ROWS = [
    "0,9999,0,0.10,0",
    "10000,99999999,1000,0.20,10000",
]


@pytest.fixture()
def write_table(tmp_path):
    def _write(rows, name="tax_table.csv", header=HEADER):
        path = tmp_path / name
        lines = ([header] if header is not None else []) + list(rows)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def simple_table(write_table):
    return write_table(SIMPLE_ROWS)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("TAX_TABLE_PATH", raising=False)
    monkeypatch.delenv("TAX_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger("bracket_tax")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)

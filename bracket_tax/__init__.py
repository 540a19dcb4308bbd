"""
Progressive income tax from a bracket table.

Loads a comma-delimited bracket table, reads one taxable income and reports
the tax owed. See ``bracket_tax.cli`` for the console entry point.
"""
from __future__ import annotations

__version__ = "0.1.0"

"""CSV reports for the example FIR filters."""

from ._annotations import (
    coefficient_summary,
    difference_equation,
    zero_description,
)
from ._catalog import CATALOG, CatalogEntry, catalog_entry
from ._cli import main
from ._table import report_rows, write_catalog, write_report

__all__ = [
    "CATALOG",
    "CatalogEntry",
    "catalog_entry",
    "coefficient_summary",
    "difference_equation",
    "main",
    "report_rows",
    "write_catalog",
    "write_report",
    "zero_description",
]

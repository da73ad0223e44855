"""torchfir: PyTorch frequency analysis of short FIR filters."""

from . import filter_analysis, report
from ._constants import DEFAULT_DTYPE, NUM_FREQUENCIES
from ._exceptions import (
    FilterAnalysisError,
    InvalidOrderError,
    ReportWriteError,
)

__all__ = [
    "filter_analysis",
    "report",
    # Constants
    "DEFAULT_DTYPE",
    "NUM_FREQUENCIES",
    # Exceptions
    "FilterAnalysisError",
    "InvalidOrderError",
    "ReportWriteError",
]

__version__ = "0.1.0"

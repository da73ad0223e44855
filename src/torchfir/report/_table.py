"""CSV report tables for analyzed filters."""

from __future__ import annotations

import csv
import logging
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from torch import Tensor

from torchfir._constants import DEFAULT_OUTPUT_DIRECTORY, NUM_FREQUENCIES
from torchfir._exceptions import ReportWriteError
from torchfir.filter_analysis import (
    FirstOrderAnalysis,
    SecondOrderAnalysis,
    analyze,
)

from ._annotations import (
    coefficient_summary,
    difference_equation,
    zero_description,
)
from ._catalog import CATALOG, CatalogEntry

logger = logging.getLogger(__name__)

HEADER = ("Frequency", "Amplitude", "Phase")

# Rows that carry an extra annotation cell after the sample values
EQUATION_ROW = 1
ZEROS_ROW = 3

# Fewest samples that still reach the zeros row
MIN_REPORT_FREQUENCIES = ZEROS_ROW + 1


def report_rows(
    analysis: Union[FirstOrderAnalysis, SecondOrderAnalysis],
) -> List[List[str]]:
    """
    Rows of the report table for one analyzed filter.

    The first row is the header followed by the coefficient summary. Each
    following row is one frequency sample formatted with six decimals.
    Sample row 1 also carries the difference equation and sample row 3 the
    zero location, each after an empty spacer cell.

    Parameters
    ----------
    analysis : FirstOrderAnalysis or SecondOrderAnalysis
        Result of an unbatched analysis.

    Returns
    -------
    list of list of str
        Table cells, header first.

    Raises
    ------
    ValueError
        If the curve has fewer than MIN_REPORT_FREQUENCIES samples, so
        that the zero annotation would have no row.
    """
    count = analysis.curve.amplitude.shape[-1]
    if count < MIN_REPORT_FREQUENCIES:
        raise ValueError(
            f"a report needs at least {MIN_REPORT_FREQUENCIES} samples to "
            f"carry its annotations, got {count}"
        )

    rows = [
        list(HEADER) + ["", coefficient_summary(analysis.coefficients)]
    ]

    for index, sample in enumerate(analysis.curve.samples()):
        row = [
            f"{sample.frequency:f}",
            f"{sample.amplitude:f}",
            f"{sample.phase:f}",
        ]
        if index == EQUATION_ROW:
            row += ["", difference_equation(analysis.coefficients)]
        elif index == ZEROS_ROW:
            row += ["", zero_description(analysis)]
        rows.append(row)

    return rows


def write_report(
    path: Union[str, PathLike],
    analysis: Union[FirstOrderAnalysis, SecondOrderAnalysis],
) -> Path:
    """
    Write the report table of one analyzed filter as CSV.

    Every cell is quoted and lines end with ``\\n``.

    Parameters
    ----------
    path : str or PathLike
        Destination file. Overwritten if it exists.
    analysis : FirstOrderAnalysis or SecondOrderAnalysis
        Result of an unbatched analysis.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ReportWriteError
        If the destination cannot be opened or written.
    """
    path = Path(path)
    rows = report_rows(analysis)

    try:
        with path.open("w", newline="") as file:
            writer = csv.writer(
                file, quoting=csv.QUOTE_ALL, lineterminator="\n"
            )
            writer.writerows(rows)
    except OSError as error:
        raise ReportWriteError(
            f"cannot write report {path}: {error}"
        ) from error

    logger.info("wrote %s (%d samples)", path, len(rows) - 1)

    return path


def write_catalog(
    directory: Union[str, PathLike] = DEFAULT_OUTPUT_DIRECTORY,
    catalog: Iterable[CatalogEntry] = CATALOG,
    frequencies: Union[Tensor, int] = NUM_FREQUENCIES,
    names: Optional[Sequence[str]] = None,
) -> List[Path]:
    """
    Analyze catalog filters and write one ``<name>.csv`` table for each.

    Parameters
    ----------
    directory : str or PathLike, default DEFAULT_OUTPUT_DIRECTORY
        Output directory, created if missing.
    catalog : iterable of CatalogEntry, default CATALOG
        Filters to report.
    frequencies : Tensor or int, default NUM_FREQUENCIES
        Sampling of each response curve.
    names : sequence of str, optional
        Restrict the run to entries with these names.

    Returns
    -------
    list of Path
        Written files in catalog order.

    Raises
    ------
    ReportWriteError
        If the directory or a table cannot be written.
    ValueError
        If fewer than MIN_REPORT_FREQUENCIES samples are requested.
    """
    if (
        isinstance(frequencies, int)
        and not isinstance(frequencies, bool)
        and frequencies < MIN_REPORT_FREQUENCIES
    ):
        raise ValueError(
            f"a report needs at least {MIN_REPORT_FREQUENCIES} samples to "
            f"carry its annotations, got {frequencies}"
        )

    directory = Path(directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise ReportWriteError(
            f"cannot create output directory {directory}: {error}"
        ) from error

    written = []
    for entry in catalog:
        if names is not None and entry.name not in names:
            continue

        analysis = analyze(entry.coefficients, frequencies)
        logger.debug(
            "%s (%s): %s",
            entry.name,
            entry.description,
            zero_description(analysis),
        )
        path = directory / f"{entry.name}.csv"
        written.append(write_report(path, analysis))

    return written

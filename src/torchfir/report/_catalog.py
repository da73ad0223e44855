"""Example filters reported by the command line driver."""

from typing import NamedTuple, Tuple

from torchfir.filter_analysis import FilterCoefficients


class CatalogEntry(NamedTuple):
    """A named example filter.

    Parameters
    ----------
    name : str
        Identity of the filter, used as the report file stem.
    description : str
        Short human readable description.
    coefficients : FilterCoefficients
        Gain and normalized coefficients.
    """

    name: str
    description: str
    coefficients: FilterCoefficients


CATALOG: Tuple[CatalogEntry, ...] = (
    # Order 1
    CatalogEntry(
        "1_lpf",
        "box filter low pass",
        FilterCoefficients(0.5, (1.0,)),
    ),
    CatalogEntry(
        "1_hpf",
        "high pass in the same style as the box filter",
        FilterCoefficients(0.5, (-1.0,)),
    ),
    CatalogEntry(
        "1_lpf2",
        "weaker low pass that is not linear phase",
        FilterCoefficients(0.5, (2.0,)),
    ),
    # Order 2
    CatalogEntry(
        "2_lpf",
        "low pass",
        FilterCoefficients(0.5, (2.0, 1.22)),
    ),
    CatalogEntry(
        "2_hpf",
        "high pass",
        FilterCoefficients(0.5, (-1.6, 0.8)),
    ),
    CatalogEntry(
        "2_notch",
        "notch at half Nyquist",
        FilterCoefficients(0.5, (0.0, 1.0)),
    ),
)


def catalog_entry(name: str) -> CatalogEntry:
    """Look up a catalog entry by name.

    Raises
    ------
    KeyError
        If no entry has that name.
    """
    for entry in CATALOG:
        if entry.name == name:
            return entry

    raise KeyError(
        f"unknown filter {name!r}, expected one of "
        f"{', '.join(entry.name for entry in CATALOG)}"
    )

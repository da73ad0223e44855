"""Exceptions for torchfir."""


class FilterAnalysisError(Exception):
    """Base exception for filter analysis errors."""

    pass


class InvalidOrderError(FilterAnalysisError):
    """Raised when a coefficient tuple does not describe a supported filter.

    This occurs when:
    - No normalized coefficients follow the gain
    - More than two normalized coefficients are given (order > 2)
    """

    pass


class ReportWriteError(FilterAnalysisError):
    """Raised when a report table cannot be written to its destination."""

    pass

"""Human readable annotations placed in report tables."""

from typing import Union

from torchfir.filter_analysis import (
    FilterCoefficients,
    FirstOrderAnalysis,
    SecondOrderAnalysis,
)


def coefficient_summary(coefficients: FilterCoefficients) -> str:
    """``a0 = ..., alpha1 = ...[, alpha2 = ...]``."""
    parts = [f"a0 = {float(coefficients.gain):f}"]
    for k, alpha in enumerate(coefficients.alphas, start=1):
        parts.append(f"alpha{k} = {float(alpha):f}")

    return ", ".join(parts)


def difference_equation(coefficients: FilterCoefficients) -> str:
    """Difference equation written with the effective taps.

    >>> from torchfir.filter_analysis import FilterCoefficients
    >>> difference_equation(FilterCoefficients(0.5, (1.0,)))
    'output[index] = input[index] * 0.500000 + input[index-1] * 0.500000'
    """
    terms = []
    for delay, tap in enumerate(coefficients.taps):
        sample = "input[index]" if delay == 0 else f"input[index-{delay}]"
        terms.append(f"{sample} * {float(tap):f}")

    return "output[index] = " + " + ".join(terms)


def zero_description(
    analysis: Union[FirstOrderAnalysis, SecondOrderAnalysis],
) -> str:
    """Location of the zero(s) of an analyzed filter."""
    if isinstance(analysis, FirstOrderAnalysis):
        return f"Zero = {float(analysis.zero):f}"

    return "Zeroes = " + ", ".join(
        f"{float(zero.real):f} + {float(zero.imag):f}i"
        for zero in analysis.zeros
    )

"""Order dispatch for filter analysis."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchfir._constants import NUM_FREQUENCIES

from ._filter_coefficients import FilterCoefficients, Scalar
from ._first_order import FirstOrderAnalysis, analyze_first_order
from ._second_order import SecondOrderAnalysis, analyze_second_order


def analyze(
    coefficients: Union[FilterCoefficients, Sequence[Scalar]],
    frequencies: Union[Tensor, int] = NUM_FREQUENCIES,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Union[FirstOrderAnalysis, SecondOrderAnalysis]:
    """
    Analyze an order-1 or order-2 filter.

    Parameters
    ----------
    coefficients : FilterCoefficients or sequence
        Either a :class:`FilterCoefficients` or a flat sequence
        ``(a0, alpha1)`` / ``(a0, alpha1, alpha2)``.
    frequencies : Tensor or int, default NUM_FREQUENCIES
        Number of points from DC to Nyquist, or explicit normalized
        frequencies.
    dtype : torch.dtype, optional
        Real floating point working dtype.

    Returns
    -------
    FirstOrderAnalysis or SecondOrderAnalysis

    Raises
    ------
    InvalidOrderError
        If the coefficients do not describe an order-1 or order-2 filter.
    """
    # Hand-built FilterCoefficients skip the from_sequence order check
    if isinstance(coefficients, FilterCoefficients):
        coefficients = (coefficients.gain,) + tuple(coefficients.alphas)
    coefficients = FilterCoefficients.from_sequence(coefficients)

    if coefficients.order == 1:
        return analyze_first_order(
            coefficients.gain,
            *coefficients.alphas,
            frequencies,
            dtype=dtype,
        )

    return analyze_second_order(
        coefficients.gain,
        *coefficients.alphas,
        frequencies,
        dtype=dtype,
    )

"""Analysis of order-1 FIR filters."""

from typing import NamedTuple, Optional, Union

import torch
from torch import Tensor

from torchfir._constants import NUM_FREQUENCIES

from ._filter_coefficients import (
    FilterCoefficients,
    Scalar,
    _as_real_tensor,
    _resolve_dtype,
)
from ._frequency_response_fir import frequency_response_fir
from ._response_curve import ResponseCurve


class FirstOrderAnalysis(NamedTuple):
    """Result of :func:`analyze_first_order`.

    Parameters
    ----------
    coefficients : FilterCoefficients
        The analyzed coefficients. ``coefficients.taps`` gives ``(a0, a1)``.
    curve : ResponseCurve
        Sampled frequency and phase response.
    zero : Tensor
        The single real zero, ``-alpha1``.
    """

    coefficients: FilterCoefficients
    curve: ResponseCurve
    zero: Tensor


def analyze_first_order(
    a0: Scalar,
    alpha1: Scalar,
    frequencies: Union[Tensor, int] = NUM_FREQUENCIES,
    *,
    dtype: Optional[torch.dtype] = None,
) -> FirstOrderAnalysis:
    r"""
    Frequency response and zero of an order-1 FIR filter.

    The filter is :math:`y[n] = a_0 x[n] + a_0 \alpha_1 x[n-1]`, with
    transfer function :math:`H(z) = a_0 (1 + \alpha_1 z^{-1})`.

    Parameters
    ----------
    a0 : Tensor or float
        Overall gain.
    alpha1 : Tensor or float
        Normalized coefficient of the one-sample delay.
    frequencies : Tensor or int, default NUM_FREQUENCIES
        Number of points from DC to Nyquist, or explicit normalized
        frequencies.
    dtype : torch.dtype, optional
        Real floating point working dtype.

    Returns
    -------
    FirstOrderAnalysis
        Coefficients, response curve and zero.

    Examples
    --------
    Box low-pass filter, unity gain at DC and a zero at Nyquist:

    >>> from torchfir.filter_analysis import analyze_first_order
    >>> analysis = analyze_first_order(0.5, 1.0)
    >>> analysis.zero
    tensor(-1., dtype=torch.float64)
    """
    dtype = _resolve_dtype(dtype)
    a0 = _as_real_tensor(a0, dtype)
    alpha1 = _as_real_tensor(alpha1, dtype)

    curve = frequency_response_fir(a0, [alpha1], frequencies, dtype=dtype)

    return FirstOrderAnalysis(
        coefficients=FilterCoefficients(a0, (alpha1,)),
        curve=curve,
        zero=-alpha1,
    )

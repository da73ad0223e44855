"""Analysis of order-2 FIR filters."""

from typing import NamedTuple, Optional, Tuple, Union

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


class SecondOrderAnalysis(NamedTuple):
    """Result of :func:`analyze_second_order`.

    Parameters
    ----------
    coefficients : FilterCoefficients
        The analyzed coefficients. ``coefficients.taps`` gives
        ``(a0, a1, a2)``.
    curve : ResponseCurve
        Sampled frequency and phase response.
    zeros : tuple of Tensor
        Complex zeros ``(zero1, zero2)``, a conjugate pair or two reals.
    """

    coefficients: FilterCoefficients
    curve: ResponseCurve
    zeros: Tuple[Tensor, Tensor]


def second_order_zeros(
    alpha1: Scalar,
    alpha2: Scalar,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Tuple[Tensor, Tensor]:
    r"""
    Zeros of :math:`1 + \alpha_1 z^{-1} + \alpha_2 z^{-2}`.

    Solves :math:`z^2 + \alpha_1 z + \alpha_2 = 0` with the quadratic
    formula, written as ``left -/+ right`` with

    .. math::
        \text{left} = -\frac{\alpha_1}{2}, \qquad
        D = \alpha_1^2 - 4 \alpha_2

    For :math:`D < 0`, ``right`` is :math:`j \sqrt{-D} / 2` and the zeros
    are a complex-conjugate pair. Otherwise ``right`` is :math:`\sqrt{D} / 2`
    and both zeros are real, with imaginary parts exactly zero. The test
    is strict, so :math:`D = 0` gives a repeated real zero.

    Parameters
    ----------
    alpha1 : Tensor or float
        Normalized coefficient of the one-sample delay.
    alpha2 : Tensor or float
        Normalized coefficient of the two-sample delay.
    dtype : torch.dtype, optional
        Real floating point working dtype.

    Returns
    -------
    zero1, zero2 : Tensor
        Complex zeros, ``left - right`` and ``left + right``.

    Examples
    --------
    Notch at half Nyquist:

    >>> from torchfir.filter_analysis import second_order_zeros
    >>> zero1, zero2 = second_order_zeros(0.0, 1.0)
    >>> zero1.imag, zero2.imag
    (tensor(-1., dtype=torch.float64), tensor(1., dtype=torch.float64))
    """
    dtype = _resolve_dtype(dtype)
    alpha1 = _as_real_tensor(alpha1, dtype)
    alpha2 = _as_real_tensor(alpha2, dtype)
    dtype = torch.promote_types(alpha1.dtype, alpha2.dtype)
    alpha1, alpha2 = torch.broadcast_tensors(
        alpha1.to(dtype), alpha2.to(dtype)
    )

    left = -alpha1 / 2.0
    discriminant = alpha1 * alpha1 - 4.0 * alpha2

    root = torch.sqrt(discriminant.abs()) / 2.0
    zero = torch.zeros_like(root)
    complex_pair = discriminant < 0.0

    right = torch.complex(
        torch.where(complex_pair, zero, root),
        torch.where(complex_pair, root, zero),
    )
    left = torch.complex(left, torch.zeros_like(left))

    return left - right, left + right


def analyze_second_order(
    a0: Scalar,
    alpha1: Scalar,
    alpha2: Scalar,
    frequencies: Union[Tensor, int] = NUM_FREQUENCIES,
    *,
    dtype: Optional[torch.dtype] = None,
) -> SecondOrderAnalysis:
    r"""
    Frequency response and zeros of an order-2 FIR filter.

    The filter is
    :math:`y[n] = a_0 x[n] + a_0 \alpha_1 x[n-1] + a_0 \alpha_2 x[n-2]`,
    with transfer function
    :math:`H(z) = a_0 (1 + \alpha_1 z^{-1} + \alpha_2 z^{-2})`.

    Parameters
    ----------
    a0 : Tensor or float
        Overall gain.
    alpha1 : Tensor or float
        Normalized coefficient of the one-sample delay.
    alpha2 : Tensor or float
        Normalized coefficient of the two-sample delay.
    frequencies : Tensor or int, default NUM_FREQUENCIES
        Number of points from DC to Nyquist, or explicit normalized
        frequencies.
    dtype : torch.dtype, optional
        Real floating point working dtype.

    Returns
    -------
    SecondOrderAnalysis
        Coefficients, response curve and zeros.

    See Also
    --------
    second_order_zeros : The root finder used for ``zeros``.

    Examples
    --------
    >>> import torch
    >>> from torchfir.filter_analysis import analyze_second_order
    >>> notch = analyze_second_order(0.5, 0.0, 1.0, torch.tensor([0.5]))
    >>> bool(notch.curve.amplitude[0] < 1e-12)
    True
    """
    dtype = _resolve_dtype(dtype)
    a0 = _as_real_tensor(a0, dtype)
    alpha1 = _as_real_tensor(alpha1, dtype)
    alpha2 = _as_real_tensor(alpha2, dtype)

    curve = frequency_response_fir(
        a0, [alpha1, alpha2], frequencies, dtype=dtype
    )

    return SecondOrderAnalysis(
        coefficients=FilterCoefficients(a0, (alpha1, alpha2)),
        curve=curve,
        zeros=second_order_zeros(alpha1, alpha2, dtype=dtype),
    )

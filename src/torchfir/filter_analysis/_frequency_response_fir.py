"""Frequency response of short FIR filters in gain/normalized-tap form."""

import functools
import math
from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchfir._constants import NUM_FREQUENCIES

from ._filter_coefficients import Scalar, _as_real_tensor, _resolve_dtype
from ._response_curve import ResponseCurve
from ._unit_delay import unit_delay


def frequency_points(
    frequencies: Union[Tensor, int] = NUM_FREQUENCIES,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    """
    Normalized frequencies at which a response curve is sampled.

    Parameters
    ----------
    frequencies : Tensor or int, default NUM_FREQUENCIES
        If int: number of evenly spaced points, the first at 0 (DC) and the
        last at 1 (Nyquist), so that ``points[i] = i / (n - 1)``.
        If Tensor: explicit normalized frequencies, returned as given.
    dtype : torch.dtype, optional
        Real floating point dtype of the result. Defaults to float64.

    Returns
    -------
    Tensor
        Normalized frequencies.

    Raises
    ------
    ValueError
        If ``frequencies`` is an int smaller than 2.
    """
    if dtype is None:
        dtype = torch.float64

    if isinstance(frequencies, Tensor):
        return frequencies.to(dtype)

    if isinstance(frequencies, bool) or not isinstance(frequencies, int):
        raise ValueError(
            f"frequencies must be an int or a Tensor, got {frequencies!r}"
        )
    if frequencies < 2:
        raise ValueError(
            f"frequencies must be at least 2 to span DC to Nyquist, "
            f"got {frequencies}"
        )

    return torch.arange(frequencies, dtype=dtype) / (frequencies - 1)


def frequency_response_fir(
    gain: Scalar,
    alphas: Sequence[Scalar],
    frequencies: Union[Tensor, int] = NUM_FREQUENCIES,
    *,
    dtype: Optional[torch.dtype] = None,
) -> ResponseCurve:
    r"""
    Sample the frequency and phase response of a gain/normalized-tap FIR.

    Parameters
    ----------
    gain : Tensor or float
        Overall gain ``a0``. Tensors broadcast against ``alphas``.
    alphas : sequence of Tensor or float
        Normalized coefficients ``alpha_k`` for ``k = 1, 2, ...``.
    frequencies : Tensor or int, default NUM_FREQUENCIES
        Number of points from DC to Nyquist, or explicit normalized
        frequencies where 1 is Nyquist.
    dtype : torch.dtype, optional
        Real floating point working dtype. Defaults to the dtype of the
        tensor coefficients, or float64 for Python scalars.

    Returns
    -------
    ResponseCurve
        Curve whose tensors have shape ``(*batch, n_frequencies)``.

    Notes
    -----
    The transfer function is evaluated on the unit circle as

    .. math::
        H(e^{j\theta}) = a_0 \left(1 + \sum_k \alpha_k e^{-jk\theta}\right)

    with :math:`\theta = \pi f` for normalized frequency :math:`f`.
    Phase lies in :math:`(-\pi, \pi]`.
    Non-finite coefficients propagate to non-finite samples.

    Examples
    --------
    >>> from torchfir.filter_analysis import frequency_response_fir
    >>> curve = frequency_response_fir(0.5, [1.0])
    >>> curve.amplitude[0]
    tensor(1., dtype=torch.float64)
    """
    dtype = _resolve_dtype(dtype)

    gain = _as_real_tensor(gain, dtype)
    alphas = [_as_real_tensor(alpha, dtype) for alpha in alphas]
    dtype = functools.reduce(
        torch.promote_types, [alpha.dtype for alpha in alphas], gain.dtype
    )
    gain = gain.to(dtype)
    alphas = [alpha.to(dtype) for alpha in alphas]

    freq_points = frequency_points(frequencies, dtype=dtype)
    angles = math.pi * freq_points

    # 1 + alpha_1 z^-1 + alpha_2 z^-2 + ...
    taps = unit_delay(0, angles)
    for k, alpha in enumerate(alphas, start=1):
        taps = taps + alpha.unsqueeze(-1) * unit_delay(-k, angles)

    response = gain.unsqueeze(-1) * taps

    amplitude = response.abs()
    phase = torch.atan2(response.imag, response.real)
    # A -0.0 imaginary part puts a negative real response at -pi
    phase = torch.where(phase == -math.pi, -phase, phase)

    return ResponseCurve(
        frequencies=freq_points.expand_as(amplitude),
        response=response,
        amplitude=amplitude,
        phase=phase,
    )

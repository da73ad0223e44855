"""Unit-delay evaluation on the complex unit circle."""

from typing import Union

import torch
from torch import Tensor

from torchfir._constants import DEFAULT_DTYPE


def unit_delay(delay: int, angle: Union[Tensor, float]) -> Tensor:
    r"""
    Evaluate :math:`z^{d}` on the unit circle :math:`z = e^{j\theta}`.

    Parameters
    ----------
    delay : int
        Integer power ``d``. Negative values are delays, so ``-1`` is one
        sample of delay (:math:`z^{-1}`).
    angle : Tensor or float
        Angular frequency :math:`\theta` in radians. Any shape.

    Returns
    -------
    Tensor
        Complex tensor with the shape of ``angle``, magnitude 1 and
        argument ``delay * angle``.

    Raises
    ------
    ValueError
        If ``delay`` is not an integer.

    Notes
    -----
    The value is built from the cosine and sine of the scaled angle rather
    than by multiplying :math:`z^{-1}` repeatedly, so the magnitude stays
    at 1.0 for every delay.

    Examples
    --------
    >>> import math
    >>> from torchfir.filter_analysis import unit_delay
    >>> unit_delay(-2, math.pi / 2).abs()
    tensor(1., dtype=torch.float64)
    """
    if isinstance(delay, bool) or not isinstance(delay, int):
        raise ValueError(f"delay must be an integer, got {delay!r}")

    if not isinstance(angle, Tensor):
        angle = torch.tensor(angle, dtype=DEFAULT_DTYPE)
    elif not angle.dtype.is_floating_point:
        angle = angle.to(DEFAULT_DTYPE)

    return torch.polar(torch.ones_like(angle), float(delay) * angle)

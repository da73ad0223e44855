"""Difference-equation coefficients of order-1 and order-2 FIR filters."""

from __future__ import annotations

import warnings
from typing import NamedTuple, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from torchfir._constants import DEFAULT_DTYPE
from torchfir._exceptions import InvalidOrderError

Scalar = Union[Tensor, float]

MAX_ORDER = 2


class FilterCoefficients(NamedTuple):
    """Coefficients of a short FIR filter.

    The filter is

    .. math::
        y[n] = a_0 x[n] + a_0 \\alpha_1 x[n-1] + a_0 \\alpha_2 x[n-2]

    Parameters
    ----------
    gain : Tensor or float
        Overall gain ``a0``.
    alphas : tuple of Tensor or float
        Normalized coefficients ``(alpha1,)`` or ``(alpha1, alpha2)``.
    """

    gain: Scalar
    alphas: Tuple[Scalar, ...]

    @classmethod
    def from_sequence(cls, values: Sequence[Scalar]) -> "FilterCoefficients":
        """Build from ``(a0, alpha1)`` or ``(a0, alpha1, alpha2)``."""
        values = tuple(values)
        if not 2 <= len(values) <= MAX_ORDER + 1:
            raise InvalidOrderError(
                f"expected (a0, alpha1) or (a0, alpha1, alpha2), "
                f"got {len(values)} values"
            )

        return cls(values[0], values[1:])

    @property
    def order(self) -> int:
        return len(self.alphas)

    @property
    def taps(self) -> Tuple[Scalar, ...]:
        """Effective taps ``(a0, a1[, a2])`` where ``a_k = alpha_k * a0``."""
        return (self.gain,) + tuple(alpha * self.gain for alpha in self.alphas)


def _as_real_tensor(value: Scalar, dtype: Optional[torch.dtype]) -> Tensor:
    if isinstance(value, Tensor):
        if dtype is None:
            dtype = (
                value.dtype if value.dtype.is_floating_point else DEFAULT_DTYPE
            )
        return value.to(dtype)

    return torch.tensor(
        value, dtype=DEFAULT_DTYPE if dtype is None else dtype
    )


def _resolve_dtype(dtype: Optional[torch.dtype]) -> Optional[torch.dtype]:
    if dtype is not None and not dtype.is_floating_point:
        warnings.warn(
            f"dtype {dtype} is not a real floating point type, "
            f"using {DEFAULT_DTYPE} instead",
            stacklevel=3,
        )
        return DEFAULT_DTYPE

    return dtype

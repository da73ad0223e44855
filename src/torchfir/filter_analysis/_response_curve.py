"""Sampled frequency and phase response containers."""

from __future__ import annotations

from typing import Iterator, NamedTuple

from tensordict import tensorclass
from torch import Tensor


class FrequencySample(NamedTuple):
    """One point of a response curve.

    Parameters
    ----------
    frequency : float
        Normalized frequency in [0, 1], where 1 is Nyquist.
    response : complex
        Transfer function value H(e^{jw}).
    amplitude : float
        ``abs(response)``.
    phase : float
        ``atan2(response.imag, response.real)`` in radians, in (-pi, pi].
    """

    frequency: float
    response: complex
    amplitude: float
    phase: float


@tensorclass
class ResponseCurve:
    """Frequency and phase response sampled from DC to Nyquist.

    Attributes
    ----------
    frequencies : Tensor, shape (..., n_frequencies)
        Normalized frequencies, increasing, 0 is DC and 1 is Nyquist.
    response : Tensor, shape (..., n_frequencies)
        Complex transfer function values.
    amplitude : Tensor, shape (..., n_frequencies)
        Magnitude of ``response``.
    phase : Tensor, shape (..., n_frequencies)
        Argument of ``response`` in radians, in (-pi, pi].
    """

    frequencies: Tensor
    response: Tensor
    amplitude: Tensor
    phase: Tensor

    def samples(self) -> Iterator[FrequencySample]:
        """Iterate over the points of an unbatched curve in frequency order."""
        if self.amplitude.dim() != 1:
            raise ValueError(
                f"samples() requires a 1-D curve, got shape "
                f"{tuple(self.amplitude.shape)}"
            )

        for frequency, response, amplitude, phase in zip(
            self.frequencies.tolist(),
            self.response.tolist(),
            self.amplitude.tolist(),
            self.phase.tolist(),
        ):
            yield FrequencySample(frequency, response, amplitude, phase)

"""Frequency response and zero analysis of order-1 and order-2 FIR filters."""

from ._analyze import analyze
from ._filter_coefficients import FilterCoefficients
from ._first_order import FirstOrderAnalysis, analyze_first_order
from ._frequency_response_fir import frequency_points, frequency_response_fir
from ._response_curve import FrequencySample, ResponseCurve
from ._second_order import (
    SecondOrderAnalysis,
    analyze_second_order,
    second_order_zeros,
)
from ._unit_delay import unit_delay

__all__ = [
    "FilterCoefficients",
    "FirstOrderAnalysis",
    "FrequencySample",
    "ResponseCurve",
    "SecondOrderAnalysis",
    "analyze",
    "analyze_first_order",
    "analyze_second_order",
    "frequency_points",
    "frequency_response_fir",
    "second_order_zeros",
    "unit_delay",
]

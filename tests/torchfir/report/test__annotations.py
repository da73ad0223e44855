"""Tests for report annotations."""

import pytest

from torchfir.filter_analysis import (
    FilterCoefficients,
    analyze_first_order,
    analyze_second_order,
)
from torchfir.report import (
    coefficient_summary,
    difference_equation,
    zero_description,
)


class TestCoefficientSummary:
    def test_order_1(self) -> None:
        summary = coefficient_summary(FilterCoefficients(0.5, (1.0,)))

        assert summary == "a0 = 0.500000, alpha1 = 1.000000"

    def test_order_2(self) -> None:
        summary = coefficient_summary(FilterCoefficients(0.5, (2.0, 1.22)))

        assert summary == (
            "a0 = 0.500000, alpha1 = 2.000000, alpha2 = 1.220000"
        )


class TestDifferenceEquation:
    def test_order_1(self) -> None:
        equation = difference_equation(FilterCoefficients(0.5, (-1.0,)))

        assert equation == (
            "output[index] = input[index] * 0.500000"
            " + input[index-1] * -0.500000"
        )

    def test_order_2_uses_two_sample_delay_for_a2(self) -> None:
        equation = difference_equation(FilterCoefficients(0.5, (-1.6, 0.8)))

        assert equation == (
            "output[index] = input[index] * 0.500000"
            " + input[index-1] * -0.800000"
            " + input[index-2] * 0.400000"
        )

    def test_tensor_coefficients(self) -> None:
        analysis = analyze_first_order(0.5, 2.0)

        assert difference_equation(analysis.coefficients) == (
            "output[index] = input[index] * 0.500000"
            " + input[index-1] * 1.000000"
        )


class TestZeroDescription:
    @pytest.mark.parametrize(
        "alpha1, expected",
        [(1.0, "Zero = -1.000000"), (-1.0, "Zero = 1.000000")],
    )
    def test_order_1(self, alpha1: float, expected: str) -> None:
        assert zero_description(analyze_first_order(0.5, alpha1)) == expected

    def test_order_2_complex_pair(self) -> None:
        analysis = analyze_second_order(0.5, -1.6, 0.8)

        assert zero_description(analysis) == (
            "Zeroes = 0.800000 + -0.400000i, 0.800000 + 0.400000i"
        )

    def test_order_2_real_pair(self) -> None:
        analysis = analyze_second_order(0.5, -3.0, 2.0)

        assert zero_description(analysis) == (
            "Zeroes = 1.000000 + 0.000000i, 2.000000 + 0.000000i"
        )

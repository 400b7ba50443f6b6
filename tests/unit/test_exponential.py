"""
Тесты для модуля Exponential & Logarithm

Проверяемые инварианты:
1. exp совпадает с эталоном в задокументированном диапазоне
2. log(1.0) == 0.0 точно
3. log(x ≤ 0) → MathDomainError
4. exp(log(x)) ≈ x и log(exp(x)) ≈ x
5. Степень ряда влияет на точность (degree является рабочим параметром)
"""

import math

import pytest

from elemath.constants import E, LN2
from elemath.exponential import exp, log, log2, log10
from elemath.safeguards import MathDomainError

# =============================================================================
# ТЕСТЫ: exp
# =============================================================================


class TestExp:
    """Тесты exp: ряд Маклорена без range reduction."""

    def test_zero(self):
        """exp(0) == 1 точно."""
        assert exp(0.0) == 1.0

    def test_one(self):
        assert exp(1.0) == pytest.approx(E, rel=1e-14)

    @pytest.mark.parametrize("x", [-5.0, -2.5, -1.0, -0.1, 0.1, 1.0, 2.5, 5.0])
    def test_matches_reference(self, x):
        """Совпадение с math.exp в пределах 2e-7 относительной ошибки."""
        assert exp(x) == pytest.approx(math.exp(x), rel=2e-7)

    @pytest.mark.parametrize("x", [0.5, 3.0, 8.0])
    def test_negative_argument_is_reciprocal(self, x):
        """exp(-x) * exp(x) ≈ 1 (отрицательный аргумент через 1/exp(x))."""
        assert exp(-x) * exp(x) == pytest.approx(1.0, rel=1e-15)

    def test_large_negative_stays_accurate(self):
        """Без reciprocal знакопеременный ряд при x = -20 дал бы мусор."""
        assert exp(-20.0) > 0.0
        assert exp(-20.0) == pytest.approx(1.0 / exp(20.0), rel=1e-15)

    def test_infinities(self):
        assert exp(float("inf")) == float("inf")
        assert exp(float("-inf")) == 0.0

    def test_nan_propagates(self):
        assert math.isnan(exp(float("nan")))

    def test_lower_degree_less_accurate(self):
        """Меньшая степень ряда → большая ошибка усечения."""
        reference = math.exp(3.0)
        assert abs(exp(3.0, degree=5) - reference) > abs(exp(3.0) - reference)

    def test_accuracy_degrades_without_range_reduction(self):
        """За пределами задокументированного диапазона ошибка растёт."""
        rel_error_small = abs(exp(2.0) - math.exp(2.0)) / math.exp(2.0)
        rel_error_large = abs(exp(15.0) - math.exp(15.0)) / math.exp(15.0)
        assert rel_error_large > rel_error_small

    def test_invalid_degree(self):
        with pytest.raises(ValueError, match="degree"):
            exp(1.0, degree=0)


# =============================================================================
# ТЕСТЫ: log
# =============================================================================


class TestLog:
    """Тесты log: double-angle identity с разложением через frexp."""

    def test_one_is_exact_zero(self):
        """log(1.0) == 0 точно."""
        assert log(1.0) == 0.0

    def test_e(self):
        assert log(E) == pytest.approx(1.0, rel=1e-14)

    def test_two_is_ln2(self):
        assert log(2.0) == LN2

    @pytest.mark.parametrize(
        "x",
        [1e-300, 1e-5, 0.1, 0.5, 0.9, 0.999999, 1.000001, 1.5, 2.0, 10.0, 1e5, 1e300],
    )
    def test_matches_reference(self, x):
        """Совпадение с math.log на всём диапазоне double."""
        assert log(x) == pytest.approx(math.log(x), rel=1e-14, abs=1e-13)

    def test_subnormal_argument(self):
        assert log(5e-324) == pytest.approx(math.log(5e-324), rel=1e-14)

    @pytest.mark.parametrize("x", [0.0, -0.0, -1.0, -1e-300, float("-inf")])
    def test_non_positive_raises(self, x):
        """x ≤ 0 → MathDomainError."""
        with pytest.raises(MathDomainError, match="must be positive"):
            log(x)

    def test_nan_raises(self):
        with pytest.raises(MathDomainError):
            log(float("nan"))

    def test_infinity(self):
        assert log(float("inf")) == float("inf")

    def test_invalid_degree(self):
        with pytest.raises(ValueError, match="degree"):
            log(2.0, degree=-3)


class TestLog10Log2:
    """Тесты log10 / log2."""

    @pytest.mark.parametrize("x, expected", [(1000.0, 3.0), (0.01, -2.0), (1.0, 0.0)])
    def test_log10(self, x, expected):
        assert log10(x) == pytest.approx(expected, abs=1e-13)

    @pytest.mark.parametrize("x, expected", [(8.0, 3.0), (0.25, -2.0), (1024.0, 10.0)])
    def test_log2(self, x, expected):
        assert log2(x) == pytest.approx(expected, abs=1e-13)

    def test_log10_domain_error(self):
        with pytest.raises(MathDomainError):
            log10(-1.0)

    def test_log2_domain_error(self):
        with pytest.raises(MathDomainError):
            log2(0.0)


# =============================================================================
# ТЕСТЫ: обратимость
# =============================================================================


class TestRoundTrip:
    """exp и log взаимно обратны в пределах ошибки ряда."""

    @pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 2.0, 10.0, 100.0])
    def test_exp_of_log(self, x):
        assert exp(log(x)) == pytest.approx(x, rel=2e-7)

    @pytest.mark.parametrize("x", [-5.0, -1.0, -0.25, 0.0, 0.25, 1.0, 5.0])
    def test_log_of_exp(self, x):
        assert log(exp(x)) == pytest.approx(x, abs=2e-7)

"""
Hyperbolic — Power Series sinh/cosh, tanh как отношение

Те же ряды, что и у sin/cos, но без смены знака членов:
    sinh(x) = x + x^3/3! + x^5/5! + ...
    cosh(x) = 1 + x^2/2! + x^4/4! + ...
    tanh(x) = sinh(x) / cosh(x)

Range reduction не выполняется: при больших |x| ряды теряют точность
(границы в error_bounds.ERROR_BOUNDS). tanh при |x| ≥ 20 насыщается до ±1.0,
а отношение рядов ниже порога ограничивается отрезком [-1, 1].
"""

from elemath.constants import SERIES_DEGREE, TANH_SATURATION_THRESHOLD
from elemath.rounding import fabs
from elemath.safeguards import ieee_divide, isnan, validate_series_degree


def sinh(x: float, degree: int = SERIES_DEGREE) -> float:
    """Гиперболический синус. NaN и ±inf пропагируются."""
    validate_series_degree(degree)

    x_squared = x * x

    result = x
    term = x
    for i in range(1, degree + 1):
        term *= x_squared / ((2 * i) * (2 * i + 1))
        result += term

    return result


def cosh(x: float, degree: int = SERIES_DEGREE) -> float:
    """Гиперболический косинус, cosh(x) ≥ 1 для конечных x."""
    validate_series_degree(degree)

    x_squared = x * x

    result = 1.0
    term = 1.0
    for i in range(1, degree + 1):
        term *= x_squared / ((2 * i - 1) * (2 * i))
        result += term

    return result


def tanh(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Гиперболический тангенс как sinh(x) / cosh(x).

    Деление следует IEEE-семантике (без перехвата). При |x| ≥
    TANH_SATURATION_THRESHOLD точное значение неотличимо от ±1.0 в double,
    а отношение рядов (inf / inf для ±inf) перестаёт быть надёжным.

    Args:
        x: Аргумент
        degree: Степень рядов sinh/cosh

    Returns:
        tanh(x) в [-1, 1]; NaN пропагируется

    Examples:
        >>> tanh(0.0)
        0.0
        >>> tanh(float('inf'))
        1.0
    """
    validate_series_degree(degree)

    if isnan(x):
        return x

    if fabs(x) >= TANH_SATURATION_THRESHOLD:
        return 1.0 if x > 0.0 else -1.0

    ratio = ieee_divide(sinh(x, degree), cosh(x, degree))

    # Усечённый ряд cosh теряет больше, чем sinh: при |x| > ~12 отношение
    # выходит за 1
    if ratio > 1.0:
        return 1.0
    if ratio < -1.0:
        return -1.0
    return ratio

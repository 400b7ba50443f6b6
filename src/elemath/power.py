"""
Power & Root — pow через exp/log, Babylonian sqrt

Модуль строит степенную функцию и квадратный корень поверх рядов exp/log:
- pow(x, y) = exp(y * log(x)) с доменной проверкой отрицательного основания
- sqrt: итерации Newton-Raphson (Babylonian) с явной верхней границей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. pow(x < 0, нецелое y) → MathDomainError (результат вне вещественных чисел)
2. "y целое" определяется через |y mod 1| < INTEGER_EPS, а не точным равенством
3. sqrt(x < 0) → MathDomainError
4. sqrt всегда завершается: не более max_iterations шагов,
   исчерпание лимита логируется (WARNING), но не является ошибкой

ФОРМУЛЫ:
    pow(x, y) = exp(y * log(x))                       (x > 0)
    pow(x, y) = (-1)^y * exp(y * log(|x|))            (x < 0, y целое)

    guess_0 = x / 2
    guess_{k+1} = (x / guess_k + guess_k) / 2
    стоп: |guess_{k+1} - guess_k| ≤ tolerance * guess_{k+1}
"""

import logging

from elemath.constants import (
    INF,
    INTEGER_EPS,
    NAN,
    SERIES_DEGREE,
    SQRT_MAX_ITERATIONS,
    SQRT_TOLERANCE,
)
from elemath.exponential import exp, log
from elemath.rounding import fabs, floor, fmod
from elemath.safeguards import (
    MathDomainError,
    isfinite,
    isnan,
    validate_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# POW
# =============================================================================


def is_integer(value: float, eps: float = INTEGER_EPS) -> bool:
    """
    Проверка целочисленности float с учётом ошибки представления.

    Остаток fmod(value, 1) сравнивается с eps с обеих сторон:
    2.9999999999 и 3.0000000001 считаются целыми.

    Args:
        value: Проверяемое значение (конечное)
        eps: Допуск

    Returns:
        True если value отличается от ближайшего целого меньше чем на eps
    """
    if not isfinite(value):
        return False

    remainder = fabs(fmod(value, 1.0))
    return remainder < eps or remainder > 1.0 - eps


def pow(x: float, y: float, degree: int = SERIES_DEGREE) -> float:
    """
    Возведение в степень через exp(y * log(x)).

    Точность ограничена exp без range reduction: результат надёжен,
    пока |y * log(|x|)| остаётся в пределах, указанных в
    error_bounds.ERROR_BOUNDS["pow"].

    Args:
        x: Основание
        y: Показатель
        degree: Степень рядов exp/log

    Returns:
        x^y; pow(x, 0) == pow(1, y) == 1.0 (включая NaN), pow(x, 1) == x,
        pow(0, y > 0) == 0.0

    Raises:
        MathDomainError: если x < 0 и y не целое,
            либо x == 0 и y < 0 (полюс)

    Examples:
        >>> pow(2.0, 0.0)
        1.0
        >>> abs(pow(2.0, 10.0) - 1024.0) < 0.05
        True
        >>> pow(-2.0, 0.5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MathDomainError: ...
    """
    if y == 0.0 or x == 1.0:
        return 1.0

    if isnan(x) or isnan(y):
        return NAN

    if y == 1.0:
        return x

    if x == 0.0:
        if y < 0.0:
            raise MathDomainError(
                f"pow: zero base with negative exponent is a pole, got x={x}, y={y}"
            )
        return 0.0

    if x < 0.0:
        if not is_integer(y):
            raise MathDomainError(
                f"pow: negative base requires an integer exponent, got x={x}, y={y}"
            )

        magnitude = exp(y * log(-x, degree), degree)

        # Знак определяется чётностью ближайшего целого
        nearest = floor(y + 0.5)
        if fmod(nearest, 2.0) != 0.0:
            return -magnitude
        return magnitude

    return exp(y * log(x, degree), degree)


# =============================================================================
# SQRT
# =============================================================================


def sqrt(
    x: float,
    tolerance: float = SQRT_TOLERANCE,
    max_iterations: int = SQRT_MAX_ITERATIONS,
) -> float:
    """
    Квадратный корень методом Newton-Raphson (Babylonian).

    Порог сходимости относительный (tolerance * guess), старт с x / 2.

    Args:
        x: Аргумент (x ≥ 0)
        tolerance: Допустимая относительная разница соседних приближений
        max_iterations: Верхняя граница итераций

    Returns:
        √x; sqrt(0.0) == 0.0, sqrt(inf) == inf

    Raises:
        MathDomainError: если x < 0 или NaN
        ValueError: если tolerance ≤ 0 или max_iterations < 1

    Examples:
        >>> abs(sqrt(2.0) - 1.41421356) < 1e-6
        True
        >>> sqrt(0.0)
        0.0
    """
    validate_positive(tolerance, "tolerance")
    if (
        isinstance(max_iterations, bool)
        or not isinstance(max_iterations, int)
        or max_iterations < 1
    ):
        raise ValueError(
            f"max_iterations must be a positive integer, got {max_iterations!r}"
        )

    if isnan(x) or x < 0.0:
        raise MathDomainError(f"sqrt: argument must be non-negative, got {x}")

    # Для нуля шаг x / guess делит на ноль
    if x == 0.0 or x == INF:
        return x

    guess = x / 2.0
    if guess == 0.0:
        # Наименьший subnormal: x / 2 исчезает до нуля
        guess = x

    for _ in range(max_iterations):
        next_guess = (x / guess + guess) / 2.0
        if fabs(next_guess - guess) <= tolerance * next_guess:
            return next_guess
        guess = next_guess

    logger.warning(
        "sqrt(%r) did not converge within %d iterations (tolerance=%g), returning %r",
        x,
        max_iterations,
        tolerance,
        guess,
    )
    return guess

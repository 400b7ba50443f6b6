"""
Exponential & Logarithm — Maclaurin exp, atanh-based log

Модуль вычисляет экспоненту и логарифмы через степенные ряды:
- exp: ряд Маклорена Σ x^n / n!, усечённый на степени degree
- log: identity log(x) = 2 * atanh((x-1)/(x+1)), только нечётные степени t
- log10 / log2: деление натурального логарифма на ln(10) / ln(2)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. log(x) при x ≤ 0 (и NaN) → MathDomainError, никогда sentinel
2. log(1.0) == 0.0 точно
3. exp не выполняет range reduction: точность падает с ростом |x|
   (см. error_bounds.ERROR_BOUNDS["exp"]); pow наследует это ограничение
4. exp(x) для x < 0 считается как 1/exp(-x): знакопеременный ряд
   теряет значащие цифры на взаимном сокращении членов

ФОРМУЛЫ:
    exp(x) = Σ_{n=0}^{degree} x^n / n!

    x = m * 2^e,  m ∈ [√½, √2)
    t = (m - 1) / (m + 1),  |t| ≤ 0.1716
    log(x) = 2 * Σ_{k=0}^{degree} t^(2k+1) / (2k+1) + e * ln(2)
"""

from elemath.constants import INF, LN2, LN10, SERIES_DEGREE, SQRT_HALF
from elemath.rounding import frexp
from elemath.safeguards import MathDomainError, isnan, validate_series_degree

# =============================================================================
# EXP
# =============================================================================


def exp(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Экспонента через ряд Маклорена.

    Члены ряда строятся рекуррентно: term_n = term_{n-1} * x / n.

    Args:
        x: Показатель
        degree: Количество членов ряда после ведущей единицы

    Returns:
        e^x; exp(inf) = inf, exp(-inf) = 0.0, NaN пропагируется

    Raises:
        ValueError: если degree < 1

    Examples:
        >>> exp(0.0)
        1.0
        >>> abs(exp(1.0) - 2.718281828459045) < 1e-14
        True
    """
    validate_series_degree(degree)

    if isnan(x):
        return x

    if x == INF:
        return INF

    if x == -INF:
        return 0.0

    if x < 0.0:
        return 1.0 / exp(-x, degree)

    result = 1.0
    term = 1.0
    for n in range(1, degree + 1):
        term *= x / n
        result += term

    return result


# =============================================================================
# LOG
# =============================================================================


def log(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Натуральный логарифм через double-angle identity.

    log(x) = 2 * atanh((x-1)/(x+1)) сходится для любого x > 0, но медленно
    при t → 1. Поэтому аргумент сначала раскладывается через frexp,
    и ряд вычисляется только для мантиссы, сдвинутой в [√½, √2).

    Args:
        x: Аргумент (x > 0)
        degree: Количество членов ряда после ведущего t

    Returns:
        ln(x); log(1.0) == 0.0 точно, log(inf) == inf

    Raises:
        MathDomainError: если x ≤ 0 или NaN
        ValueError: если degree < 1

    Examples:
        >>> log(1.0)
        0.0
        >>> abs(log(2.718281828459045) - 1.0) < 1e-14
        True
        >>> log(-1.0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MathDomainError: ...
    """
    validate_series_degree(degree)

    if isnan(x) or x <= 0.0:
        raise MathDomainError(f"log: argument must be positive, got {x}")

    if x == 1.0:
        return 0.0

    if x == INF:
        return INF

    mantissa, exponent = frexp(x)

    # frexp даёт [0.5, 1): сдвигаем в [√½, √2), чтобы |t| был минимальным
    if mantissa < SQRT_HALF:
        mantissa *= 2.0
        exponent -= 1

    t = (mantissa - 1.0) / (mantissa + 1.0)
    t_squared = t * t

    series = t
    power = t
    for k in range(1, degree + 1):
        power *= t_squared
        series += power / (2 * k + 1)

    return 2.0 * series + exponent * LN2


def log10(x: float, degree: int = SERIES_DEGREE) -> float:
    """Десятичный логарифм: log(x) / ln(10)."""
    return log(x, degree) / LN10


def log2(x: float, degree: int = SERIES_DEGREE) -> float:
    """Двоичный логарифм: log(x) / ln(2)."""
    return log(x, degree) / LN2

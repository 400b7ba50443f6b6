"""
Trigonometric — Taylor Series with Range Reduction

Модуль вычисляет тригонометрические функции и обратные к ним:
- sin / cos: приведение по модулю 2π в [-π, π], затем ряд Тейлора
- tan: sin / cos с IEEE-семантикой деления (без guard на cos ≈ 0)
- asin: ряд Маклорена с тихим clamp аргумента в [-1, 1]
- acos: π/2 - asin
- atan: знакопеременный ряд с приведением аргумента в |z| ≤ 2 - √3
- atan2: явный разбор квадрантов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sin(x)^2 + cos(x)^2 ≈ 1 для любого конечного x
2. asin/acos никогда не бросают исключение: |x| > 1 приводится к ±1
   (мягкий контракт, а не дефект)
3. atan2(0, 0) == 0 (условное значение для неопределённого входа)
4. tan при cos(x) == 0 возвращает ±inf/NaN, а не ZeroDivisionError

ПРИВЕДЕНИЕ АРГУМЕНТА:
    asin(x) = π/2 - 2 * asin(√((1 - x) / 2))            (x > 0.5)
    atan(x) = π/2 - atan(1 / x)                          (x > 1)
    atan(x) = π/6 + atan((√3 * x - 1) / (√3 + x))        (x > 2 - √3)
"""

from elemath.constants import (
    ASIN_HALF_ANGLE_THRESHOLD,
    ATAN_REDUCTION_THRESHOLD,
    HALF_PI,
    NAN,
    PI,
    SERIES_DEGREE,
    SIXTH_PI,
    SQRT3,
    TAU,
)
from elemath.power import sqrt
from elemath.rounding import fmod
from elemath.safeguards import ieee_divide, isfinite, isnan, validate_series_degree

# =============================================================================
# RANGE REDUCTION
# =============================================================================


def reduce_angle(x: float) -> float:
    """
    Приведение угла по модулю 2π в [-π, π].

    Args:
        x: Угол в радианах (конечный)

    Returns:
        Угол r ≡ x (mod 2π), |r| ≤ π
    """
    reduced = fmod(x, TAU)

    if reduced > PI:
        reduced -= TAU
    elif reduced < -PI:
        reduced += TAU

    return reduced


# =============================================================================
# SIN / COS / TAN
# =============================================================================


def sin(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Синус через ряд Тейлора.

    x - x^3/3! + x^5/5! - ..., члены строятся рекуррентно:
    term_i = -term_{i-1} * x^2 / ((2i) * (2i + 1)).

    Args:
        x: Угол в радианах
        degree: Количество членов после ведущего x

    Returns:
        sin(x); NaN для NaN/Inf

    Examples:
        >>> sin(0.0)
        0.0
        >>> abs(sin(1.5707963267948966) - 1.0) < 1e-14
        True
    """
    validate_series_degree(degree)

    if not isfinite(x):
        return NAN

    x = reduce_angle(x)
    x_squared = x * x

    result = x
    term = x
    for i in range(1, degree + 1):
        term *= -x_squared / ((2 * i) * (2 * i + 1))
        result += term

    return result


def cos(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Косинус через ряд Тейлора: 1 - x^2/2! + x^4/4! - ...

    Args:
        x: Угол в радианах
        degree: Количество членов после ведущей единицы

    Returns:
        cos(x); NaN для NaN/Inf
    """
    validate_series_degree(degree)

    if not isfinite(x):
        return NAN

    x = reduce_angle(x)
    x_squared = x * x

    result = 1.0
    term = 1.0
    for i in range(1, degree + 1):
        term *= -x_squared / ((2 * i - 1) * (2 * i))
        result += term

    return result


def tan(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Тангенс как sin(x) / cos(x).

    Явного guard для cos(x) ≈ 0 нет: результат следует семантике
    IEEE-деления (большое значение, ±inf или NaN).
    """
    return ieee_divide(sin(x, degree), cos(x, degree))


# =============================================================================
# ASIN / ACOS
# =============================================================================


def _asin_series(x: float, degree: int) -> float:
    """Σ (2n)! / (4^n (n!)^2 (2n+1)) * x^(2n+1) для |x| ≤ 0.5."""
    x_squared = x * x

    result = x
    # term = (2n)! / (4^n (n!)^2) * x^(2n+1), без деления на (2n+1)
    term = x
    for n in range(1, degree + 1):
        term *= x_squared * (2 * n - 1) / (2 * n)
        result += term / (2 * n + 1)

    return result


def asin(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Арксинус через ряд Маклорена.

    Аргумент вне [-1, 1] тихо приводится к границе (clamp): это
    осознанный мягкий контракт: asin(1.0000001) == π/2.

    Ряд сходится медленно при |x| → 1, поэтому для |x| > 0.5 применяется
    half-angle identity, и ряд вычисляется от √((1 - |x|) / 2) ≤ 0.5.

    Args:
        x: Синус угла
        degree: Количество членов ряда после ведущего x

    Returns:
        Угол в [-π/2, π/2]; NaN пропагируется

    Examples:
        >>> asin(0.0)
        0.0
        >>> asin(1.0) == 1.5707963267948966
        True
        >>> asin(2.0) == asin(1.0)
        True
    """
    validate_series_degree(degree)

    if isnan(x):
        return x

    if x > 1.0:
        x = 1.0
    elif x < -1.0:
        x = -1.0

    if x < 0.0:
        return -asin(-x, degree)

    if x > ASIN_HALF_ANGLE_THRESHOLD:
        return HALF_PI - 2.0 * _asin_series(sqrt((1.0 - x) / 2.0), degree)

    return _asin_series(x, degree)


def acos(x: float, degree: int = SERIES_DEGREE) -> float:
    """Арккосинус: π/2 - asin(x). Наследует clamp аргумента из asin."""
    return HALF_PI - asin(x, degree)


# =============================================================================
# ATAN / ATAN2
# =============================================================================


def _atan_series(x: float, degree: int) -> float:
    """x - x^3/3 + x^5/5 - ... для |x| ≤ 2 - √3."""
    x_squared = x * x

    result = x
    power = x
    for i in range(1, degree + 1):
        power *= -x_squared
        result += power / (2 * i + 1)

    return result


def atan(x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Арктангенс через знакопеременный степенной ряд.

    Сам ряд Σ (-1)^i x^(2i+1) / (2i+1) пригоден только при |x| ≤ 1 и
    сходится медленно у границы. Аргумент приводится:
    - |x| > 1: atan(x) = π/2 - atan(1/x)
    - x > 2 - √3: сдвиг на π/6 в |z| ≤ 2 - √3

    Args:
        x: Тангенс угла
        degree: Количество членов ряда после ведущего x

    Returns:
        Угол в [-π/2, π/2]; atan(±inf) == ±π/2

    Examples:
        >>> atan(0.0)
        0.0
        >>> abs(atan(1.0) - 0.7853981633974483) < 1e-14
        True
    """
    validate_series_degree(degree)

    if isnan(x):
        return x

    if x < 0.0:
        return -atan(-x, degree)

    if x > 1.0:
        return HALF_PI - atan(1.0 / x, degree)

    if x > ATAN_REDUCTION_THRESHOLD:
        reduced = (SQRT3 * x - 1.0) / (SQRT3 + x)
        return SIXTH_PI + _atan_series(reduced, degree)

    return _atan_series(x, degree)


def atan2(y: float, x: float, degree: int = SERIES_DEGREE) -> float:
    """
    Угол точки (x, y) с учётом квадранта.

    Разбор случаев:
    - x == 0: ±π/2 по знаку y, 0 если y == 0 (условное значение)
    - x > 0: atan(y / x)
    - x < 0: atan(y / x) + π при y ≥ 0, atan(y / x) - π при y < 0

    Args:
        y: Ордината
        x: Абсцисса
        degree: Степень ряда atan

    Returns:
        Угол в [-π, π]

    Examples:
        >>> atan2(0.0, 0.0)
        0.0
        >>> atan2(1.0, 0.0) == 1.5707963267948966
        True
    """
    if isnan(x) or isnan(y):
        return NAN

    if x == 0.0:
        if y > 0.0:
            return HALF_PI
        if y < 0.0:
            return -HALF_PI
        return 0.0

    angle = atan(y / x, degree)

    if x > 0.0:
        return angle

    if y >= 0.0:
        return angle + PI
    return angle - PI

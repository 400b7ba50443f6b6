"""
Rounding & Decomposition — Truncation, Remainders, Mantissa/Exponent

Базовые утилиты без зависимостей от остальных групп функций.
Используются для range reduction в log, pow и тригонометрии.

- trunc: общий примитив округления к нулю
- floor / ceil: независимые определения через trunc (не друг через друга)
- fabs: абсолютное значение
- fmod: остаток со знаком делимого
- modf: дробная и целая части (возвращаются парой)
- frexp / ldexp: разложение x = mantissa * 2^exponent и обратная сборка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. floor(x) <= x <= ceil(x); для целых x обе функции возвращают x
2. ceil(x) == -floor(-x)
3. modf(x).integral + modf(x).fractional == x, знак дробной части = знак x
4. frexp(x): |mantissa| ∈ [0.5, 1), x == mantissa * 2^exponent; frexp(0) = (0, 0)
5. Все циклы ограничены диапазоном экспоненты double (~2100 шагов)
"""

from typing import NamedTuple

from elemath.constants import MIN_NORMAL, MIN_SUBNORMAL_EXPONENT, NAN
from elemath.safeguards import MathDomainError, has_sign_bit, isfinite, isinf, isnan

# =============================================================================
# ТИПЫ РЕЗУЛЬТАТОВ
# =============================================================================


class ModfResult(NamedTuple):
    """Результат modf: порядок полей совпадает с math.modf."""

    fractional: float  # x - trunc(x), знак как у x
    integral: float  # trunc(x)


class FrexpResult(NamedTuple):
    """Результат frexp: x == mantissa * 2**exponent."""

    mantissa: float  # |mantissa| ∈ [0.5, 1) либо 0.0
    exponent: int


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def trunc(x: float) -> float:
    """
    Округление к нулю.

    Общий примитив для floor, ceil и modf. Конверсия через int точна
    для любого конечного double (Python int без ограничения разрядности).

    Args:
        x: Исходное значение

    Returns:
        Целая часть x как float; NaN/Inf возвращаются без изменений,
        знак нуля сохраняется (trunc(-0.5) == -0.0)

    Examples:
        >>> trunc(2.7)
        2.0
        >>> trunc(-2.7)
        -2.0
    """
    if not isfinite(x):
        return x

    result = float(int(x))
    if result == 0.0 and has_sign_bit(x):
        return -0.0
    return result


def floor(x: float) -> float:
    """
    Наибольшее целое, не превосходящее x.

    Examples:
        >>> floor(2.5)
        2.0
        >>> floor(-2.5)
        -3.0
        >>> floor(-3.0)
        -3.0
    """
    truncated = trunc(x)
    if truncated > x:
        # Отрицательный нецелый x: trunc округлил вверх
        return truncated - 1.0
    return truncated


def ceil(x: float) -> float:
    """
    Наименьшее целое, не меньшее x.

    Examples:
        >>> ceil(2.5)
        3.0
        >>> ceil(-2.5)
        -2.0
    """
    truncated = trunc(x)
    if truncated < x:
        return truncated + 1.0
    return truncated


def fabs(x: float) -> float:
    """Абсолютное значение: x < 0 ? -x : x."""
    if x < 0.0:
        return -x
    return x


# =============================================================================
# ОСТАТКИ
# =============================================================================


def fmod(x: float, y: float) -> float:
    """
    Остаток от деления со знаком делимого.

    В отличие от оператора `%` (знак делителя), результат имеет знак x
    и |fmod(x, y)| < |y|. Для неотрицательных операндов `%` вычисляется
    точно, поэтому остаток берётся от модулей, а знак восстанавливается.

    Args:
        x: Делимое
        y: Делитель

    Returns:
        r такой, что x = n*y + r для целого n, sign(r) == sign(x)

    Raises:
        MathDomainError: если y == 0 или x бесконечен

    Examples:
        >>> fmod(7.0, 3.0)
        1.0
        >>> fmod(-7.0, 3.0)
        -1.0
        >>> fmod(7.0, -3.0)
        1.0
    """
    if isnan(x) or isnan(y):
        return NAN

    if y == 0.0:
        raise MathDomainError(f"fmod: divisor must be non-zero, got x={x}, y={y}")

    if isinf(x):
        raise MathDomainError(f"fmod: dividend must be finite, got x={x}")

    if isinf(y):
        return x

    remainder = fabs(x) % fabs(y)
    if has_sign_bit(x):
        return -remainder
    return remainder


def modf(x: float) -> ModfResult:
    """
    Разделение x на дробную и целую части.

    Части возвращаются вместе (ModfResult), без mutable out-параметров.

    Args:
        x: Исходное значение

    Returns:
        ModfResult(fractional, integral):
            - integral: trunc(x)
            - fractional: x - integral, знак как у x
        modf(±inf) = (±0.0, ±inf), modf(nan) = (nan, nan)

    Examples:
        >>> modf(3.25)
        ModfResult(fractional=0.25, integral=3.0)
        >>> modf(-3.25)
        ModfResult(fractional=-0.25, integral=-3.0)
    """
    if isnan(x):
        return ModfResult(x, x)

    if isinf(x):
        return ModfResult(-0.0 if x < 0.0 else 0.0, x)

    integral = trunc(x)
    # Вычитание точное: integral и x имеют общую экспоненту или integral == 0
    fractional = x - integral
    if fractional == 0.0:
        fractional = -0.0 if has_sign_bit(x) else 0.0

    return ModfResult(fractional, integral)


# =============================================================================
# MANTISSA / EXPONENT
# =============================================================================


def frexp(x: float) -> FrexpResult:
    """
    Разложение x = mantissa * 2^exponent, |mantissa| ∈ [0.5, 1).

    Рабочее значение удваивается или делится пополам до попадания в
    диапазон; количество шагов и есть экспонента. Умножение на 2 и 0.5
    точно в этом диапазоне, поэтому разложение без потерь.

    Args:
        x: Исходное значение

    Returns:
        FrexpResult(mantissa, exponent); знак mantissa совпадает со знаком x.
        frexp(0) = (0.0, 0); NaN/Inf возвращаются как (x, 0)

    Examples:
        >>> frexp(8.0)
        FrexpResult(mantissa=0.5, exponent=4)
        >>> frexp(-3.0)
        FrexpResult(mantissa=-0.75, exponent=2)
        >>> frexp(0.0)
        FrexpResult(mantissa=0.0, exponent=0)
    """
    # Для нуля цикл удвоения не завершается
    if x == 0.0 or not isfinite(x):
        return FrexpResult(x, 0)

    mantissa = fabs(x)
    exponent = 0

    while mantissa >= 1.0:
        mantissa *= 0.5
        exponent += 1

    while mantissa < 0.5:
        mantissa *= 2.0
        exponent -= 1

    if x < 0.0:
        mantissa = -mantissa

    return FrexpResult(mantissa, exponent)


def ldexp(x: float, exp: int) -> float:
    """
    Сборка x * 2^exp (обратная операция к frexp).

    Масштабирование выполняется напрямую последовательным удвоением /
    делением пополам, а не через pow(2, exp): каждый шаг точен, пока
    результат остаётся нормализованным. Цикл прерывается при переполнении
    до inf. Уход в subnormal выполняется одним умножением на точную
    степень двойки, чтобы результат округлялся один раз.

    Args:
        x: Мантисса (любой float)
        exp: Целочисленная экспонента

    Returns:
        x * 2^exp

    Raises:
        TypeError: если exp не целое число
    """
    if isinstance(exp, bool) or not isinstance(exp, int):
        raise TypeError(f"ldexp: exponent must be an integer, got {exp!r}")

    if x == 0.0 or not isfinite(x):
        return x

    result = x

    while exp > 0 and not isinf(result):
        result *= 2.0
        exp -= 1

    while exp < 0 and fabs(result) >= 2.0 * MIN_NORMAL:
        result *= 0.5
        exp += 1

    if exp < 0:
        # 2^exp точно представим вплоть до 2^-1074; ниже произведение всё равно 0
        scale = 1.0
        for _ in range(-max(exp, MIN_SUBNORMAL_EXPONENT)):
            scale *= 0.5
        result *= scale

    return result

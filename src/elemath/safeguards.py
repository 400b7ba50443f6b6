"""
Safeguards — Domain Errors, Float Classification, IEEE Division

Модуль обеспечивает общие защиты для всех функций библиотеки:
- MathDomainError для входов вне области определения
- Классификация float (NaN/Inf) без модуля math
- Деление с IEEE-754 семантикой (x/0 → ±inf или NaN вместо ZeroDivisionError)
- Валидация параметров точности (degree, tolerance, max_iterations)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Domain errors никогда не маскируются sentinel-значением (всегда exception)
2. Вырожденные, но определённые результаты (деление на ноль в tan/tanh)
   возвращаются как ±inf/NaN, а не исключение
3. Все проверки детерминированы и не имеют состояния
"""

from elemath.constants import INF, NAN

# =============================================================================
# EXCEPTIONS
# =============================================================================


class MathDomainError(ValueError):
    """
    Аргумент вне области определения функции.

    Возникает синхронно при нарушении предусловия:
    - log/log10/log2 при x ≤ 0
    - sqrt при x < 0
    - pow при отрицательном основании и нецелом показателе,
      а также при нулевом основании и отрицательном показателе
    - fmod при нулевом делителе

    Наследуется от ValueError: код, рассчитанный на поведение math,
    продолжает работать с `except ValueError`.
    """

    pass


# =============================================================================
# КЛАССИФИКАЦИЯ FLOAT
# =============================================================================


def isnan(x: float) -> bool:
    """NaN не равен самому себе."""
    return x != x


def isinf(x: float) -> bool:
    """Проверка на +inf / -inf."""
    return x == INF or x == -INF


def isfinite(x: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        x: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf

    Examples:
        >>> isfinite(1.0)
        True
        >>> isfinite(float('inf'))
        False
        >>> isfinite(float('nan'))
        False
    """
    return not isnan(x) and not isinf(x)


def has_sign_bit(x: float) -> bool:
    """
    Установлен ли знаковый бит (различает -0.0 и 0.0).

    Сравнение `x < 0` не видит знак нуля, поэтому используется
    шестнадцатеричное представление float.
    """
    return float(x).hex().startswith("-")


# =============================================================================
# IEEE ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Оператор `/` в Python бросает ZeroDivisionError для float-нуля.
    Для tan/tanh деление на ноль даёт вырожденный, но определённый результат:
    он пропагируется вызывающему коду, а не перехватывается.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, а при denominator == ±0.0:
        - NaN если numerator равен 0 или NaN
        - ±inf со знаком sign(numerator) * sign(denominator)

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or isnan(numerator):
        return NAN

    negative = (numerator < 0.0) != has_sign_bit(denominator)
    return -INF if negative else INF


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_series_degree(degree: int) -> None:
    """
    Валидация степени ряда.

    Args:
        degree: Количество членов ряда после ведущего

    Raises:
        ValueError: Если degree не целое или < 1
    """
    if isinstance(degree, bool) or not isinstance(degree, int):
        raise ValueError(f"degree must be an integer, got {degree!r}")

    if degree < 1:
        raise ValueError(f"degree must be >= 1, got {degree}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value ≤ 0 или NaN/Inf
    """
    if not isfinite(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")

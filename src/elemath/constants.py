"""
Constants — Математические константы и параметры точности

Модуль содержит все параметры, управляющие точностью аппроксимаций:
- Степень ряда (количество членов Taylor/Maclaurin)
- Толерантность сходимости для итеративного sqrt
- Верхняя граница итераций (гарантия завершения)
- Epsilon для проверки целочисленности показателя степени

Все значения задаются при инициализации библиотеки (module-level Final),
а не через runtime-конфигурацию. Функции принимают keyword-переопределения
(degree=..., tolerance=...) со значениями по умолчанию из этого модуля.

Константы π, e, ln2 и т.д. записаны литералами (correctly rounded double),
чтобы не зависеть от модуля math платформы.
"""

from typing import Final

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

PI: Final[float] = 3.141592653589793
TAU: Final[float] = 6.283185307179586
HALF_PI: Final[float] = 1.5707963267948966
SIXTH_PI: Final[float] = 0.5235987755982988
E: Final[float] = 2.718281828459045

# Натуральные логарифмы оснований (для log2/log10 и range reduction в log)
LN2: Final[float] = 0.6931471805599453
LN10: Final[float] = 2.302585092994046

SQRT2: Final[float] = 1.4142135623730951
SQRT_HALF: Final[float] = 0.7071067811865476
SQRT3: Final[float] = 1.7320508075688772

# Наименьший нормализованный double (2^-1022) и минимальная экспонента subnormal
MIN_NORMAL: Final[float] = 2.2250738585072014e-308
MIN_SUBNORMAL_EXPONENT: Final[int] = -1074

INF: Final[float] = float("inf")
NAN: Final[float] = float("nan")


# =============================================================================
# ПАРАМЕТРЫ РЯДОВ
# =============================================================================

# Количество членов ряда после ведущего (канонический выбор из двух вариантов 10/20)
# Ошибки аппроксимации для этой степени задокументированы в error_bounds.ERROR_BOUNDS
SERIES_DEGREE: Final[int] = 20

# asin: при |x| > порога используется half-angle identity,
# чтобы аргумент ряда оставался в [0, 0.5]
ASIN_HALF_ANGLE_THRESHOLD: Final[float] = 0.5

# atan: при x > 2 - √3 (= tan(π/12)) аргумент сдвигается на π/6
ATAN_REDUCTION_THRESHOLD: Final[float] = 0.2679491924311227

# tanh: при |x| >= порога tanh(x) округляется до ±1.0 в double,
# а ряды sinh/cosh на таких аргументах уже теряют точность
TANH_SATURATION_THRESHOLD: Final[float] = 20.0


# =============================================================================
# ПАРАМЕТРЫ ИТЕРАТИВНЫХ МЕТОДОВ
# =============================================================================

# Порог сходимости Babylonian sqrt (относительно текущего приближения)
SQRT_TOLERANCE: Final[float] = 1e-8

# Верхняя граница итераций sqrt
# Старт x/2 уменьшается примерно вдвое за шаг: ~1075 шагов покрывают
# весь диапазон double (включая subnormal)
SQRT_MAX_ITERATIONS: Final[int] = 1100

# Порог для проверки "y целое" в pow: |y mod 1| < INTEGER_EPS
INTEGER_EPS: Final[float] = 1e-9

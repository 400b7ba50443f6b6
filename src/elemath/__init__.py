"""
elemath — элементарные функции на рядах и итерациях

Самодостаточная замена модуля math для сред без доверенного libm:
тригонометрия, гиперболические функции, exp/log, pow/sqrt и разложение
float, вычисляемые детерминированно через степенные ряды и метод Ньютона.
"""

# Constants & precision parameters
from elemath.constants import (
    E,
    INF,
    INTEGER_EPS,
    LN2,
    LN10,
    NAN,
    PI,
    SERIES_DEGREE,
    SQRT_MAX_ITERATIONS,
    SQRT_TOLERANCE,
    TAU,
)

# Safeguards
from elemath.safeguards import (
    MathDomainError,
    ieee_divide,
    isfinite,
    isinf,
    isnan,
)

# Documented error envelope
from elemath.error_bounds import ERROR_BOUNDS, ErrorBound, get_error_bound

# Rounding & Decomposition
from elemath.rounding import (
    FrexpResult,
    ModfResult,
    ceil,
    fabs,
    floor,
    fmod,
    frexp,
    ldexp,
    modf,
    trunc,
)

# Exponential & Logarithm
from elemath.exponential import exp, log, log2, log10

# Power & Root
from elemath.power import pow, sqrt

# Trigonometric
from elemath.trigonometric import acos, asin, atan, atan2, cos, sin, tan

# Hyperbolic
from elemath.hyperbolic import cosh, sinh, tanh

__all__ = [
    # Constants
    "E",
    "INF",
    "LN2",
    "LN10",
    "NAN",
    "PI",
    "TAU",
    # Precision parameters
    "INTEGER_EPS",
    "SERIES_DEGREE",
    "SQRT_MAX_ITERATIONS",
    "SQRT_TOLERANCE",
    # Safeguards — Exceptions
    "MathDomainError",
    # Safeguards — Classification
    "ieee_divide",
    "isfinite",
    "isinf",
    "isnan",
    # Error bounds
    "ERROR_BOUNDS",
    "ErrorBound",
    "get_error_bound",
    # Rounding & Decomposition — Types
    "FrexpResult",
    "ModfResult",
    # Rounding & Decomposition — Functions
    "ceil",
    "fabs",
    "floor",
    "fmod",
    "frexp",
    "ldexp",
    "modf",
    "trunc",
    # Exponential & Logarithm
    "exp",
    "log",
    "log2",
    "log10",
    # Power & Root
    "pow",
    "sqrt",
    # Trigonometric
    "acos",
    "asin",
    "atan",
    "atan2",
    "cos",
    "sin",
    "tan",
    # Hyperbolic
    "cosh",
    "sinh",
    "tanh",
]

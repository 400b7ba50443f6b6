"""
ErrorBound — Задокументированная точность аппроксимаций

Immutable Pydantic модель, описывающая худшую ошибку функции на её
рабочем диапазоне при степени рядов SERIES_DEGREE (= 20).

Таблица ERROR_BOUNDS: единственное место, где зафиксирован компромисс
"степень ряда / точность". Границы получены оценкой остатка ряда
(первый отброшенный член, умноженный на геометрический множитель)
плюс накопленная ошибка округления double, и взяты с запасом.

Допуск для пары (computed, expected):
    |computed - expected| <= max(max_abs_error, max_rel_error * |expected|)
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from elemath.constants import SERIES_DEGREE

# =============================================================================
# MODEL
# =============================================================================


class ErrorBound(BaseModel):
    """
    Граница ошибки одной функции.

    Для функций двух аргументов (atan2, pow) диапазон описан в note.
    """

    function: str = Field(..., min_length=1, description="Имя функции")
    domain_min: float = Field(..., description="Нижняя граница рабочего диапазона")
    domain_max: float = Field(..., description="Верхняя граница рабочего диапазона")
    max_abs_error: float = Field(..., ge=0, description="Абсолютная ошибка")
    max_rel_error: float = Field(..., ge=0, description="Относительная ошибка")
    degree: int = Field(SERIES_DEGREE, gt=0, description="Степень рядов")
    note: str = Field("", description="Условия применимости")

    model_config = {"frozen": True}

    @field_validator("domain_max")
    @classmethod
    def validate_domain_order(cls, v: float, info) -> float:
        """Проверка, что domain_max >= domain_min"""
        if "domain_min" in info.data:
            domain_min = info.data["domain_min"]
            if v < domain_min:
                raise ValueError(f"domain_max {v} must be >= domain_min {domain_min}")
        return v

    def covers(self, x: float) -> bool:
        """Лежит ли x в рабочем диапазоне."""
        return self.domain_min <= x <= self.domain_max

    def tolerance_at(self, expected: float) -> float:
        """Допустимое отклонение от точного значения expected."""
        magnitude = expected if expected >= 0 else -expected
        return max(self.max_abs_error, self.max_rel_error * magnitude)

    def admits(self, computed: float, expected: float) -> bool:
        """
        Укладывается ли результат в задокументированную границу.

        Args:
            computed: Значение, вычисленное библиотекой
            expected: Эталонное значение

        Returns:
            True если |computed - expected| <= tolerance_at(expected)
        """
        diff = computed - expected
        if diff < 0:
            diff = -diff
        return diff <= self.tolerance_at(expected)


# =============================================================================
# ТАБЛИЦА ГРАНИЦ (SERIES_DEGREE = 20)
# =============================================================================

_EXACT = {"max_abs_error": 0.0, "max_rel_error": 0.0}

ERROR_BOUNDS: Final[dict[str, ErrorBound]] = {
    bound.function: bound
    for bound in (
        # Rounding & Decomposition: точные операции
        ErrorBound(function="floor", domain_min=-1e300, domain_max=1e300, **_EXACT),
        ErrorBound(function="ceil", domain_min=-1e300, domain_max=1e300, **_EXACT),
        ErrorBound(function="fabs", domain_min=-1e300, domain_max=1e300, **_EXACT),
        ErrorBound(function="fmod", domain_min=-1e300, domain_max=1e300, **_EXACT),
        ErrorBound(function="modf", domain_min=-1e300, domain_max=1e300, **_EXACT),
        ErrorBound(function="frexp", domain_min=-1e300, domain_max=1e300, **_EXACT),
        ErrorBound(
            function="ldexp",
            domain_min=-1e300,
            domain_max=1e300,
            note="Корректно округлено, включая subnormal (одно округление)",
            **_EXACT,
        ),
        # Exponential & Logarithm
        ErrorBound(
            function="exp",
            domain_min=-5.0,
            domain_max=5.0,
            max_abs_error=0.0,
            max_rel_error=2e-7,
            note="Без range reduction: остаток ряда x^21/21! растёт с |x|",
        ),
        ErrorBound(
            function="log",
            domain_min=1e-300,
            domain_max=1e300,
            max_abs_error=1e-13,
            max_rel_error=1e-15,
        ),
        ErrorBound(
            function="log10",
            domain_min=1e-300,
            domain_max=1e300,
            max_abs_error=1e-13,
            max_rel_error=1e-15,
        ),
        ErrorBound(
            function="log2",
            domain_min=1e-300,
            domain_max=1e300,
            max_abs_error=1e-13,
            max_rel_error=1e-15,
        ),
        # Power & Root
        ErrorBound(
            function="pow",
            domain_min=-5.0,
            domain_max=5.0,
            max_abs_error=0.0,
            max_rel_error=2e-7,
            note="Диапазон относится к y * log(|x|): наследует границу exp",
        ),
        ErrorBound(
            function="sqrt",
            domain_min=0.0,
            domain_max=1e300,
            max_abs_error=0.0,
            max_rel_error=1e-14,
        ),
        # Trigonometric
        ErrorBound(
            function="sin",
            domain_min=-100.0,
            domain_max=100.0,
            max_abs_error=1e-12,
            max_rel_error=0.0,
            note="Ошибка приведения по 2π растёт линейно с |x|",
        ),
        ErrorBound(
            function="cos",
            domain_min=-100.0,
            domain_max=100.0,
            max_abs_error=1e-12,
            max_rel_error=0.0,
            note="Ошибка приведения по 2π растёт линейно с |x|",
        ),
        ErrorBound(
            function="tan",
            domain_min=-1.4,
            domain_max=1.4,
            max_abs_error=1e-13,
            max_rel_error=1e-12,
            note="Вблизи π/2 + kπ ошибка усиливается как 1/cos^2",
        ),
        ErrorBound(
            function="asin",
            domain_min=-1.0,
            domain_max=1.0,
            max_abs_error=1e-13,
            max_rel_error=0.0,
        ),
        ErrorBound(
            function="acos",
            domain_min=-1.0,
            domain_max=1.0,
            max_abs_error=1e-13,
            max_rel_error=0.0,
        ),
        ErrorBound(
            function="atan",
            domain_min=-1e300,
            domain_max=1e300,
            max_abs_error=1e-14,
            max_rel_error=0.0,
        ),
        ErrorBound(
            function="atan2",
            domain_min=-1e100,
            domain_max=1e100,
            max_abs_error=1e-14,
            max_rel_error=0.0,
            note="Диапазон относится к обоим аргументам",
        ),
        # Hyperbolic
        ErrorBound(
            function="sinh",
            domain_min=-10.0,
            domain_max=10.0,
            max_abs_error=1e-15,
            max_rel_error=1e-12,
        ),
        ErrorBound(
            function="cosh",
            domain_min=-10.0,
            domain_max=10.0,
            max_abs_error=0.0,
            max_rel_error=1e-12,
        ),
        ErrorBound(
            function="tanh",
            domain_min=-10.0,
            domain_max=10.0,
            max_abs_error=1e-15,
            max_rel_error=1e-12,
        ),
    )
}


def get_error_bound(function: str) -> ErrorBound:
    """
    Граница ошибки по имени функции.

    Raises:
        KeyError: если для функции граница не задокументирована
    """
    if function not in ERROR_BOUNDS:
        raise KeyError(f"No documented error bound for {function!r}")
    return ERROR_BOUNDS[function]

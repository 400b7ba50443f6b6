"""
Tests for ErrorBound model and ERROR_BOUNDS table

Покрывает:
- Создание и валидацию ErrorBound (Pydantic V2)
- Immutability (frozen=True)
- JSON сериализацию
- tolerance_at / admits / covers
- Полноту таблицы ERROR_BOUNDS
- Соответствие реализации задокументированным границам на сетке точек
"""

import math

import pytest
from pydantic import ValidationError

import elemath
from elemath.constants import SERIES_DEGREE
from elemath.error_bounds import ERROR_BOUNDS, ErrorBound, get_error_bound

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_bound_data():
    """Валидные данные границы ошибки."""
    return {
        "function": "exp",
        "domain_min": -5.0,
        "domain_max": 5.0,
        "max_abs_error": 1e-12,
        "max_rel_error": 2e-7,
    }


@pytest.fixture
def bound(valid_bound_data):
    return ErrorBound(**valid_bound_data)


# =============================================================================
# TESTS: ErrorBound
# =============================================================================


def test_error_bound_creation(bound):
    assert bound.function == "exp"
    assert bound.degree == SERIES_DEGREE
    assert bound.note == ""


def test_error_bound_immutability(bound):
    with pytest.raises(ValidationError, match="frozen"):
        bound.max_rel_error = 1.0


def test_error_bound_json_round_trip(bound):
    restored = ErrorBound.model_validate_json(bound.model_dump_json())
    assert restored == bound


def test_error_bound_domain_order(valid_bound_data):
    """domain_max < domain_min → ValidationError"""
    valid_bound_data["domain_max"] = -10.0
    with pytest.raises(ValidationError, match="must be >= domain_min"):
        ErrorBound(**valid_bound_data)


def test_error_bound_negative_error_rejected(valid_bound_data):
    valid_bound_data["max_abs_error"] = -1e-9
    with pytest.raises(ValidationError, match="greater than or equal to 0"):
        ErrorBound(**valid_bound_data)


def test_error_bound_empty_function_rejected(valid_bound_data):
    valid_bound_data["function"] = ""
    with pytest.raises(ValidationError):
        ErrorBound(**valid_bound_data)


def test_error_bound_degree_positive(valid_bound_data):
    valid_bound_data["degree"] = 0
    with pytest.raises(ValidationError, match="greater than 0"):
        ErrorBound(**valid_bound_data)


def test_error_bound_covers(bound):
    assert bound.covers(0.0)
    assert bound.covers(-5.0)
    assert bound.covers(5.0)
    assert not bound.covers(5.1)


def test_error_bound_tolerance_at(bound):
    """Допуск = max(abs, rel * |expected|)"""
    assert bound.tolerance_at(0.0) == 1e-12
    assert bound.tolerance_at(100.0) == pytest.approx(2e-5)
    assert bound.tolerance_at(-100.0) == pytest.approx(2e-5)


def test_error_bound_admits(bound):
    assert bound.admits(100.00001, 100.0)
    assert not bound.admits(100.001, 100.0)
    assert bound.admits(5e-13, 0.0)
    assert not bound.admits(1e-11, 0.0)


# =============================================================================
# TESTS: ERROR_BOUNDS table
# =============================================================================

DOCUMENTED_FUNCTIONS = [
    "floor",
    "ceil",
    "fabs",
    "fmod",
    "modf",
    "frexp",
    "ldexp",
    "exp",
    "log",
    "log10",
    "log2",
    "pow",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "sinh",
    "cosh",
    "tanh",
]


def test_every_function_has_bound():
    assert sorted(ERROR_BOUNDS) == sorted(DOCUMENTED_FUNCTIONS)


def test_table_keys_match_model_names():
    for name, entry in ERROR_BOUNDS.items():
        assert entry.function == name
        assert entry.degree == SERIES_DEGREE


def test_get_error_bound():
    assert get_error_bound("sqrt").max_rel_error == 1e-14


def test_get_error_bound_unknown_function():
    with pytest.raises(KeyError, match="No documented error bound"):
        get_error_bound("gamma")


def test_exact_functions_have_zero_bounds():
    for name in ("floor", "ceil", "fabs", "fmod", "modf", "frexp", "ldexp"):
        entry = ERROR_BOUNDS[name]
        assert entry.max_abs_error == 0.0
        assert entry.max_rel_error == 0.0


# =============================================================================
# TESTS: реализация укладывается в задокументированные границы
# =============================================================================

UNARY_GRID = {
    "floor": (math.floor, [-1e300, -2.5, -0.5, 0.0, 0.5, 7.25, 1e15 + 0.5, 1e300]),
    "ceil": (math.ceil, [-1e300, -2.5, -0.5, 0.0, 0.5, 7.25, 1e15 + 0.5, 1e300]),
    "fabs": (math.fabs, [-1e300, -2.5, 0.0, 3.0, 1e300]),
    "exp": (math.exp, [-5.0, -3.3, -1.0, 0.0, 0.7, 2.0, 4.4, 5.0]),
    "log": (math.log, [1e-300, 1e-10, 0.3, 1.0, 1.7, 42.0, 1e10, 1e300]),
    "log10": (math.log10, [1e-300, 0.3, 1.0, 42.0, 1e300]),
    "log2": (math.log2, [1e-300, 0.3, 1.0, 42.0, 1e300]),
    "sqrt": (math.sqrt, [0.0, 1e-300, 0.3, 2.0, 1e10, 1e300]),
    "sin": (math.sin, [-100.0, -3.0, -0.2, 0.0, 1.0, 2.5, 50.0, 100.0]),
    "cos": (math.cos, [-100.0, -3.0, -0.2, 0.0, 1.0, 2.5, 50.0, 100.0]),
    "tan": (math.tan, [-1.4, -0.6, 0.0, 0.4, 1.1, 1.4]),
    "asin": (math.asin, [-1.0, -0.75, -0.3, 0.0, 0.45, 0.55, 0.99, 1.0]),
    "acos": (math.acos, [-1.0, -0.75, -0.3, 0.0, 0.45, 0.55, 0.99, 1.0]),
    "atan": (math.atan, [-1e300, -7.0, -1.0, -0.3, 0.0, 0.26, 0.8, 2.0, 1e300]),
    "sinh": (math.sinh, [-10.0, -2.0, -1e-3, 0.0, 0.5, 3.0, 10.0]),
    "cosh": (math.cosh, [-10.0, -2.0, -1e-3, 0.0, 0.5, 3.0, 10.0]),
    "tanh": (math.tanh, [-10.0, -2.0, -1e-3, 0.0, 0.5, 3.0, 10.0]),
}


@pytest.mark.parametrize("name", sorted(UNARY_GRID))
def test_unary_functions_within_bound(name):
    reference, points = UNARY_GRID[name]
    entry = ERROR_BOUNDS[name]
    function = getattr(elemath, name)

    for x in points:
        assert entry.covers(x)
        computed = function(x)
        expected = float(reference(x))
        assert entry.admits(computed, expected), (name, x, computed, expected)


def test_fmod_within_bound():
    entry = ERROR_BOUNDS["fmod"]
    for x, y in [(7.5, 2.0), (-1e300, 3.0), (1e-300, 1e-301), (100.0, -0.7)]:
        assert entry.admits(elemath.fmod(x, y), math.fmod(x, y))


def test_atan2_within_bound():
    entry = ERROR_BOUNDS["atan2"]
    for y, x in [(1.0, 1.0), (-1e100, 3.0), (2.0, -1e100), (-0.5, -0.5), (1e-100, 1e100)]:
        assert entry.admits(elemath.atan2(y, x), math.atan2(y, x)), (y, x)


def test_pow_within_bound():
    """Пары (x, y) с |y * log(x)| ≤ 5"""
    entry = ERROR_BOUNDS["pow"]
    for x, y in [(2.0, 3.5), (10.0, -2.0), (0.5, 7.0), (1.5, 0.1), (-3.0, 3.0)]:
        assert abs(y * math.log(abs(x))) <= 5.0
        assert entry.admits(elemath.pow(x, y), math.pow(x, y)), (x, y)

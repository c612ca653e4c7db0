"""
Parameter Validators — контракты предусловий для механизмов DP

Семейство проверок над вещественными параметрами. Каждая проверка принимает
значение (и границы, где нужно) и имя поля; при успехе возвращает None, при
нарушении бросает InvalidArgumentError с сообщением, в которое имя поля
вставляется дословно.

Используются на каждой публичной точке конфигурации механизма (epsilon,
delta, bounds, лимиты вкладов) до калибровки шума.

ВАЖНО: все сравнения — сырые IEEE-сравнения float, без epsilon-толерантности.
Значение в пределах одного ULP от исключающей границы может быть ошибочно
принято или отклонено (например, -1.0 - 5e-324 == -1.0). Поведение сохранено
бит-в-бит ради совместимости с существующими аудитами privacy budget.

NaN не проходит ни одну упорядоченную проверку (любое сравнение с NaN ложно),
но проходит validate_is_finite (проверяется только ±inf).
"""

import math
from typing import Optional

from dp_numerics.core.contracts.errors import InvalidArgumentError
from dp_numerics.core.contracts.formatting import format_number as _fmt


# =============================================================================
# БАЗОВЫЕ ПРОВЕРКИ
# =============================================================================


def validate_is_set(value: Optional[float], name: str) -> None:
    """
    Значение задано и не NaN.

    Infinity допускается.

    Raises:
        InvalidArgumentError: "{name} must be set." или
            "{name} must be a valid numeric value, ..."
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must be set.")
    if math.isnan(value):
        raise InvalidArgumentError(
            f"{name} must be a valid numeric value, but is {_fmt(value)}."
        )


def validate_is_positive(value: float, name: str) -> None:
    """value > 0 (infinity проходит)."""
    if not value > 0:
        raise InvalidArgumentError(f"{name} must be positive, but is {_fmt(value)}.")


def validate_is_non_negative(value: float, name: str) -> None:
    """value >= 0 (infinity проходит)."""
    if not value >= 0:
        raise InvalidArgumentError(
            f"{name} must be non-negative, but is {_fmt(value)}."
        )


def validate_is_finite(value: float, name: str) -> None:
    """Отказ только для ±infinity."""
    if math.isinf(value):
        raise InvalidArgumentError(f"{name} must be finite, but is {_fmt(value)}.")


def validate_is_finite_and_positive(value: float, name: str) -> None:
    if math.isinf(value) or not value > 0:
        raise InvalidArgumentError(
            f"{name} must be finite and positive, but is {_fmt(value)}."
        )


def validate_is_finite_and_non_negative(value: float, name: str) -> None:
    if math.isinf(value) or not value >= 0:
        raise InvalidArgumentError(
            f"{name} must be finite and non-negative, but is {_fmt(value)}."
        )


# =============================================================================
# СРАВНЕНИЯ С ГРАНИЦЕЙ
# =============================================================================


def validate_is_lesser_than(value: float, upper_bound: float, name: str) -> None:
    """
    value < upper_bound (строго).

    При value == upper_bound всегда отказ, включая ±inf == ±inf.
    """
    if not value < upper_bound:
        raise InvalidArgumentError(
            f"{name} must be lesser than {_fmt(upper_bound)}, but is {_fmt(value)}."
        )


def validate_is_lesser_than_or_equal_to(
    value: float, upper_bound: float, name: str
) -> None:
    """value <= upper_bound. При равенстве всегда успех."""
    if not value <= upper_bound:
        raise InvalidArgumentError(
            f"{name} must be lesser than or equal to {_fmt(upper_bound)}, "
            f"but is {_fmt(value)}."
        )


def validate_is_greater_than(value: float, lower_bound: float, name: str) -> None:
    """value > lower_bound (строго)."""
    if not value > lower_bound:
        raise InvalidArgumentError(
            f"{name} must be greater than {_fmt(lower_bound)}, but is {_fmt(value)}."
        )


def validate_is_greater_than_or_equal_to(
    value: float, lower_bound: float, name: str
) -> None:
    """value >= lower_bound. При равенстве всегда успех."""
    if not value >= lower_bound:
        raise InvalidArgumentError(
            f"{name} must be greater than or equal to {_fmt(lower_bound)}, "
            f"but is {_fmt(value)}."
        )


# =============================================================================
# ИНТЕРВАЛЫ
# =============================================================================


def interval_notation(
    lower: float, upper: float, include_lower: bool, include_upper: bool
) -> str:
    """
    Скобочная запись интервала: (l,u), [l,u], [l,u), (l,u].

    Examples:
        >>> interval_notation(0.0, 1.0, True, False)
        '[0,1)'
    """
    left = "[" if include_lower else "("
    right = "]" if include_upper else ")"
    return f"{left}{_fmt(lower)},{_fmt(upper)}{right}"


def is_in_interval(
    value: float,
    lower_bound: float,
    upper_bound: float,
    include_lower: bool,
    include_upper: bool,
) -> bool:
    """
    Принадлежность value интервалу (сырые IEEE-сравнения).

    Вырожденный интервал (l == u) содержит l, если включена хотя бы одна
    граница: (l,l] и [l,l) равны {l}. При обеих исключённых границах он пуст.

    Examples:
        >>> is_in_interval(1.0, 1.0, 1.0, False, True)
        True
        >>> is_in_interval(1.0, 1.0, 1.0, False, False)
        False
    """
    if lower_bound == upper_bound:
        return (include_lower or include_upper) and value == lower_bound

    above_lower = value >= lower_bound if include_lower else value > lower_bound
    below_upper = value <= upper_bound if include_upper else value < upper_bound
    return above_lower and below_upper


def validate_is_in_interval(
    value: float,
    lower_bound: float,
    upper_bound: float,
    include_lower: bool,
    include_upper: bool,
    name: str,
) -> None:
    """
    Проверка принадлежности интервалу в одном из четырёх режимов границ.

    Сообщение об ошибке называет режим и точную скобочную запись:
    - (l,u)  → "exclusive interval"
    - [l,u]  → "inclusive interval"
    - [l,u) и (l,u] → "interval"

    Вырожденный интервал (l == u) принимает только l, и только если хотя бы
    одна граница включена; с обеими исключающими границами он пуст.

    Args:
        value: Проверяемое значение
        lower_bound: Нижняя граница
        upper_bound: Верхняя граница
        include_lower: Нижняя граница включена
        include_upper: Верхняя граница включена
        name: Имя поля (вставляется в сообщение дословно)

    Raises:
        InvalidArgumentError: Если value вне интервала

    Examples:
        >>> validate_is_in_interval(0.5, 0.0, 1.0, True, False, "Delta")
        >>> validate_is_in_interval(-1.0, 0.0, 1.0, True, False, "X")
        Traceback (most recent call last):
            ...
        dp_numerics.core.contracts.errors.InvalidArgumentError: X must be in the interval [0,1), but is -1.
    """
    if is_in_interval(value, lower_bound, upper_bound, include_lower, include_upper):
        return

    if include_lower and include_upper:
        regime = "inclusive interval"
    elif not include_lower and not include_upper:
        regime = "exclusive interval"
    else:
        regime = "interval"

    notation = interval_notation(lower_bound, upper_bound, include_lower, include_upper)
    raise InvalidArgumentError(
        f"{name} must be in the {regime} {notation}, but is {_fmt(value)}."
    )


# =============================================================================
# КОМПОЗИТНЫЕ ПРОВЕРКИ КОНФИГУРАЦИИ МЕХАНИЗМОВ
# =============================================================================


def validate_epsilon(epsilon: Optional[float]) -> None:
    """Epsilon задан, конечен и положителен."""
    validate_is_set(epsilon, "Epsilon")
    validate_is_finite_and_positive(epsilon, "Epsilon")


def validate_delta(delta: Optional[float]) -> None:
    """Delta задан и лежит в [0, 1]."""
    validate_is_set(delta, "Delta")
    validate_is_in_interval(delta, 0.0, 1.0, True, True, "Delta")


def validate_bounds(lower: Optional[float], upper: Optional[float]) -> None:
    """
    Границы clamping заданы, конечны и упорядочены.

    Raises:
        InvalidArgumentError: Если lower > upper
    """
    validate_is_set(lower, "Lower bound")
    validate_is_set(upper, "Upper bound")
    validate_is_finite(lower, "Lower bound")
    validate_is_finite(upper, "Upper bound")
    if lower > upper:
        raise InvalidArgumentError("Lower bound cannot be greater than upper bound.")


def _validate_positive_count(value: Optional[int], name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must be set.")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, but is {value!r}.")
    validate_is_positive(value, name)


def validate_max_partitions_contributed(value: Optional[int]) -> None:
    """Лимит партиций на пользователя: целое > 0."""
    _validate_positive_count(value, "Maximum number of partitions that can be contributed to")


def validate_max_contributions_per_partition(value: Optional[int]) -> None:
    """Лимит вкладов в одну партицию: целое > 0."""
    _validate_positive_count(value, "Maximum number of contributions per partition")

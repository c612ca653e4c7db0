"""
Vector Statistics — вспомогательная статистика для калибровки и тестов

Не используется на горячем пути механизмов; применяется в калибровочном
и тестовом коде рядом с ними. Моменты считаются модулем statistics
(точно округлённая дисперсия генеральной совокупности).
"""

import math
import statistics
from collections.abc import Sequence

from dp_numerics.core.contracts.errors import InvalidArgumentError
from dp_numerics.core.contracts.formatting import format_number
from dp_numerics.core.contracts.validators import validate_is_in_interval
from dp_numerics.core.math.numerical_safeguards import clamp


def _require_non_empty(values: Sequence[float], name: str) -> None:
    if len(values) == 0:
        raise InvalidArgumentError(f"{name} requires a non-empty vector")


def mean(values: Sequence[float]) -> float:
    """
    Среднее арифметическое.

    Examples:
        >>> mean([1, 5, 7, 9, 13])
        7.0
    """
    _require_non_empty(values, "mean")
    return statistics.fmean(values)


def variance(values: Sequence[float]) -> float:
    """
    Дисперсия генеральной совокупности (деление на n).

    Examples:
        >>> variance([1, 5, 7, 9, 13])
        16.0
    """
    _require_non_empty(values, "variance")
    return float(statistics.pvariance(values))


def standard_deviation(values: Sequence[float]) -> float:
    """Стандартное отклонение генеральной совокупности."""
    _require_non_empty(values, "standard_deviation")
    return float(statistics.pstdev(values))


def order_statistic(quantile: float, values: Sequence[float]) -> float:
    """
    Порядковая статистика с линейной интерполяцией.

    Ранг n*q - 0.5 на отсортированной копии, ограниченный [0, n-1];
    q=0 даёт минимум, q=1 максимум.

    Args:
        quantile: q из [0, 1]
        values: Вектор значений (не изменяется)

    Returns:
        Интерполированное значение на ранге

    Raises:
        InvalidArgumentError: Если q вне [0, 1] или вектор пуст

    Examples:
        >>> order_statistic(0.6, [1, 5, 7, 9, 13])
        8.0
    """
    validate_is_in_interval(quantile, 0.0, 1.0, True, True, "Quantile")
    _require_non_empty(values, "order_statistic")

    ordered = sorted(values)
    n = len(ordered)
    rank = clamp(0.0, n - 1.0, n * quantile - 0.5)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    return ordered[lower] + (rank - lower) * (ordered[upper] - ordered[lower])


def vector_filter(values: Sequence[float], selection: Sequence[bool]) -> list[float]:
    """
    Подпоследовательность values, где selection истинно (порядок сохраняется).

    Raises:
        InvalidArgumentError: Если длины не совпадают

    Examples:
        >>> vector_filter([1, 2, 2, 3], [False, True, True, False])
        [2, 2]
    """
    if len(values) != len(selection):
        raise InvalidArgumentError(
            f"Vector and selection must have equal length, "
            f"got {len(values)} and {len(selection)}"
        )
    return [v for v, keep in zip(values, selection) if keep]


def vector_to_string(values: Sequence[float]) -> str:
    """
    Диагностическое представление "[v1, v2, ...]".

    Examples:
        >>> vector_to_string([1.0, 2.0, 2.5])
        '[1, 2, 2.5]'
    """
    return "[" + ", ".join(format_number(v) for v in values) + "]"

"""
Quantization — snapping на сетку степеней двойки

Модуль реализует квантование, на котором держится snapping-механизм:
- next_power_of_two: ближайшая степень двойки сверху
- round_to_nearest_multiple: округление до ближайшего кратного гранулярности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только точная двоичная арифметика: frexp/ldexp/fmod, без log2 и без
   десятичных промежуточных округлений
2. Для гранулярности 2^k (любой знак k) результат бит-в-бит одинаков на
   любой платформе и идемпотентен. Это свойство безопасности: устойчивость
   snapping к атакам реконструкции по представлению float зависит от
   идентичного битового результата во всех реализациях
3. Середина округляется в сторону +inf: 5.0 → 6.0, -5.0 → -4.0 (шаг 2.0)
"""

import math
import sys
from typing import Final

from dp_numerics.core.contracts.validators import validate_is_finite_and_positive

# Наибольший k, для которого 2^k конечно в double
MAX_BINARY_EXPONENT: Final[int] = sys.float_info.max_exp - 1


def is_power_of_two(x: float) -> bool:
    """
    Точная проверка: x == 2^k для целого k (включая отрицательные k).

    Examples:
        >>> is_power_of_two(0.125)
        True
        >>> is_power_of_two(3.0)
        False
    """
    if not math.isfinite(x) or x <= 0:
        return False
    mantissa, _ = math.frexp(x)
    return mantissa == 0.5


def next_power_of_two(x: float) -> float:
    """
    Наименьшая степень двойки >= x.

    Вычисляется по двоичному порядку (frexp): x = m * 2^e, m ∈ [0.5, 1).
    Если m == 0.5, x уже степень двойки и возвращается без изменений;
    иначе результат 2^e. Дрейфа от логарифма нет.

    Args:
        x: Положительное конечное значение

    Returns:
        2^k, наименьшая степень двойки >= x; +inf, если x > 2^1023 и
        не является степенью двойки

    Raises:
        InvalidArgumentError: Если x <= 0, NaN или inf

    Examples:
        >>> next_power_of_two(3.0)
        4.0
        >>> next_power_of_two(8.0)
        8.0
        >>> next_power_of_two(0.2)
        0.25
    """
    validate_is_finite_and_positive(x, "Input to next power of two")

    mantissa, exponent = math.frexp(x)
    if mantissa == 0.5:
        return float(x)
    if exponent > MAX_BINARY_EXPONENT:
        # 2^1024 не представимо в double
        return math.inf
    return math.ldexp(1.0, exponent)


def round_to_nearest_multiple(value: float, granularity: float) -> float:
    """
    Округление value до ближайшего кратного granularity.

    Остаток берётся через fmod (точная операция IEEE). Для точной середины
    результат сдвигается к +inf, независимо от знака value.

    Args:
        value: Округляемое значение (±inf и NaN возвращаются без изменений)
        granularity: Шаг сетки, конечный и положительный

    Returns:
        Ближайшее кратное granularity

    Raises:
        InvalidArgumentError: Если granularity <= 0, NaN или inf

    Examples:
        >>> round_to_nearest_multiple(5.0, 2.0)
        6.0
        >>> round_to_nearest_multiple(-5.0, 2.0)
        -4.0
        >>> round_to_nearest_multiple(0.1, 1.0 / 1024)
        0.099609375
    """
    validate_is_finite_and_positive(granularity, "Granularity")
    if not math.isfinite(value):
        return value

    remainder = math.fmod(value, granularity)
    half = granularity / 2

    if abs(remainder) > half:
        return value - remainder + math.copysign(granularity, remainder)
    if abs(remainder) == half:
        return value + half
    return value - remainder

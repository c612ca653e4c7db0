"""
Numerical Safeguards — overflow-safe арифметика

Модуль обеспечивает арифметику без молчаливого переполнения для любых
числовых видов (NumericKind):
- Безопасное сложение / вычитание / возведение в квадрат
- Безопасное приведение double → целый или более узкий вещественный вид
- Clamp и базовые параметры privacy budget

Результат каждой операции — SafeResult: либо точное значение, либо флаг
ошибки вместе с лучшим clamped значением. Вызывающий код, игнорирующий
флаг, всё равно получает безопасное (не wrapped) число.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленная арифметика вычисляется точно (Python int), затем
   сравнивается с диапазоном вида; wraparound невозможен
2. Переполнение целых → ok=False и насыщение до max/lowest
3. Беззнаковое вычитание с отрицательным результатом → ok=False, значение 0
4. Вещественные виды следуют IEEE: ±inf — корректный результат, ok=True
5. Все операции детерминированы и не имеют состояния
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Final, Optional

import numpy as np

from dp_numerics.core.contracts.errors import ErrorKind, InvalidArgumentError
from dp_numerics.core.domain.numeric_kind import (
    FLOAT64,
    INT64,
    NumericKind,
    numeric_kind,
    numeric_kind_of,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ PRIVACY BUDGET
# =============================================================================

# Epsilon по умолчанию для механизмов: ln(3)
DEFAULT_EPSILON: Final[float] = math.log(3)


# =============================================================================
# РЕЗУЛЬТАТ SAFE-ОПЕРАЦИИ
# =============================================================================


@dataclass(frozen=True)
class SafeResult:
    """
    Результат safe-операции.

    value: точное значение; при ошибке — clamped замена (или None, если
        замены не существует, например NaN → целый вид)
    error: None при успехе, иначе вид ошибки (OVERFLOW / DOMAIN_EDGE)
    """

    value: int | float | None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ
# =============================================================================


def _resolve_kind(kind: Any, *operands: Any) -> NumericKind:
    """
    Явный kind или вывод по операндам.

    numpy-скаляры задают вид; Python-скаляры подстраиваются под него.
    Без numpy-операндов: float → FLOAT64, иначе INT64.
    """
    if kind is not None:
        return numeric_kind(kind)

    inferred = [numeric_kind_of(x) for x in operands]
    typed = {k for k, x in zip(inferred, operands) if isinstance(x, np.generic)}
    if len(typed) > 1:
        names = ", ".join(sorted(k.name for k in typed))
        raise InvalidArgumentError(
            f"Operands have mixed numeric kinds ({names}); pass kind explicitly"
        )
    if typed:
        return typed.pop()
    if any(k is FLOAT64 for k in inferred):
        return FLOAT64
    return INT64


def _as_integer(value: Any, kind: NumericKind) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(
            f"Operand {value!r} is not an integer value of kind {kind}"
        )
    exact = int(value)
    if not kind.fits(exact):
        raise InvalidArgumentError(f"Operand {exact} is not representable as {kind}")
    return exact


def _as_floating(value: Any, kind: NumericKind) -> np.floating:
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise InvalidArgumentError(
            f"Operand {value!r} is not a numeric value of kind {kind}"
        )
    with np.errstate(over="ignore"):
        return kind.dtype.type(value)


def _saturate(exact: int, kind: NumericKind, operation: str) -> SafeResult:
    if kind.fits(exact):
        return SafeResult(exact)

    clamped = kind.saturate(exact)
    logger.debug("%s overflow for %s: clamped to %s", operation, kind, clamped)
    return SafeResult(clamped, ErrorKind.OVERFLOW)


def _ieee(result: np.floating) -> SafeResult:
    return SafeResult(float(result))


# =============================================================================
# SAFE ARITHMETIC
# =============================================================================


def safe_add(a: Any, b: Any, kind: Any = None) -> SafeResult:
    """
    Сложение без переполнения.

    Целые виды: ok=False тогда и только тогда, когда точная сумма вне
    диапазона вида; значение насыщается до max (переполнение вверх) или
    lowest (вниз). Вещественные виды: IEEE, ok=True даже для ±inf.

    Args:
        a: Первый операнд
        b: Второй операнд
        kind: Числовой вид (NumericKind или numpy dtype-like); по умолчанию
            выводится из операндов

    Returns:
        SafeResult

    Raises:
        InvalidArgumentError: Если операнд не представим в виде

    Examples:
        >>> safe_add(10, 20)
        SafeResult(value=30, error=None)
        >>> safe_add(2**63 - 1, 1).ok
        False
    """
    kind = _resolve_kind(kind, a, b)
    if kind.is_integer:
        return _saturate(_as_integer(a, kind) + _as_integer(b, kind), kind, "add")

    x, y = _as_floating(a, kind), _as_floating(b, kind)
    with np.errstate(over="ignore", invalid="ignore"):
        return _ieee(x + y)


def safe_subtract(a: Any, b: Any, kind: Any = None) -> SafeResult:
    """
    Вычитание без переполнения.

    Контракт как у safe_add. Для беззнаковых видов отрицательный результат
    считается переполнением и насыщается до 0.

    Examples:
        >>> safe_subtract(10, 20)
        SafeResult(value=-10, error=None)
        >>> safe_subtract(1, 2, kind="uint64")
        SafeResult(value=0, error=<ErrorKind.OVERFLOW: 'overflow'>)
    """
    kind = _resolve_kind(kind, a, b)
    if kind.is_integer:
        return _saturate(
            _as_integer(a, kind) - _as_integer(b, kind), kind, "subtract"
        )

    x, y = _as_floating(a, kind), _as_floating(b, kind)
    with np.errstate(over="ignore", invalid="ignore"):
        return _ieee(x - y)


def safe_square(a: Any, kind: Any = None) -> SafeResult:
    """
    Квадрат без переполнения.

    Для целых видов ok=False, если a*a > max; включает асимметричный случай
    a == lowest (его отрицание уже не представимо). Значение насыщается до max.

    Examples:
        >>> safe_square(-9)
        SafeResult(value=81, error=None)
        >>> safe_square(-2**63).ok
        False
    """
    kind = _resolve_kind(kind, a)
    if kind.is_integer:
        exact = _as_integer(a, kind)
        return _saturate(exact * exact, kind, "square")

    x = _as_floating(a, kind)
    with np.errstate(over="ignore"):
        return _ieee(x * x)


def safe_cast_from_double(src: float, kind: Any) -> SafeResult:
    """
    Приведение double к числовому виду kind.

    - Конечные и бесконечные значения вне диапазона целого вида насыщаются
      до max/lowest (успех: это семантика приведения)
    - Значения в диапазоне усекаются к нулю
    - NaN → целый вид: ошибка DOMAIN_EDGE, value=None
    - NaN → вещественный вид: успех, NaN
    - Модуль больше диапазона узкого вещественного вида → ±inf

    Args:
        src: Исходное значение double
        kind: Целевой вид

    Returns:
        SafeResult

    Examples:
        >>> safe_cast_from_double(20.0, "int64")
        SafeResult(value=20, error=None)
        >>> safe_cast_from_double(1.0e200, "int64").value == 2**63 - 1
        True
        >>> safe_cast_from_double(float("nan"), "int64").ok
        False
    """
    if isinstance(src, (bool, np.bool_)):
        raise InvalidArgumentError(f"Source {src!r} is not a numeric value")

    kind = numeric_kind(kind)
    src = float(src)

    if not kind.is_integer:
        with np.errstate(over="ignore"):
            return SafeResult(float(kind.dtype.type(src)))

    if math.isnan(src):
        logger.debug("cast of NaN to integral kind %s rejected", kind)
        return SafeResult(None, ErrorKind.DOMAIN_EDGE)

    # float/int сравнение в Python точное
    if src >= kind.max:
        return SafeResult(kind.max)
    if src <= kind.lowest:
        return SafeResult(kind.lowest)
    return SafeResult(int(src))


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(lower: float, upper: float, value: float) -> float:
    """
    Ограничение value диапазоном [lower, upper].

    Examples:
        >>> clamp(1, 3, 2)
        2
        >>> clamp(1.0, 3.0, 4.0)
        3.0
        >>> clamp(1.0, 3.0, -2.0)
        1.0
    """
    return min(max(value, lower), upper)


def default_epsilon() -> float:
    """Epsilon по умолчанию для DP-механизмов (ln 3)."""
    return DEFAULT_EPSILON

"""
NumericKind — описание числового типа для безопасной арифметики

Единый дескриптор числового вида (int8 … uint64, float16 … float64),
через который параметризуются все safe-операции. Границы берутся из numpy
(np.iinfo / np.finfo), поэтому логика переполнения пишется один раз и
работает для любого вида.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для целых видов lowest/max — точные Python int (без потери точности)
2. Для вещественных видов lowest/max — конечные float
3. bool никогда не считается числом
"""

from dataclasses import dataclass
from typing import Any, Final

import numpy as np

from dp_numerics.core.contracts.errors import InvalidArgumentError


@dataclass(frozen=True)
class NumericKind:
    """
    Числовой вид: имя numpy dtype и его диапазон.

    Создаётся через numeric_kind(); напрямую не конструируется.
    """

    name: str
    is_integer: bool
    is_signed: bool
    lowest: int | float
    max: int | float

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.name)

    def fits(self, value: int | float) -> bool:
        """True если value лежит в [lowest, max]."""
        return self.lowest <= value <= self.max

    def saturate(self, value: int | float) -> int | float:
        """Насыщение value до границ вида."""
        if value > self.max:
            return self.max
        if value < self.lowest:
            return self.lowest
        return value

    def __str__(self) -> str:
        return self.name


def numeric_kind(dtype_like: Any) -> NumericKind:
    """
    Построение NumericKind из numpy dtype-like (np.int64, "float32", ...).

    Raises:
        InvalidArgumentError: Если dtype не целый и не вещественный
    """
    if isinstance(dtype_like, NumericKind):
        return dtype_like

    try:
        dtype = np.dtype(dtype_like)
    except TypeError as exc:
        raise InvalidArgumentError(f"Unsupported numeric kind: {dtype_like!r}") from exc

    if dtype.kind in ("i", "u"):
        info = np.iinfo(dtype)
        return NumericKind(
            name=dtype.name,
            is_integer=True,
            is_signed=dtype.kind == "i",
            lowest=int(info.min),
            max=int(info.max),
        )

    if dtype.kind == "f":
        finfo = np.finfo(dtype)
        return NumericKind(
            name=dtype.name,
            is_integer=False,
            is_signed=True,
            lowest=float(finfo.min),
            max=float(finfo.max),
        )

    raise InvalidArgumentError(f"Unsupported numeric kind: {dtype.name}")


# =============================================================================
# СТАНДАРТНЫЕ ВИДЫ
# =============================================================================

INT8: Final[NumericKind] = numeric_kind(np.int8)
INT16: Final[NumericKind] = numeric_kind(np.int16)
INT32: Final[NumericKind] = numeric_kind(np.int32)
INT64: Final[NumericKind] = numeric_kind(np.int64)
UINT8: Final[NumericKind] = numeric_kind(np.uint8)
UINT16: Final[NumericKind] = numeric_kind(np.uint16)
UINT32: Final[NumericKind] = numeric_kind(np.uint32)
UINT64: Final[NumericKind] = numeric_kind(np.uint64)
FLOAT32: Final[NumericKind] = numeric_kind(np.float32)
FLOAT64: Final[NumericKind] = numeric_kind(np.float64)


def numeric_kind_of(value: Any) -> NumericKind:
    """
    Вывод числового вида по значению.

    - numpy scalar → его dtype
    - Python int → INT64
    - Python float → FLOAT64

    Raises:
        InvalidArgumentError: Для bool и нечисловых значений

    Examples:
        >>> numeric_kind_of(3).name
        'int64'
        >>> numeric_kind_of(np.float32(0.5)).name
        'float32'
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(f"Boolean is not a numeric value: {value!r}")
    if isinstance(value, np.generic):
        return numeric_kind(value.dtype)
    if isinstance(value, int):
        return INT64
    if isinstance(value, float):
        return FLOAT64
    raise InvalidArgumentError(f"Not a numeric value: {value!r}")

"""
Domain value objects.

NumericKind — числовой вид для generic safe-арифметики.
Interval — дескриптор интервала для валидации.
"""

from dp_numerics.core.domain.interval import Interval
from dp_numerics.core.domain.numeric_kind import (
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    NumericKind,
    numeric_kind,
    numeric_kind_of,
)

__all__ = [
    # Interval
    "Interval",
    # Numeric kinds
    "NumericKind",
    "numeric_kind",
    "numeric_kind_of",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "FLOAT32",
    "FLOAT64",
]

"""
Contracts — error taxonomy и валидаторы предусловий.

Используются на каждой публичной точке конфигурации DP-механизма.
"""

from dp_numerics.core.contracts.errors import (
    DomainEdgeError,
    ErrorKind,
    InvalidArgumentError,
    NumericsError,
)
from dp_numerics.core.contracts.formatting import format_number
from dp_numerics.core.contracts.validators import (
    interval_notation,
    is_in_interval,
    validate_bounds,
    validate_delta,
    validate_epsilon,
    validate_is_finite,
    validate_is_finite_and_non_negative,
    validate_is_finite_and_positive,
    validate_is_greater_than,
    validate_is_greater_than_or_equal_to,
    validate_is_in_interval,
    validate_is_lesser_than,
    validate_is_lesser_than_or_equal_to,
    validate_is_non_negative,
    validate_is_positive,
    validate_is_set,
    validate_max_contributions_per_partition,
    validate_max_partitions_contributed,
)

__all__ = [
    # Errors
    "DomainEdgeError",
    "ErrorKind",
    "InvalidArgumentError",
    "NumericsError",
    # Formatting
    "format_number",
    # Validators: базовые
    "validate_is_set",
    "validate_is_positive",
    "validate_is_non_negative",
    "validate_is_finite",
    "validate_is_finite_and_positive",
    "validate_is_finite_and_non_negative",
    # Validators: сравнения
    "validate_is_lesser_than",
    "validate_is_lesser_than_or_equal_to",
    "validate_is_greater_than",
    "validate_is_greater_than_or_equal_to",
    # Validators: интервалы
    "interval_notation",
    "is_in_interval",
    "validate_is_in_interval",
    # Validators: конфигурация механизмов
    "validate_epsilon",
    "validate_delta",
    "validate_bounds",
    "validate_max_partitions_contributed",
    "validate_max_contributions_per_partition",
]

"""
dp-numerics — числовой фундамент библиотеки дифференциальной приватности.

Overflow-safe арифметика, аппроксимации распределений, snapping на сетку
степеней двойки и контракты валидации параметров. Только чистые функции.
"""

import logging

# Порядок импорта: contracts → domain → math
from dp_numerics.core.contracts import (
    DomainEdgeError,
    ErrorKind,
    InvalidArgumentError,
    NumericsError,
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
from dp_numerics.core.domain import Interval, NumericKind, numeric_kind
from dp_numerics.core.math import (
    SafeResult,
    clamp,
    default_epsilon,
    inverse_error_function,
    mean,
    next_power_of_two,
    order_statistic,
    qnorm,
    round_to_nearest_multiple,
    safe_add,
    safe_cast_from_double,
    safe_square,
    safe_subtract,
    standard_deviation,
    variance,
    vector_filter,
    vector_to_string,
    xor_strings,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DomainEdgeError",
    "ErrorKind",
    "InvalidArgumentError",
    "NumericsError",
    # Domain
    "Interval",
    "NumericKind",
    "numeric_kind",
    # Safe arithmetic
    "SafeResult",
    "clamp",
    "default_epsilon",
    "safe_add",
    "safe_cast_from_double",
    "safe_square",
    "safe_subtract",
    # Quantization
    "next_power_of_two",
    "round_to_nearest_multiple",
    # Distributions
    "inverse_error_function",
    "qnorm",
    # Validation
    "validate_is_set",
    "validate_is_positive",
    "validate_is_non_negative",
    "validate_is_finite",
    "validate_is_finite_and_positive",
    "validate_is_finite_and_non_negative",
    "validate_is_lesser_than",
    "validate_is_lesser_than_or_equal_to",
    "validate_is_greater_than",
    "validate_is_greater_than_or_equal_to",
    "validate_is_in_interval",
    "validate_epsilon",
    "validate_delta",
    "validate_bounds",
    "validate_max_partitions_contributed",
    "validate_max_contributions_per_partition",
    # Vector statistics
    "mean",
    "variance",
    "standard_deviation",
    "order_statistic",
    "vector_filter",
    "vector_to_string",
    # Byte mixing
    "xor_strings",
]

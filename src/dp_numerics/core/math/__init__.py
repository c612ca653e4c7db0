"""
Core math modules для dp-numerics

Математические примитивы DP-библиотеки с гарантией точности и отсутствия
переполнений.
"""

# Numerical Safeguards: overflow-safe арифметика
from dp_numerics.core.math.numerical_safeguards import (
    DEFAULT_EPSILON,
    SafeResult,
    clamp,
    default_epsilon,
    safe_add,
    safe_cast_from_double,
    safe_square,
    safe_subtract,
)

# Quantization: snapping
from dp_numerics.core.math.quantization import (
    is_power_of_two,
    next_power_of_two,
    round_to_nearest_multiple,
)

# Distribution Math: калибровка шума
from dp_numerics.core.math.distributions import (
    INVERSE_ERF_BRANCH_SPLIT,
    INVERSE_ERF_CENTRAL_COEFFS,
    INVERSE_ERF_TAIL_COEFFS,
    QNORM_DENOMINATOR_COEFFS,
    QNORM_NUMERATOR_COEFFS,
    inverse_error_function,
    qnorm,
)

# Vector Statistics
from dp_numerics.core.math.vector_statistics import (
    mean,
    order_statistic,
    standard_deviation,
    variance,
    vector_filter,
    vector_to_string,
)

# Byte Mixing
from dp_numerics.core.math.byte_mixing import xor_strings

__all__ = [
    # Numerical Safeguards
    "DEFAULT_EPSILON",
    "SafeResult",
    "clamp",
    "default_epsilon",
    "safe_add",
    "safe_cast_from_double",
    "safe_square",
    "safe_subtract",
    # Quantization
    "is_power_of_two",
    "next_power_of_two",
    "round_to_nearest_multiple",
    # Distribution Math: Constants
    "INVERSE_ERF_BRANCH_SPLIT",
    "INVERSE_ERF_CENTRAL_COEFFS",
    "INVERSE_ERF_TAIL_COEFFS",
    "QNORM_DENOMINATOR_COEFFS",
    "QNORM_NUMERATOR_COEFFS",
    # Distribution Math: Functions
    "inverse_error_function",
    "qnorm",
    # Vector Statistics
    "mean",
    "order_statistic",
    "standard_deviation",
    "variance",
    "vector_filter",
    "vector_to_string",
    # Byte Mixing
    "xor_strings",
]

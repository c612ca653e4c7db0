"""
Distribution Math — калибровка масштаба шума

Численные аппроксимации для вывода масштаба шума из (epsilon, delta):
- inverse_error_function: обратная функция ошибок erf^-1 на [-1, 1]
- qnorm: квантильная функция нормального распределения на (0, 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Фиксированное число арифметических шагов (Horner), без итераций
2. Граничные аргументы отклоняются явно (DomainEdgeError), никакого clamp
3. Точность: |erf(erfinv(x)) - x| <= 1e-3; |qnorm(p) - Φ^-1(p)| <= 4.5e-4
"""

import logging
import math
from typing import Final

from dp_numerics.core.contracts.errors import DomainEdgeError
from dp_numerics.core.contracts.validators import (
    validate_is_finite,
    validate_is_finite_and_positive,
    validate_is_set,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОЭФФИЦИЕНТЫ erf^-1 (Giles, single precision)
# =============================================================================

# Порог переключения ветвей по w = -ln((1 - x)(1 + x))
INVERSE_ERF_BRANCH_SPLIT: Final[float] = 5.0

# Центральная ветвь (w < 5): полином от w - 2.5, старший коэффициент первым
INVERSE_ERF_CENTRAL_COEFFS: Final[tuple[float, ...]] = (
    2.81022636e-08,
    3.43273939e-07,
    -3.5233877e-06,
    -4.39150654e-06,
    0.00021858087,
    -0.00125372503,
    -0.00417768164,
    0.246640727,
    1.50140941,
)

# Хвостовая ветвь (w >= 5): полином от sqrt(w) - 3
INVERSE_ERF_TAIL_COEFFS: Final[tuple[float, ...]] = (
    -0.000200214257,
    0.000100950558,
    0.00134934322,
    -0.00367342844,
    0.00573950773,
    -0.0076224613,
    0.00943887047,
    1.00167406,
    2.83297682,
)

# =============================================================================
# КОЭФФИЦИЕНТЫ Φ^-1 (Abramowitz & Stegun 26.2.23, |error| < 4.5e-4)
# =============================================================================

QNORM_NUMERATOR_COEFFS: Final[tuple[float, float, float]] = (2.515517, 0.802853, 0.010328)
QNORM_DENOMINATOR_COEFFS: Final[tuple[float, float, float]] = (1.432788, 0.189269, 0.001308)


def _horner(coefficients: tuple[float, ...], w: float) -> float:
    result = 0.0
    for c in coefficients:
        result = c + result * w
    return result


# =============================================================================
# INVERSE ERROR FUNCTION
# =============================================================================


def inverse_error_function(x: float) -> float:
    """
    Аппроксимация erf^-1(x).

    Граничные значения точные: -1 → -inf, 1 → +inf, 0 → 0.

    Args:
        x: Аргумент из [-1, 1]

    Returns:
        y такое, что erf(y) ≈ x (абсолютная погрешность <= 1e-3)

    Raises:
        DomainEdgeError: Если |x| > 1 или x — NaN

    Examples:
        >>> inverse_error_function(0.0)
        0.0
        >>> inverse_error_function(1.0)
        inf
        >>> round(inverse_error_function(0.5), 3)
        0.477
    """
    if math.isnan(x) or abs(x) > 1:
        logger.debug("inverse error function argument %r outside [-1, 1]", x)
        raise DomainEdgeError(
            f"Inverse error function argument must be in [-1, 1], but is {x}."
        )
    if abs(x) == 1:
        return math.copysign(math.inf, x)

    w = -math.log((1.0 - x) * (1.0 + x))
    if w < INVERSE_ERF_BRANCH_SPLIT:
        p = _horner(INVERSE_ERF_CENTRAL_COEFFS, w - 2.5)
    else:
        p = _horner(INVERSE_ERF_TAIL_COEFFS, math.sqrt(w) - 3.0)
    return p * x


# =============================================================================
# QNORM
# =============================================================================


def _rational_approximation(t: float) -> float:
    c0, c1, c2 = QNORM_NUMERATOR_COEFFS
    d1, d2, d3 = QNORM_DENOMINATOR_COEFFS
    numerator = (c2 * t + c1) * t + c0
    denominator = ((d3 * t + d2) * t + d1) * t + 1.0
    return t - numerator / denominator


def qnorm(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """
    Квантиль нормального распределения N(mu, sigma^2).

    Хвостовая симметрия: считается квантиль для min(p, 1 - p), знак
    восстанавливается по стороне p относительно 0.5.

    Args:
        p: Вероятность из открытого интервала (0, 1)
        mu: Среднее (конечное)
        sigma: Стандартное отклонение (конечное, > 0)

    Returns:
        x такое, что P(X <= x) ≈ p

    Raises:
        DomainEdgeError: Если p <= 0, p >= 1 или NaN
        InvalidArgumentError: Если mu/sigma невалидны

    Examples:
        >>> abs(qnorm(0.95) - 1.6448536269514729) < 4.5e-4
        True
        >>> qnorm(0.0)
        Traceback (most recent call last):
            ...
        dp_numerics.core.contracts.errors.DomainEdgeError: Probability must be between 0 and 1, exclusive.
    """
    if not 0.0 < p < 1.0:
        logger.debug("qnorm probability %r outside (0, 1)", p)
        raise DomainEdgeError("Probability must be between 0 and 1, exclusive.")
    validate_is_set(mu, "Mean")
    validate_is_finite(mu, "Mean")
    validate_is_finite_and_positive(sigma, "Standard deviation")

    t = math.sqrt(-2.0 * math.log(min(p, 1.0 - p)))
    x = _rational_approximation(t)
    if p < 0.5:
        x = -x
    return x * sigma + mu

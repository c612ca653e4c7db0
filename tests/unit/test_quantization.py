"""
Тесты для Quantization

Проверяет:
1. next_power_of_two: точность для степеней двойки, минимальность
2. round_to_nearest_multiple: направленное округление середины к +inf
3. Бит-в-бит точность и идемпотентность для гранулярности 2^k
4. Отказ на невалидных аргументах
"""

import math
import sys

import pytest

from dp_numerics.core.contracts.errors import InvalidArgumentError
from dp_numerics.core.math.quantization import (
    is_power_of_two,
    next_power_of_two,
    round_to_nearest_multiple,
)


# =============================================================================
# NEXT POWER OF TWO
# =============================================================================


class TestNextPowerOfTwo:
    """Тесты next_power_of_two"""

    def test_positive_powers(self) -> None:
        assert next_power_of_two(3.0) == 4.0
        assert next_power_of_two(5.0) == 8.0
        assert next_power_of_two(7.9) == 8.0

    def test_exact_positive_powers(self) -> None:
        assert next_power_of_two(2.0) == 2.0
        assert next_power_of_two(8.0) == 8.0

    def test_one(self) -> None:
        assert next_power_of_two(1.0) == 1.0

    def test_negative_powers(self) -> None:
        assert next_power_of_two(0.4) == 0.5
        assert next_power_of_two(0.2) == 0.25

    def test_exact_negative_powers(self) -> None:
        assert next_power_of_two(0.5) == 0.5
        assert next_power_of_two(0.125) == 0.125

    def test_exact_for_every_power(self) -> None:
        """2^k → 2^k без дрейфа для всего диапазона порядков"""
        for k in range(-1074, 1024):
            x = math.ldexp(1.0, k)
            assert next_power_of_two(x) == x

    def test_strictly_smallest_power_above(self) -> None:
        """Чуть больше 2^k → 2^(k+1)"""
        for k in range(-60, 60):
            x = math.nextafter(math.ldexp(1.0, k), math.inf)
            assert next_power_of_two(x) == math.ldexp(1.0, k + 1)

    def test_just_below_power(self) -> None:
        for k in range(-60, 60):
            x = math.nextafter(math.ldexp(1.0, k), 0.0)
            assert next_power_of_two(x) == math.ldexp(1.0, k)

    def test_above_largest_finite_power(self) -> None:
        """x > 2^1023 без степени двойки над ним в double → +inf"""
        assert next_power_of_two(1.5e308) == math.inf
        assert next_power_of_two(sys.float_info.max) == math.inf
        assert next_power_of_two(math.nextafter(2.0**1023, math.inf)) == math.inf

    def test_largest_finite_power(self) -> None:
        assert next_power_of_two(2.0**1023) == 2.0**1023
        assert next_power_of_two(math.nextafter(2.0**1023, 0.0)) == 2.0**1023

    def test_integer_input(self) -> None:
        assert next_power_of_two(1000) == 1024.0

    @pytest.mark.parametrize("x", [0.0, -1.0, -0.5, math.inf, math.nan])
    def test_invalid_input_rejected(self, x: float) -> None:
        with pytest.raises(InvalidArgumentError, match="must be finite and positive"):
            next_power_of_two(x)


class TestIsPowerOfTwo:
    """Тесты is_power_of_two"""

    def test_powers(self) -> None:
        assert is_power_of_two(1.0)
        assert is_power_of_two(1024.0)
        assert is_power_of_two(2.0**-30)

    def test_non_powers(self) -> None:
        assert not is_power_of_two(3.0)
        assert not is_power_of_two(0.0)
        assert not is_power_of_two(-2.0)
        assert not is_power_of_two(math.inf)
        assert not is_power_of_two(math.nan)


# =============================================================================
# ROUND TO NEAREST MULTIPLE
# =============================================================================


class TestRoundToNearestMultiple:
    """Тесты round_to_nearest_multiple (сравнения точные)"""

    def test_positive_no_ties(self) -> None:
        assert round_to_nearest_multiple(4.9, 2.0) == 4.0
        assert round_to_nearest_multiple(5.1, 2.0) == 6.0

    def test_negative_no_ties(self) -> None:
        assert round_to_nearest_multiple(-4.9, 2.0) == -4.0
        assert round_to_nearest_multiple(-5.1, 2.0) == -6.0

    def test_positive_ties_round_up(self) -> None:
        assert round_to_nearest_multiple(5.0, 2.0) == 6.0
        assert round_to_nearest_multiple(2.5, 1.0) == 3.0

    def test_negative_ties_round_toward_positive_infinity(self) -> None:
        assert round_to_nearest_multiple(-5.0, 2.0) == -4.0
        assert round_to_nearest_multiple(-1.5, 1.0) == -1.0
        assert round_to_nearest_multiple(-0.5, 1.0) == 0.0

    def test_negative_power_of_two_granularity(self) -> None:
        assert round_to_nearest_multiple(0.2078795763, 0.25) == 0.25
        assert round_to_nearest_multiple(0.1, 1.0 / (1 << 10)) == 0.099609375
        assert (
            round_to_nearest_multiple(0.3, 1.0 / (1 << 30))
            == 322122547.0 / (1 << 30)
        )

    def test_bit_exact_for_negative_power(self) -> None:
        result = round_to_nearest_multiple(0.1, 1.0 / (1 << 10))
        assert result.hex() == (102.0 / 1024).hex()

    def test_idempotent_and_on_grid_for_power_of_two(self) -> None:
        """Повторное округление — no-op; результат кратен 2^k"""
        values = [0.1, -0.1, 0.3, -7.77, 123.456, -1e-5, 2.5e7, math.pi, -math.e]
        for k in range(-30, 6):
            granularity = math.ldexp(1.0, k)
            for value in values:
                rounded = round_to_nearest_multiple(value, granularity)
                assert round_to_nearest_multiple(rounded, granularity) == rounded
                assert (rounded / granularity).is_integer()
                assert abs(rounded - value) <= granularity / 2

    def test_multiple_unchanged(self) -> None:
        assert round_to_nearest_multiple(6.0, 2.0) == 6.0
        assert round_to_nearest_multiple(-0.75, 0.25) == -0.75

    def test_non_power_granularity(self) -> None:
        assert round_to_nearest_multiple(7.0, 3.0) == 6.0
        assert round_to_nearest_multiple(8.0, 3.0) == 9.0

    def test_non_finite_value_unchanged(self) -> None:
        assert round_to_nearest_multiple(math.inf, 2.0) == math.inf
        assert round_to_nearest_multiple(-math.inf, 2.0) == -math.inf
        assert math.isnan(round_to_nearest_multiple(math.nan, 2.0))

    @pytest.mark.parametrize("granularity", [0.0, -2.0, math.inf, math.nan])
    def test_invalid_granularity_rejected(self, granularity: float) -> None:
        with pytest.raises(InvalidArgumentError, match="Granularity"):
            round_to_nearest_multiple(5.0, granularity)

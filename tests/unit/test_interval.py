"""
Тесты для Interval (Pydantic модель)

Проверяет:
1. Инварианты конструктора (порядок границ, пустой вырожденный интервал, NaN)
2. Immutability
3. Запись и validate_value с тем же сообщением, что validate_is_in_interval
"""

import math
import re

import pytest
from pydantic import ValidationError

from dp_numerics.core.contracts.errors import InvalidArgumentError
from dp_numerics.core.domain.interval import Interval


class TestIntervalConstruction:
    """Инварианты конструктора"""

    def test_defaults_closed(self) -> None:
        interval = Interval(lower=0.0, upper=1.0)
        assert interval.include_lower is True
        assert interval.include_upper is True

    def test_factories(self) -> None:
        assert Interval.closed(0.0, 1.0).notation() == "[0,1]"
        assert Interval.open(0.0, 1.0).notation() == "(0,1)"

    def test_reversed_bounds_rejected(self) -> None:
        with pytest.raises(ValidationError, match="greater than upper bound"):
            Interval(lower=1.0, upper=0.0)

    def test_empty_singleton_rejected(self) -> None:
        with pytest.raises(ValidationError, match="singleton interval"):
            Interval.open(1.0, 1.0)

    def test_half_open_singleton_allowed(self) -> None:
        interval = Interval(lower=1.0, upper=1.0, include_lower=False)
        assert interval.contains(1.0)

    @pytest.mark.parametrize(
        "include_lower, include_upper", [(False, True), (True, False)]
    )
    def test_half_open_singleton_holds_only_its_point(
        self, include_lower: bool, include_upper: bool
    ) -> None:
        interval = Interval(
            lower=1.0,
            upper=1.0,
            include_lower=include_lower,
            include_upper=include_upper,
        )
        interval.validate_value(1.0, "X")
        assert not interval.contains(math.nextafter(1.0, 0.0))
        assert not interval.contains(math.nextafter(1.0, 2.0))

    def test_nan_bound_rejected(self) -> None:
        with pytest.raises(ValidationError, match="NaN"):
            Interval(lower=math.nan, upper=1.0)

    def test_infinite_bounds_allowed(self) -> None:
        interval = Interval(lower=-math.inf, upper=math.inf)
        assert interval.contains(1e300)

    def test_frozen(self) -> None:
        interval = Interval.closed(0.0, 1.0)
        with pytest.raises(ValidationError):
            interval.lower = -1.0  # type: ignore[misc]


class TestIntervalValidation:
    """notation / validate_value / contains"""

    def test_notation_half_open(self) -> None:
        interval = Interval(lower=0.0, upper=1.0, include_upper=False)
        assert interval.notation() == "[0,1)"

    def test_validate_value_success(self) -> None:
        Interval.closed(0.0, 1.0).validate_value(1.0, "Delta")

    def test_validate_value_message(self) -> None:
        interval = Interval(lower=0.0, upper=1.0, include_upper=False)
        with pytest.raises(
            InvalidArgumentError,
            match=re.escape("Quantile must be in the interval [0,1), but is 1."),
        ):
            interval.validate_value(1.0, "Quantile")

    def test_exclusive_message(self) -> None:
        with pytest.raises(
            InvalidArgumentError,
            match=re.escape("X must be in the exclusive interval (0,1), but is 0."),
        ):
            Interval.open(0.0, 1.0).validate_value(0.0, "X")

    @pytest.mark.parametrize(
        "include_lower, include_upper",
        [(True, True), (True, False), (False, True), (False, False)],
    )
    def test_contains_agrees_with_validate_value(
        self, include_lower: bool, include_upper: bool
    ) -> None:
        interval = Interval(
            lower=-1.0,
            upper=1.0,
            include_lower=include_lower,
            include_upper=include_upper,
        )
        for value in (-2.0, -1.0, -0.5, 0.0, 0.5, 1.0, 2.0, math.nan):
            try:
                interval.validate_value(value, "Value")
                accepted = True
            except InvalidArgumentError:
                accepted = False
            assert interval.contains(value) == accepted

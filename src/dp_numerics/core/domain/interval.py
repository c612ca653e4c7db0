"""
Interval — дескриптор интервала для валидации параметров

Immutable Pydantic модель (lower, upper, include_lower, include_upper).

Инварианты:
- lower <= upper (NaN-границы отклоняются)
- вырожденный интервал (lower == upper) допустим только если хотя бы одна
  граница включена, иначе интервал пуст
"""

import math

from pydantic import BaseModel, Field, field_validator, model_validator

from dp_numerics.core.contracts.validators import (
    interval_notation,
    is_in_interval,
    validate_is_in_interval,
)


class Interval(BaseModel):
    """Интервал вещественной оси с явной включённостью границ."""

    lower: float = Field(..., description="Нижняя граница")
    upper: float = Field(..., description="Верхняя граница")
    include_lower: bool = Field(True, description="Нижняя граница включена")
    include_upper: bool = Field(True, description="Верхняя граница включена")

    model_config = {"frozen": True}  # Immutable

    @field_validator("lower", "upper")
    @classmethod
    def validate_not_nan(cls, v: float) -> float:
        if math.isnan(v):
            raise ValueError("interval bound must not be NaN")
        return v

    @model_validator(mode="after")
    def validate_ordering(self) -> "Interval":
        """Порядок границ и непустота вырожденного интервала."""
        if self.lower > self.upper:
            raise ValueError(
                f"lower bound {self.lower} is greater than upper bound {self.upper}"
            )
        if self.lower == self.upper and not (self.include_lower or self.include_upper):
            raise ValueError(
                "singleton interval requires at least one inclusive bound"
            )
        return self

    @classmethod
    def closed(cls, lower: float, upper: float) -> "Interval":
        return cls(lower=lower, upper=upper, include_lower=True, include_upper=True)

    @classmethod
    def open(cls, lower: float, upper: float) -> "Interval":
        return cls(lower=lower, upper=upper, include_lower=False, include_upper=False)

    def notation(self) -> str:
        """Скобочная запись, например '[0,1)'."""
        return interval_notation(
            self.lower, self.upper, self.include_lower, self.include_upper
        )

    def validate_value(self, value: float, name: str) -> None:
        """
        Проверка value ∈ interval.

        Raises:
            InvalidArgumentError: С тем же сообщением, что validate_is_in_interval
        """
        validate_is_in_interval(
            value, self.lower, self.upper, self.include_lower, self.include_upper, name
        )

    def contains(self, value: float) -> bool:
        return is_in_interval(
            value, self.lower, self.upper, self.include_lower, self.include_upper
        )

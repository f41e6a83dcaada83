"""
Temperature — Модель значения температуры

Immutable Pydantic модель: величина + шкала.
Физическая корректность (>= 0 K) не проверяется при создании,
а сообщается через is_physical().
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.units import (
    TemperatureScale,
    convert_magnitude,
    is_valid_temperature,
)
from src.core.math.numerical_safeguards import (
    EPS_TEMPERATURE_ABS,
    validate_finite,
    within_tolerance,
)


class TemperatureValue(BaseModel):
    """
    Температура в заданной шкале.

    Immutable модель (frozen=True). Все изменения создают новый экземпляр.
    """

    magnitude: float = Field(..., description="Величина в единицах шкалы")
    scale: TemperatureScale = Field(..., description="Шкала (celsius/fahrenheit/kelvin)")

    model_config = {"frozen": True}

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude_finite(cls, v: float) -> float:
        """NaN/Inf не являются температурой ни в одной шкале"""
        return validate_finite(v, "magnitude")

    def to_kelvin(self) -> float:
        """Величина в Кельвинах."""
        return convert_magnitude(self.magnitude, self.scale, TemperatureScale.KELVIN)

    def is_physical(self) -> bool:
        """
        Проверка физической корректности (не ниже абсолютного нуля).

        Returns:
            True если to_kelvin() >= 0
        """
        return is_valid_temperature(self.to_kelvin())

    def is_close(self, other: "TemperatureValue", tol: float = EPS_TEMPERATURE_ABS) -> bool:
        """
        Сравнение двух температур (возможно в разных шкалах) через Кельвины.

        Args:
            other: Другая температура
            tol: Абсолютная толерантность в Кельвинах

        Returns:
            True если |K1 - K2| <= tol
        """
        return within_tolerance(self.to_kelvin(), other.to_kelvin(), tol)


def convert_temperature(
    value: TemperatureValue, target_scale: TemperatureScale
) -> TemperatureValue:
    """
    Конверсия значения температуры в другую шкалу.

    Args:
        value: Исходная температура
        target_scale: Целевая шкала

    Returns:
        Новое значение в target_scale (та же шкала → равное значение)

    Raises:
        ValidationError: Если результат не представим конечным float
            (например, 1e308 °C в °F)
    """
    return TemperatureValue(
        magnitude=convert_magnitude(value.magnitude, value.scale, target_scale),
        scale=target_scale,
    )

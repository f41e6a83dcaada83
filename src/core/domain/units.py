"""
TemperatureUnits — Централизованный модуль конверсии температур

Единственный допустимый способ преобразований между:
- Celsius (°C)
- Fahrenheit (°F)
- Kelvin (K)

ЗАПРЕЩЕНО смешивать шкалы без явного конвертера из этого модуля.

ФОРМУЛЫ:
    °F = °C × 9/5 + 32
    K  = °C + 273.15
    °C = (°F − 32) × 5/9
    °C = K − 273.15

Конверсии определены на всей вещественной прямой и никогда не бросают
исключений. Физическая корректность результата сообщается отдельно
через is_valid_temperature.

Масштаб 9/5 применяется делением до умножения: промежуточный результат
не переполняется, если итог представим во float.
"""

from enum import Enum
from typing import Callable, Dict, Final, Tuple

from src.core.math.numerical_safeguards import EPS_TEMPERATURE_ABS, is_at_or_above


class TemperatureScale(str, Enum):
    """Температурная шкала"""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


# =============================================================================
# КОНСТАНТЫ ШКАЛ
# =============================================================================

# Смещение между Celsius и Kelvin (одинаковый размер градуса)
KELVIN_OFFSET: Final[float] = 273.15

# Смещение нуля Fahrenheit относительно Celsius
FAHRENHEIT_OFFSET: Final[float] = 32.0

# Абсолютный ноль в Кельвинах
ABSOLUTE_ZERO_KELVIN: Final[float] = 0.0

# Допуск для round-trip сравнений температур
TEMPERATURE_TOLERANCE: Final[float] = EPS_TEMPERATURE_ABS


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def celsius_to_fahrenheit(celsius: float) -> float:
    """
    Конверсия: °C → °F

    Examples:
        >>> celsius_to_fahrenheit(100.0)
        212.0
    """
    return celsius / 5.0 * 9.0 + FAHRENHEIT_OFFSET


def celsius_to_kelvin(celsius: float) -> float:
    """
    Конверсия: °C → K

    Смещение Кельвина ПРИБАВЛЯЕТСЯ: шкалы различаются только нулём.

    Examples:
        >>> celsius_to_kelvin(0.0)
        273.15
    """
    return celsius + KELVIN_OFFSET


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """
    Конверсия: °F → °C

    Examples:
        >>> fahrenheit_to_celsius(-40.0)
        -40.0
    """
    return (fahrenheit - FAHRENHEIT_OFFSET) / 9.0 * 5.0


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    """Конверсия: °F → K (через °C)"""
    return celsius_to_kelvin(fahrenheit_to_celsius(fahrenheit))


def kelvin_to_celsius(kelvin: float) -> float:
    """Конверсия: K → °C"""
    return kelvin - KELVIN_OFFSET


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Конверсия: K → °F (через °C)"""
    return celsius_to_fahrenheit(kelvin_to_celsius(kelvin))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_temperature(kelvin: float) -> bool:
    """
    Проверка физической корректности температуры.

    Граница проверяется точно: 0 K допустим, любое отрицательное
    значение (включая -0.01) недопустимо.

    Args:
        kelvin: Температура в Кельвинах

    Returns:
        True если kelvin >= 0
    """
    return is_at_or_above(kelvin, ABSOLUTE_ZERO_KELVIN)


# =============================================================================
# КОНВЕРСИЯ МЕЖДУ ШКАЛАМИ
# =============================================================================


def _identity(value: float) -> float:
    return value


_Converter = Callable[[float], float]

_CONVERTERS: Final[Dict[Tuple[TemperatureScale, TemperatureScale], _Converter]] = {
    (TemperatureScale.CELSIUS, TemperatureScale.CELSIUS): _identity,
    (TemperatureScale.CELSIUS, TemperatureScale.FAHRENHEIT): celsius_to_fahrenheit,
    (TemperatureScale.CELSIUS, TemperatureScale.KELVIN): celsius_to_kelvin,
    (TemperatureScale.FAHRENHEIT, TemperatureScale.CELSIUS): fahrenheit_to_celsius,
    (TemperatureScale.FAHRENHEIT, TemperatureScale.FAHRENHEIT): _identity,
    (TemperatureScale.FAHRENHEIT, TemperatureScale.KELVIN): fahrenheit_to_kelvin,
    (TemperatureScale.KELVIN, TemperatureScale.CELSIUS): kelvin_to_celsius,
    (TemperatureScale.KELVIN, TemperatureScale.FAHRENHEIT): kelvin_to_fahrenheit,
    (TemperatureScale.KELVIN, TemperatureScale.KELVIN): _identity,
}


def convert_magnitude(
    magnitude: float, source: TemperatureScale, target: TemperatureScale
) -> float:
    """
    Конверсия величины из одной шкалы в другую.

    Examples:
        >>> convert_magnitude(32.0, TemperatureScale.FAHRENHEIT, TemperatureScale.CELSIUS)
        0.0
    """
    return _CONVERTERS[(source, target)](magnitude)

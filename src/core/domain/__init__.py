"""
Domain models and value objects.

Contains the temporal value models, the temperature value model and the
converters between their representations.
"""

from src.core.domain.datetime_converter import (
    HIGH_PRECISION,
    LOW_PRECISION,
    NANOS_PER_MILLI,
    InvalidArgument,
    millis_to_nanos,
    nanos_to_millis,
    to_high_precision,
    to_high_precision_date,
    to_high_precision_instant,
    to_low_precision,
    to_low_precision_date,
    to_low_precision_instant,
)
from src.core.domain.temperature import TemperatureValue, convert_temperature
from src.core.domain.temporal import (
    MAX_MILLIS_OF_SECOND,
    MAX_NANOS_OF_SECOND,
    InstantValue,
    LocalDateTimeValue,
    LocalDateValue,
    SubSecondUnit,
)
from src.core.domain.units import (
    ABSOLUTE_ZERO_KELVIN,
    FAHRENHEIT_OFFSET,
    KELVIN_OFFSET,
    TEMPERATURE_TOLERANCE,
    TemperatureScale,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    convert_magnitude,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    is_valid_temperature,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)
from src.core.domain.zoned import ZonedConversionConfig, ZonedTimeBridge

__all__ = [
    # Temporal models
    "SubSecondUnit",
    "LocalDateTimeValue",
    "LocalDateValue",
    "InstantValue",
    "MAX_MILLIS_OF_SECOND",
    "MAX_NANOS_OF_SECOND",
    # DateTime converter
    "NANOS_PER_MILLI",
    "LOW_PRECISION",
    "HIGH_PRECISION",
    "InvalidArgument",
    "millis_to_nanos",
    "nanos_to_millis",
    "to_high_precision",
    "to_low_precision",
    "to_high_precision_date",
    "to_low_precision_date",
    "to_high_precision_instant",
    "to_low_precision_instant",
    # Zoned bridge
    "ZonedConversionConfig",
    "ZonedTimeBridge",
    # Temperature model
    "TemperatureScale",
    "TemperatureValue",
    # Temperature units
    "KELVIN_OFFSET",
    "FAHRENHEIT_OFFSET",
    "ABSOLUTE_ZERO_KELVIN",
    "TEMPERATURE_TOLERANCE",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "fahrenheit_to_celsius",
    "fahrenheit_to_kelvin",
    "kelvin_to_celsius",
    "kelvin_to_fahrenheit",
    "is_valid_temperature",
    "convert_magnitude",
    "convert_temperature",
]

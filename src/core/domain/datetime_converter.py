"""
DateTimeConverter — Конверсия между представлениями даты и времени

Единственный допустимый способ преобразований между:
- LOW precision (дробная часть секунды в миллисекундах, 0..999)
- HIGH precision (дробная часть секунды в наносекундах, 0..999_999_999)

для трёх форм значения: LocalDateTimeValue, LocalDateValue, InstantValue.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. LOW → HIGH: sub_second умножается ровно на NANOS_PER_MILLI (без округления)
2. HIGH → LOW: целочисленное деление на NANOS_PER_MILLI (остаток отбрасывается)
3. Round-trip: to_low_precision(to_high_precision(x)) == x для любого x
4. None на входе → InvalidArgument до любых вычислений
5. Значение другой формы или представления → InvalidArgument
"""

import logging
from typing import Final, Optional, TypeVar

from src.core.domain.temporal import (
    InstantValue,
    LocalDateTimeValue,
    LocalDateValue,
    SubSecondUnit,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Масштаб между миллисекундами и наносекундами
NANOS_PER_MILLI: Final[int] = 1_000_000

LOW_PRECISION: Final[SubSecondUnit] = SubSecondUnit.MILLISECOND
HIGH_PRECISION: Final[SubSecondUnit] = SubSecondUnit.NANOSECOND


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Недопустимый аргумент конверсии.

    Возникает синхронно, если на вход передан None или значение
    в неподходящем представлении. Внутри модуля не перехватывается.
    """

    pass


_T = TypeVar("_T")


def _require(value: Optional[_T], name: str) -> _T:
    if value is None:
        logger.debug("Rejected conversion: %s is None", name)
        raise InvalidArgument(f"{name} must not be None")
    return value


def _require_representation(
    value, expected_type: type, expected: SubSecondUnit, name: str
) -> None:
    if not isinstance(value, expected_type):
        logger.debug(
            "Rejected conversion: %s is %s, expected %s",
            name,
            type(value).__name__,
            expected_type.__name__,
        )
        raise InvalidArgument(
            f"{name} must be {expected_type.__name__}, got {type(value).__name__}"
        )
    if value.unit is not expected:
        logger.debug(
            "Rejected conversion: %s has unit %s, expected %s",
            name,
            value.unit.value,
            expected.value,
        )
        raise InvalidArgument(
            f"{name} must be in {expected.value} representation, got {value.unit.value}"
        )


# =============================================================================
# SCALAR HELPERS
# =============================================================================


def millis_to_nanos(millis: int) -> int:
    """
    Конверсия: миллисекунды → наносекунды

    Examples:
        >>> millis_to_nanos(5)
        5000000
    """
    return _require(millis, "millis") * NANOS_PER_MILLI


def nanos_to_millis(nanos: int) -> int:
    """
    Конверсия: наносекунды → миллисекунды (целочисленное деление)

    Остаток меньше одной миллисекунды отбрасывается без ошибки.

    Examples:
        >>> nanos_to_millis(5_000_000)
        5
        >>> nanos_to_millis(5_999_999)
        5
    """
    return _require(nanos, "nanos") // NANOS_PER_MILLI


# =============================================================================
# LOCAL DATE-TIME
# =============================================================================


def to_high_precision(date_time: Optional[LocalDateTimeValue]) -> LocalDateTimeValue:
    """
    Конверсия: LOW precision date-time → HIGH precision date-time

    Календарные поля и поля времени копируются без изменений,
    sub_second умножается на NANOS_PER_MILLI.

    Args:
        date_time: Значение в MILLISECOND-представлении

    Returns:
        Новое значение в NANOSECOND-представлении

    Raises:
        InvalidArgument: Если date_time is None или не в MILLISECOND-представлении
    """
    source = _require(date_time, "date_time")
    _require_representation(source, LocalDateTimeValue, LOW_PRECISION, "date_time")
    return LocalDateTimeValue(
        unit=HIGH_PRECISION,
        year=source.year,
        month=source.month,
        day=source.day,
        hour=source.hour,
        minute=source.minute,
        second=source.second,
        sub_second=millis_to_nanos(source.sub_second),
    )


def to_low_precision(date_time: Optional[LocalDateTimeValue]) -> LocalDateTimeValue:
    """
    Конверсия: HIGH precision date-time → LOW precision date-time

    sub_second делится нацело на NANOS_PER_MILLI: наносекунды, не кратные
    миллисекунде, усекаются.

    Args:
        date_time: Значение в NANOSECOND-представлении

    Returns:
        Новое значение в MILLISECOND-представлении

    Raises:
        InvalidArgument: Если date_time is None или не в NANOSECOND-представлении
    """
    source = _require(date_time, "date_time")
    _require_representation(source, LocalDateTimeValue, HIGH_PRECISION, "date_time")
    return LocalDateTimeValue(
        unit=LOW_PRECISION,
        year=source.year,
        month=source.month,
        day=source.day,
        hour=source.hour,
        minute=source.minute,
        second=source.second,
        sub_second=nanos_to_millis(source.sub_second),
    )


# =============================================================================
# LOCAL DATE
# =============================================================================


def to_high_precision_date(date: Optional[LocalDateValue]) -> LocalDateValue:
    """Конверсия: LOW precision date → HIGH precision date (копия полей)."""
    source = _require(date, "date")
    _require_representation(source, LocalDateValue, LOW_PRECISION, "date")
    return LocalDateValue(
        unit=HIGH_PRECISION, year=source.year, month=source.month, day=source.day
    )


def to_low_precision_date(date: Optional[LocalDateValue]) -> LocalDateValue:
    """Конверсия: HIGH precision date → LOW precision date (копия полей)."""
    source = _require(date, "date")
    _require_representation(source, LocalDateValue, HIGH_PRECISION, "date")
    return LocalDateValue(
        unit=LOW_PRECISION, year=source.year, month=source.month, day=source.day
    )


# =============================================================================
# INSTANT
# =============================================================================


def to_high_precision_instant(instant: Optional[InstantValue]) -> InstantValue:
    """
    Конверсия: LOW precision instant → HIGH precision instant

    Оба представления хранят epoch milliseconds, конверсия без потерь.
    """
    source = _require(instant, "instant")
    _require_representation(source, InstantValue, LOW_PRECISION, "instant")
    return InstantValue(unit=HIGH_PRECISION, epoch_millis=source.epoch_millis)


def to_low_precision_instant(instant: Optional[InstantValue]) -> InstantValue:
    """Конверсия: HIGH precision instant → LOW precision instant (без потерь)."""
    source = _require(instant, "instant")
    _require_representation(source, InstantValue, HIGH_PRECISION, "instant")
    return InstantValue(unit=LOW_PRECISION, epoch_millis=source.epoch_millis)

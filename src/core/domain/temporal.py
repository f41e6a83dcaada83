"""
Temporal — Модели значений даты и времени

Immutable Pydantic модели для трёх форм временного значения:
- LocalDateTimeValue (дата + время, с дробной частью секунды)
- LocalDateValue (только дата)
- InstantValue (точка на абсолютной шкале, epoch milliseconds)

Единица дробной части секунды (SubSecondUnit) — часть идентичности
представления, а не значения. Одно и то же мгновение 15:30:45.500 имеет
sub_second=500 в MILLISECOND-представлении и sub_second=500_000_000
в NANOSECOND-представлении.
"""

import calendar
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# CONSTANTS
# =============================================================================

# Максимальное значение дробной части секунды для каждой единицы
MAX_MILLIS_OF_SECOND: Final[int] = 999
MAX_NANOS_OF_SECOND: Final[int] = 999_999_999

_NANOS_PER_MICRO: Final[int] = 1_000
_MICROS_PER_MILLI: Final[int] = 1_000

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)


# =============================================================================
# ENUMS
# =============================================================================


class SubSecondUnit(str, Enum):
    """Единица дробной части секунды (тег представления)"""

    MILLISECOND = "millisecond"
    NANOSECOND = "nanosecond"

    @property
    def max_sub_second(self) -> int:
        """Верхняя граница sub_second для данной единицы (включительно)."""
        if self is SubSecondUnit.MILLISECOND:
            return MAX_MILLIS_OF_SECOND
        return MAX_NANOS_OF_SECOND


# =============================================================================
# LOCAL DATE
# =============================================================================


class LocalDateValue(BaseModel):
    """
    Календарная дата без времени и часового пояса.

    Immutable модель (frozen=True). Поле unit только помечает
    представление: дробной части у даты нет.
    """

    unit: SubSecondUnit = Field(..., description="Тег представления")
    year: int = Field(..., ge=1, le=9999, description="Год")
    month: int = Field(..., ge=1, le=12, description="Месяц (1-12)")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True}

    @field_validator("day")
    @classmethod
    def validate_day_in_month(cls, v: int, info) -> int:
        """Проверка, что день существует в данном месяце и году"""
        return _check_day_in_month(v, info)

    @classmethod
    def from_date(cls, value: date, unit: SubSecondUnit) -> "LocalDateValue":
        """Построение из datetime.date."""
        return cls(unit=unit, year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        """Конверсия в datetime.date."""
        return date(self.year, self.month, self.day)


# =============================================================================
# LOCAL DATE-TIME
# =============================================================================


class LocalDateTimeValue(BaseModel):
    """
    Локальные дата и время без часового пояса.

    Immutable модель (frozen=True). Диапазон sub_second зависит от unit:
    - MILLISECOND: 0..999
    - NANOSECOND: 0..999_999_999
    """

    unit: SubSecondUnit = Field(..., description="Единица дробной части секунды")
    year: int = Field(..., ge=1, le=9999, description="Год")
    month: int = Field(..., ge=1, le=12, description="Месяц (1-12)")
    day: int = Field(..., ge=1, le=31, description="День месяца")
    hour: int = Field(..., ge=0, le=23, description="Час (0-23)")
    minute: int = Field(..., ge=0, le=59, description="Минута (0-59)")
    second: int = Field(..., ge=0, le=59, description="Секунда (0-59)")
    sub_second: int = Field(0, ge=0, description="Дробная часть секунды в единицах unit")

    model_config = {"frozen": True}

    @field_validator("day")
    @classmethod
    def validate_day_in_month(cls, v: int, info) -> int:
        """Проверка, что день существует в данном месяце и году"""
        return _check_day_in_month(v, info)

    @field_validator("sub_second")
    @classmethod
    def validate_sub_second_range(cls, v: int, info) -> int:
        """Проверка диапазона sub_second для единицы представления"""
        unit = info.data.get("unit")
        if unit is None:
            return v
        if v > unit.max_sub_second:
            raise ValueError(
                f"sub_second {v} out of range for {unit.value} "
                f"(max {unit.max_sub_second})"
            )
        return v

    @classmethod
    def from_datetime(cls, value: datetime, unit: SubSecondUnit) -> "LocalDateTimeValue":
        """
        Построение из naive datetime.datetime.

        Часовой пояс (если есть) игнорируется: берутся локальные поля.
        Для MILLISECOND микросекунды ниже одной миллисекунды отбрасываются.
        """
        if unit is SubSecondUnit.MILLISECOND:
            sub_second = value.microsecond // _MICROS_PER_MILLI
        else:
            sub_second = value.microsecond * _NANOS_PER_MICRO
        return cls(
            unit=unit,
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            sub_second=sub_second,
        )

    def to_datetime(self) -> datetime:
        """
        Конверсия в naive datetime.datetime.

        datetime хранит микросекунды: наносекунды ниже одной микросекунды
        отбрасываются.
        """
        if self.unit is SubSecondUnit.MILLISECOND:
            microsecond = self.sub_second * _MICROS_PER_MILLI
        else:
            microsecond = self.sub_second // _NANOS_PER_MICRO
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            microsecond,
        )

    def date_part(self) -> LocalDateValue:
        """Дата без времени, в том же представлении."""
        return LocalDateValue(unit=self.unit, year=self.year, month=self.month, day=self.day)


# =============================================================================
# INSTANT
# =============================================================================


class InstantValue(BaseModel):
    """
    Точка на абсолютной временной шкале.

    Оба представления хранят смещение от эпохи (1970-01-01T00:00:00Z)
    с разрешением в миллисекунду. Отрицательные значения — моменты до эпохи.
    """

    unit: SubSecondUnit = Field(..., description="Тег представления")
    epoch_millis: int = Field(..., description="Смещение от эпохи (UTC, миллисекунды)")

    model_config = {"frozen": True}

    @classmethod
    def from_datetime(cls, value: datetime, unit: SubSecondUnit) -> "InstantValue":
        """
        Построение из aware datetime.datetime.

        Raises:
            ValueError: Если datetime без часового пояса (naive)
        """
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("instant requires a timezone-aware datetime")
        delta = value - _EPOCH
        epoch_millis = (
            delta.days * 86_400_000
            + delta.seconds * 1_000
            + delta.microseconds // _MICROS_PER_MILLI
        )
        return cls(unit=unit, epoch_millis=epoch_millis)

    def to_datetime(self) -> datetime:
        """Конверсия в aware datetime.datetime (UTC)."""
        return _EPOCH + timedelta(milliseconds=self.epoch_millis)


# =============================================================================
# HELPERS
# =============================================================================


def _check_day_in_month(day: int, info) -> int:
    year = info.data.get("year")
    month = info.data.get("month")
    if year is None or month is None:
        return day
    days_in_month = calendar.monthrange(year, month)[1]
    if day > days_in_month:
        raise ValueError(f"day {day} out of range for {year:04d}-{month:02d}")
    return day

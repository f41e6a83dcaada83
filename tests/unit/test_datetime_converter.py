"""
Тесты для модуля DateTimeConverter

Проверяет:
1. Точность масштаба миллисекунды ↔ наносекунды (ровно 1_000_000)
2. Round-trip без потерь для всех миллисекунд 0..999
3. Усечение наносекунд, не кратных миллисекунде
4. Копирование календарных полей и полей времени
5. Отказ на None (InvalidArgument) для каждой конверсии
6. Отказ на неподходящее представление
"""

import logging

import pytest

from src.core.domain import (
    NANOS_PER_MILLI,
    InstantValue,
    InvalidArgument,
    LocalDateTimeValue,
    LocalDateValue,
    SubSecondUnit,
    millis_to_nanos,
    nanos_to_millis,
    to_high_precision,
    to_high_precision_date,
    to_high_precision_instant,
    to_low_precision,
    to_low_precision_date,
    to_low_precision_instant,
)


# =============================================================================
# FIXTURES
# =============================================================================


def _low_dt(millis: int = 500) -> LocalDateTimeValue:
    return LocalDateTimeValue(
        unit=SubSecondUnit.MILLISECOND,
        year=2024,
        month=3,
        day=14,
        hour=15,
        minute=30,
        second=45,
        sub_second=millis,
    )


@pytest.fixture
def low_date_time() -> LocalDateTimeValue:
    """2024-03-14T15:30:45.500 в MILLISECOND-представлении"""
    return _low_dt()


@pytest.fixture
def high_date_time() -> LocalDateTimeValue:
    """2024-03-14T15:30:45.500 в NANOSECOND-представлении"""
    return LocalDateTimeValue(
        unit=SubSecondUnit.NANOSECOND,
        year=2024,
        month=3,
        day=14,
        hour=15,
        minute=30,
        second=45,
        sub_second=500_000_000,
    )


# =============================================================================
# SCALAR HELPERS
# =============================================================================


class TestScalarHelpers:
    """Тесты для millis_to_nanos / nanos_to_millis"""

    def test_scale_factor(self) -> None:
        """Масштаб ровно один миллион"""
        assert NANOS_PER_MILLI == 1_000_000

    def test_millis_to_nanos_exact(self) -> None:
        """5 мс → ровно 5_000_000 нс"""
        assert millis_to_nanos(5) == 5_000_000
        assert millis_to_nanos(0) == 0
        assert millis_to_nanos(999) == 999_000_000

    def test_nanos_to_millis_exact(self) -> None:
        """5_000_000 нс → 5 мс"""
        assert nanos_to_millis(5_000_000) == 5

    def test_nanos_to_millis_truncates(self) -> None:
        """Остаток меньше миллисекунды отбрасывается"""
        assert nanos_to_millis(5_999_999) == 5
        assert nanos_to_millis(999_999) == 0

    def test_none_rejected(self) -> None:
        """None отклоняется с InvalidArgument"""
        with pytest.raises(InvalidArgument, match="millis"):
            millis_to_nanos(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgument, match="nanos"):
            nanos_to_millis(None)  # type: ignore[arg-type]


# =============================================================================
# LOCAL DATE-TIME
# =============================================================================


class TestToHighPrecision:
    """Тесты для to_high_precision (MILLISECOND → NANOSECOND)"""

    def test_fields_copied(self, low_date_time: LocalDateTimeValue) -> None:
        """Календарные поля и поля времени копируются без изменений"""
        converted = to_high_precision(low_date_time)
        assert converted.unit == SubSecondUnit.NANOSECOND
        assert (converted.year, converted.month, converted.day) == (2024, 3, 14)
        assert (converted.hour, converted.minute, converted.second) == (15, 30, 45)

    def test_sub_second_scaled(self, low_date_time: LocalDateTimeValue) -> None:
        """500 мс → 500_000_000 нс"""
        converted = to_high_precision(low_date_time)
        assert converted.sub_second == 500_000_000

    def test_five_millis_exact(self) -> None:
        """5 мс → ровно 5_000_000 нс, без приближения"""
        converted = to_high_precision(_low_dt(5))
        assert converted.sub_second == 5_000_000

    @pytest.mark.parametrize("millis", [100, 200, 300, 400, 500])
    def test_multiple_millisecond_values(self, millis: int) -> None:
        """Конверсия нескольких значений миллисекунд"""
        converted = to_high_precision(_low_dt(millis))
        assert converted.sub_second == millis * 1_000_000

    def test_matches_stdlib_datetime(self, low_date_time: LocalDateTimeValue) -> None:
        """Результат совпадает с исходным моментом в datetime"""
        assert to_high_precision(low_date_time).to_datetime() == low_date_time.to_datetime()

    def test_source_unchanged(self, low_date_time: LocalDateTimeValue) -> None:
        """Исходное значение не изменяется"""
        to_high_precision(low_date_time)
        assert low_date_time.sub_second == 500
        assert low_date_time.unit == SubSecondUnit.MILLISECOND


class TestToLowPrecision:
    """Тесты для to_low_precision (NANOSECOND → MILLISECOND)"""

    def test_fields_copied(self, high_date_time: LocalDateTimeValue) -> None:
        """Календарные поля и поля времени копируются без изменений"""
        converted = to_low_precision(high_date_time)
        assert converted.unit == SubSecondUnit.MILLISECOND
        assert (converted.year, converted.month, converted.day) == (2024, 3, 14)
        assert (converted.hour, converted.minute, converted.second) == (15, 30, 45)
        assert converted.sub_second == 500

    def test_sub_millisecond_remainder_truncated(self) -> None:
        """Наносекунды, не кратные миллисекунде, усекаются без ошибки"""
        value = LocalDateTimeValue(
            unit=SubSecondUnit.NANOSECOND,
            year=2024,
            month=3,
            day=14,
            hour=0,
            minute=0,
            second=0,
            sub_second=500_999_999,
        )
        assert to_low_precision(value).sub_second == 500

    def test_max_nanos(self) -> None:
        """999_999_999 нс → 999 мс"""
        value = LocalDateTimeValue(
            unit=SubSecondUnit.NANOSECOND,
            year=2024,
            month=12,
            day=31,
            hour=23,
            minute=59,
            second=59,
            sub_second=999_999_999,
        )
        assert to_low_precision(value).sub_second == 999


class TestRoundTrip:
    """Инвариант: to_low_precision(to_high_precision(x)) == x"""

    def test_round_trip_all_millis(self) -> None:
        """Round-trip без потерь для каждой миллисекунды 0..999"""
        for millis in range(1000):
            original = _low_dt(millis)
            assert to_low_precision(to_high_precision(original)) == original

    def test_round_trip_preserves_millis(self, low_date_time: LocalDateTimeValue) -> None:
        """Миллисекунды сохраняются при round-trip"""
        round_tripped = to_low_precision(to_high_precision(low_date_time))
        assert round_tripped.sub_second == low_date_time.sub_second

    def test_high_to_low_to_high_for_whole_millis(
        self, high_date_time: LocalDateTimeValue
    ) -> None:
        """Для наносекунд, кратных миллисекунде, обратный round-trip тоже точен"""
        assert to_high_precision(to_low_precision(high_date_time)) == high_date_time


# =============================================================================
# LOCAL DATE
# =============================================================================


class TestDateConversions:
    """Тесты для to_high_precision_date / to_low_precision_date"""

    def test_to_high_precision_date(self) -> None:
        """Поля даты копируются, меняется только представление"""
        low = LocalDateValue(unit=SubSecondUnit.MILLISECOND, year=2024, month=2, day=29)
        high = to_high_precision_date(low)
        assert high.unit == SubSecondUnit.NANOSECOND
        assert high.to_date() == low.to_date()

    def test_to_low_precision_date(self) -> None:
        high = LocalDateValue(unit=SubSecondUnit.NANOSECOND, year=1999, month=12, day=31)
        low = to_low_precision_date(high)
        assert low.unit == SubSecondUnit.MILLISECOND
        assert (low.year, low.month, low.day) == (1999, 12, 31)

    def test_date_round_trip(self) -> None:
        low = LocalDateValue(unit=SubSecondUnit.MILLISECOND, year=2000, month=1, day=1)
        assert to_low_precision_date(to_high_precision_date(low)) == low


# =============================================================================
# INSTANT
# =============================================================================


class TestInstantConversions:
    """Тесты для to_high_precision_instant / to_low_precision_instant"""

    def test_to_high_precision_instant(self) -> None:
        """Epoch milliseconds копируются без потерь"""
        low = InstantValue(unit=SubSecondUnit.MILLISECOND, epoch_millis=1_710_430_245_500)
        high = to_high_precision_instant(low)
        assert high.unit == SubSecondUnit.NANOSECOND
        assert high.epoch_millis == 1_710_430_245_500

    def test_to_low_precision_instant(self) -> None:
        high = InstantValue(unit=SubSecondUnit.NANOSECOND, epoch_millis=42)
        low = to_low_precision_instant(high)
        assert low.unit == SubSecondUnit.MILLISECOND
        assert low.epoch_millis == 42

    def test_pre_epoch_instant(self) -> None:
        """Моменты до эпохи (отрицательное смещение) сохраняются"""
        low = InstantValue(unit=SubSecondUnit.MILLISECOND, epoch_millis=-1)
        assert to_low_precision_instant(to_high_precision_instant(low)) == low


# =============================================================================
# ERROR HANDLING
# =============================================================================


ALL_CONVERSIONS = [
    to_high_precision,
    to_low_precision,
    to_high_precision_date,
    to_low_precision_date,
    to_high_precision_instant,
    to_low_precision_instant,
]


class TestInvalidArgument:
    """Тесты отказа на недопустимых аргументах"""

    @pytest.mark.parametrize("conversion", ALL_CONVERSIONS, ids=lambda f: f.__name__)
    def test_none_rejected(self, conversion) -> None:
        """Каждая конверсия отклоняет None"""
        with pytest.raises(InvalidArgument, match="must not be None"):
            conversion(None)

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgument совместим с ValueError"""
        with pytest.raises(ValueError):
            to_high_precision(None)

    def test_wrong_representation_rejected_high(
        self, high_date_time: LocalDateTimeValue
    ) -> None:
        """NANOSECOND-значение нельзя повышать повторно"""
        with pytest.raises(InvalidArgument, match="millisecond representation"):
            to_high_precision(high_date_time)

    def test_wrong_representation_rejected_low(
        self, low_date_time: LocalDateTimeValue
    ) -> None:
        """MILLISECOND-значение нельзя понижать повторно"""
        with pytest.raises(InvalidArgument, match="nanosecond representation"):
            to_low_precision(low_date_time)

    def test_wrong_representation_rejected_date_and_instant(self) -> None:
        high_date = LocalDateValue(unit=SubSecondUnit.NANOSECOND, year=2024, month=1, day=1)
        low_instant = InstantValue(unit=SubSecondUnit.MILLISECOND, epoch_millis=0)
        with pytest.raises(InvalidArgument):
            to_high_precision_date(high_date)
        with pytest.raises(InvalidArgument):
            to_low_precision_instant(low_instant)

    def test_wrong_shape_rejected(self) -> None:
        """Дата вместо даты-времени и instant вместо даты отклоняются"""
        date = LocalDateValue(unit=SubSecondUnit.MILLISECOND, year=2024, month=1, day=1)
        instant = InstantValue(unit=SubSecondUnit.MILLISECOND, epoch_millis=0)
        with pytest.raises(InvalidArgument, match="date_time must be LocalDateTimeValue"):
            to_high_precision(date)
        with pytest.raises(InvalidArgument, match="date must be LocalDateValue"):
            to_high_precision_date(instant)
        with pytest.raises(InvalidArgument, match="instant must be InstantValue"):
            to_high_precision_instant(date)

    def test_wrong_shape_rejected_low(self, high_date_time: LocalDateTimeValue) -> None:
        with pytest.raises(InvalidArgument, match="got LocalDateTimeValue"):
            to_low_precision_date(high_date_time)

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отказ записывается в лог на уровне DEBUG"""
        caplog.set_level(logging.DEBUG, logger="src.core.domain.datetime_converter")
        with pytest.raises(InvalidArgument):
            to_low_precision(None)
        assert "date_time is None" in caplog.text

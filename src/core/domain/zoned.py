"""
ZonedTimeBridge — Перевод между InstantValue и LocalDateTimeValue

Instant — точка на абсолютной шкале, LocalDateTime — показания часов
в конкретном часовом поясе. Перевод между ними требует зоны:
явной (zone_id) или зоны по умолчанию из конфигурации.

Порядок:
1. Проверка аргументов (None → InvalidArgument)
2. Разрешение зоны (неизвестный id → InvalidArgument)
3. Перевод через aware datetime
"""

import logging
from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.core.domain.datetime_converter import InvalidArgument
from src.core.domain.temporal import InstantValue, LocalDateTimeValue, SubSecondUnit

logger = logging.getLogger(__name__)

UTC_ZONE_ID = "UTC"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ZonedConversionConfig:
    """Конфигурация перевода instant ↔ local date-time.

    Зона по умолчанию используется, когда zone_id не передан явно.
    """

    default_zone_id: str = UTC_ZONE_ID


# =============================================================================
# BRIDGE
# =============================================================================


class ZonedTimeBridge:
    """Перевод между абсолютным временем и локальными показаниями часов."""

    def __init__(self, config: ZonedConversionConfig | None = None):
        """Инициализация bridge.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ZonedConversionConfig()

    def resolve_zone(self, zone_id: Optional[str] = None) -> tzinfo:
        """
        Разрешение идентификатора зоны.

        Args:
            zone_id: IANA идентификатор (например, 'Europe/Berlin'),
                None → config.default_zone_id

        Returns:
            tzinfo для зоны

        Raises:
            InvalidArgument: Если зона неизвестна
        """
        effective_id = zone_id if zone_id is not None else self.config.default_zone_id
        if not effective_id.strip():
            logger.debug("Rejected blank zone id %r", effective_id)
            raise InvalidArgument(f"Unknown zone id: {effective_id!r}")
        if effective_id == UTC_ZONE_ID:
            return timezone.utc
        try:
            return ZoneInfo(effective_id)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.debug("Unknown zone id %r: %s", effective_id, e)
            raise InvalidArgument(f"Unknown zone id: {effective_id!r}") from e

    def to_local_date_time(
        self,
        instant: Optional[InstantValue],
        unit: Optional[SubSecondUnit] = None,
        zone_id: Optional[str] = None,
    ) -> LocalDateTimeValue:
        """
        Конверсия: InstantValue → LocalDateTimeValue в зоне.

        Args:
            instant: Точка на абсолютной шкале
            unit: Представление результата (None → instant.unit)
            zone_id: Зона (None → зона по умолчанию)

        Raises:
            InvalidArgument: Если instant is None или зона неизвестна
        """
        if instant is None:
            logger.debug("Rejected zoned conversion: instant is None")
            raise InvalidArgument("instant must not be None")

        zone = self.resolve_zone(zone_id)
        local = instant.to_datetime().astimezone(zone)
        return LocalDateTimeValue.from_datetime(local, unit or instant.unit)

    def to_instant(
        self,
        date_time: Optional[LocalDateTimeValue],
        zone_id: Optional[str] = None,
    ) -> InstantValue:
        """
        Конверсия: LocalDateTimeValue в зоне → InstantValue.

        Представление сохраняется. Наносекунды ниже одной миллисекунды
        отбрасываются (instant хранит миллисекунды).

        Raises:
            InvalidArgument: Если date_time is None или зона неизвестна
        """
        if date_time is None:
            logger.debug("Rejected zoned conversion: date_time is None")
            raise InvalidArgument("date_time must not be None")

        zone = self.resolve_zone(zone_id)
        aware = date_time.to_datetime().replace(tzinfo=zone)
        return InstantValue.from_datetime(aware, date_time.unit)

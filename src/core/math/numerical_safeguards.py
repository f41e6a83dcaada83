"""
Numerical Safeguards — Float Primitives для температурных конверсий

Модуль обеспечивает корректное сравнение и проверку float значений,
которые возникают при переводе температур между шкалами:
- Проверка валидности float (не NaN, не Inf)
- Сравнение с абсолютной толерантностью (для round-trip инвариантов)
- Сравнение с порогом без толерантности (граница абсолютного нуля)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Граничные проверки (>= 0) выполняются точно, без epsilon
2. Round-trip сравнения используют абсолютную толерантность
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения температур (любая шкала)
# Покрывает накопленную ошибку округления при цепочке конверсий C → K → F → C
EPS_TEMPERATURE_ABS: Final[float] = 0.01


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ValueError: Если value равен NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite float (not NaN/Inf), got {value}")
    return value


# =============================================================================
# СРАВНЕНИЯ FLOAT
# =============================================================================


def within_tolerance(a: float, b: float, tol: float = EPS_TEMPERATURE_ABS) -> bool:
    """
    Проверка, что два значения отличаются не более чем на tol.

    Используется для round-trip инвариантов температурных конверсий.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_TEMPERATURE_ABS)

    Returns:
        True если abs(a - b) <= tol

    Raises:
        ValueError: Если tol отрицательный

    Examples:
        >>> within_tolerance(50.0, 50.005)
        True
        >>> within_tolerance(50.0, 50.02)
        False
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")
    return abs(a - b) <= tol


def is_at_or_above(value: float, threshold: float) -> bool:
    """
    Точная проверка value >= threshold (без epsilon).

    NaN никогда не проходит проверку.
    """
    return value >= threshold

"""
Core math modules

Float-примитивы, общие для всех конверсий.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_TEMPERATURE_ABS,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    # Comparisons
    is_at_or_above,
    within_tolerance,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_TEMPERATURE_ABS",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards — Comparisons
    "is_at_or_above",
    "within_tolerance",
]

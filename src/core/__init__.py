from src.core.enums import AngleUnit, FloatPrecision
from src.core.angle_constants import AngleConstants, ANGLE_CONSTANTS
from src.core.exceptions import (
    AngleException,
    AngleSerializationError,
    UnsupportedPrecisionError,
)

__all__ = [
    "AngleUnit",
    "FloatPrecision",
    "AngleConstants",
    "ANGLE_CONSTANTS",
    "AngleException",
    "AngleSerializationError",
    "UnsupportedPrecisionError",
]

"""Unit-tagged angle values: degrees and radians that cannot be confused."""

from src.core import AngleUnit, FloatPrecision, AngleException, AngleSerializationError
from src.components.angle import Angle, min_dist, asin, acos, atan, atan2, mean_angle
from src.models import AnglePayload

__all__ = [
    "Angle",
    "AngleUnit",
    "FloatPrecision",
    "AnglePayload",
    "AngleException",
    "AngleSerializationError",
    "min_dist",
    "asin",
    "acos",
    "atan",
    "atan2",
    "mean_angle",
]

from enum import Enum
from typing import Any, Type

import numpy as np


class AngleUnit(str, Enum):
    """Angle measurement units (closed set: every angle is one or the other)"""
    DEGREES = "deg"
    RADIANS = "rad"

    @property
    def symbol(self) -> str:
        """Suffix used when an angle is displayed"""
        if self is AngleUnit.RADIANS:
            return "rad"
        return "°"


class FloatPrecision(str, Enum):
    """Magnitude precisions preserved across serialization"""
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> Type[np.floating]:
        """Get the numpy scalar type for this precision"""
        if self is FloatPrecision.FLOAT32:
            return np.float32
        return np.float64

    @classmethod
    def from_value(cls, value: Any) -> "FloatPrecision":
        """
        Detect the precision of a scalar magnitude

        Python floats and ints are double precision.

        Args:
            value: Scalar magnitude

        Returns:
            Matching FloatPrecision

        Raises:
            ValueError: If value is not a float32/float64-compatible scalar
        """
        if isinstance(value, np.generic):
            name = np.dtype(type(value)).name
            return cls(name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.FLOAT64
        raise ValueError(f"Unsupported magnitude type: {type(value).__name__}")

import math
from typing import Any, Callable

import numpy as np


class FloatOps:
    """
    Scalar float helpers shared by the angle type

    Magnitudes may be Python floats or numpy float scalars. Results keep the
    operands' precision, and Python-only operands give Python floats back.
    IEEE-754 propagation is silent: division by zero gives inf, invalid
    operations give NaN, nothing raises or warns.
    """

    @classmethod
    def is_builtin(cls, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, np.generic)

    @classmethod
    def apply(cls, ufunc: Callable[..., Any], *operands: Any) -> Any:
        """
        Evaluate a numpy ufunc on scalar magnitudes

        Args:
            ufunc: numpy ufunc (np.add, np.sin, ...)
            operands: Scalar magnitudes

        Returns:
            Python float if every operand is a Python number, otherwise the
            numpy scalar produced by the ufunc
        """
        with np.errstate(all="ignore"):
            result = ufunc(*operands)
        if all(cls.is_builtin(op) for op in operands):
            return float(result)
        return result

    @classmethod
    def cast(cls, value: Any, like: Any) -> Any:
        """Convert value to the scalar type of like"""
        if isinstance(like, np.floating):
            return type(like)(value)
        return float(value)

    @classmethod
    def to_radians(cls, degrees: Any) -> Any:
        half_turns = cls.apply(np.divide, degrees, cls.cast(180.0, degrees))
        return cls.apply(np.multiply, half_turns, cls.cast(math.pi, degrees))

    @classmethod
    def to_degrees(cls, radians: Any) -> Any:
        half_turns = cls.apply(np.divide, radians, cls.cast(math.pi, radians))
        return cls.apply(np.multiply, half_turns, cls.cast(180.0, radians))

    @classmethod
    def remainder(cls, value: Any, modulus: float) -> Any:
        # Sign follows the modulus, so a positive modulus gives [0, modulus]
        return cls.apply(np.remainder, value, cls.cast(modulus, value))

    @classmethod
    def divide(cls, value: Any, divisor: Any) -> Any:
        return cls.apply(np.divide, value, divisor)

    @classmethod
    def is_nan(cls, value: Any) -> bool:
        return bool(np.isnan(value))

    @classmethod
    def is_sign_negative(cls, value: Any) -> bool:
        """True for negative values including -0.0, False for NaN"""
        return bool(np.signbit(value)) and not cls.is_nan(value)

    @classmethod
    def is_sign_positive(cls, value: Any) -> bool:
        """True for positive values including +0.0, False for NaN"""
        return not bool(np.signbit(value)) and not cls.is_nan(value)

    @classmethod
    def signum(cls, value: Any) -> Any:
        """
        Sign of a magnitude as a number of the same type

        Returns:
            1.0 for positive values and +0.0, -1.0 for negative values and
            -0.0, NaN for NaN
        """
        if cls.is_nan(value):
            return value
        return cls.apply(np.copysign, cls.cast(1.0, value), value)

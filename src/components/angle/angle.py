"""
Angle value type.

An Angle is a magnitude tagged with its unit, degrees or radians. The unit
is never implicit: conversions are explicit method calls, and values in the
native unit come back exactly as they were stored. No range is enforced at
construction; normalization is a separate, opt-in operation.
"""
import math
import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, SupportsFloat, Tuple, Type, TypeVar

import numpy as np

from src.core import ANGLE_CONSTANTS, AngleUnit
from src.components.angle.float_ops import FloatOps
from src.models.angle_payload import AnglePayload

T = TypeVar("T", bound=SupportsFloat)


@dataclass(frozen=True, eq=False)
class Angle(Generic[T]):
    """
    An angle stored in degrees or radians (Value Object Pattern)

    Arithmetic convention:
    - Two angles sharing a unit combine on their raw magnitudes and keep
      that unit
    - Mixed units are combined in radians and give a radian angle
    - Scaling by a number keeps the angle's unit
    """
    value: T
    unit: AngleUnit

    # Make numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_degrees(cls, value: T) -> "Angle[T]":
        """Tag a magnitude as degrees"""
        return cls(value, AngleUnit.DEGREES)

    @classmethod
    def from_radians(cls, value: T) -> "Angle[T]":
        """Tag a magnitude as radians"""
        return cls(value, AngleUnit.RADIANS)

    @classmethod
    def zero(cls, dtype: Type = float) -> "Angle":
        return cls.from_radians(dtype(0.0))

    @classmethod
    def eighth_turn(cls, dtype: Type = float) -> "Angle":
        return cls.from_degrees(dtype(ANGLE_CONSTANTS.EIGHTH_TURN_DEGREES))

    @classmethod
    def quarter_turn(cls, dtype: Type = float) -> "Angle":
        return cls.from_degrees(dtype(ANGLE_CONSTANTS.QUARTER_TURN_DEGREES))

    @classmethod
    def half_turn(cls, dtype: Type = float) -> "Angle":
        return cls.from_degrees(dtype(ANGLE_CONSTANTS.HALF_TURN_DEGREES))

    @classmethod
    def full_turn(cls, dtype: Type = float) -> "Angle":
        return cls.from_degrees(dtype(ANGLE_CONSTANTS.FULL_TURN_DEGREES))

    # ------------------------------------------------------------------
    # Unit conversion
    # ------------------------------------------------------------------
    def in_degrees(self) -> T:
        """
        Get the magnitude in degrees

        A degree angle returns its stored value unchanged, without a round
        trip through radians.
        """
        if self.unit is AngleUnit.RADIANS:
            return FloatOps.to_degrees(self.value)
        return self.value

    def in_radians(self) -> T:
        """Get the magnitude in radians (stored value if already radians)"""
        if self.unit is AngleUnit.RADIANS:
            return self.value
        return FloatOps.to_radians(self.value)

    def to_degrees(self) -> "Angle[T]":
        if self.unit is AngleUnit.DEGREES:
            return self
        return Angle.from_degrees(self.in_degrees())

    def to_radians(self) -> "Angle[T]":
        if self.unit is AngleUnit.RADIANS:
            return self
        return Angle.from_radians(self.in_radians())

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------
    def normalize(self) -> "Angle[T]":
        """
        Map the angle into [0, 360) degrees or [0, 2π) radians

        The unit is preserved. NaN and infinite magnitudes give NaN.

        Returns:
            Normalized angle (self if it is already in range)
        """
        upper = ANGLE_CONSTANTS.full_turn(self.unit)
        if 0 <= self.value < upper:
            return self

        normalized = FloatOps.remainder(self.value, upper)
        # Tiny negative inputs round up to the bound itself
        if normalized >= upper:
            normalized = FloatOps.cast(0.0, normalized)
        return Angle(normalized, self.unit)

    normalized = normalize

    def min_dist(self, other: "Angle") -> "Angle":
        """
        Minimal unsigned distance between two angular positions

        The distance between 350° and 10° is 20°, not 340°.

        Args:
            other: Angle to measure to

        Returns:
            Angle in [0, 180°] (or [0, π] when the units differ)
        """
        a, b = self._common_unit(other)
        unit = a.unit
        diff = FloatOps.apply(np.subtract, a.normalize().value, b.normalize().value)
        dist = FloatOps.apply(np.abs, diff)
        if dist > ANGLE_CONSTANTS.half_turn(unit):
            dist = FloatOps.apply(np.subtract, ANGLE_CONSTANTS.full_turn(unit), dist)
        return Angle(dist, unit)

    # ------------------------------------------------------------------
    # Sign helpers
    # ------------------------------------------------------------------
    def is_positive(self) -> bool:
        return FloatOps.is_sign_positive(self.value)

    def is_negative(self) -> bool:
        return FloatOps.is_sign_negative(self.value)

    def signum(self) -> T:
        return FloatOps.signum(self.value)

    def is_zero(self) -> bool:
        return bool(self.value == 0)

    def abs(self) -> "Angle[T]":
        return Angle(FloatOps.apply(np.abs, self.value), self.unit)

    # ------------------------------------------------------------------
    # Trigonometry
    # ------------------------------------------------------------------
    def sin(self) -> T:
        return FloatOps.apply(np.sin, self.in_radians())

    def cos(self) -> T:
        return FloatOps.apply(np.cos, self.in_radians())

    def tan(self) -> T:
        return FloatOps.apply(np.tan, self.in_radians())

    def sin_cos(self) -> Tuple[T, T]:
        """Compute (sin, cos) with a single unit conversion"""
        radians = self.in_radians()
        return FloatOps.apply(np.sin, radians), FloatOps.apply(np.cos, radians)

    def sinh(self) -> T:
        return FloatOps.apply(np.sinh, self.in_radians())

    def cosh(self) -> T:
        return FloatOps.apply(np.cosh, self.in_radians())

    def tanh(self) -> T:
        return FloatOps.apply(np.tanh, self.in_radians())

    # ------------------------------------------------------------------
    # Comparison and hashing support
    # ------------------------------------------------------------------
    def _common_unit(self, other: "Angle") -> Tuple["Angle", "Angle"]:
        """Return both angles expressed in one unit"""
        if self.unit is other.unit:
            return self, other
        return self.to_radians(), other.to_radians()

    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented  # type: ignore[return-value]
        a, b = self._common_unit(other)
        return bool(op(a.value, b.value))

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne)

    def __lt__(self, other: "Angle") -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: "Angle") -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: "Angle") -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: "Angle") -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Same conversion as _compare, in the magnitude's own precision
        return hash(float(self.in_radians()))

    def is_close(
        self,
        other: "Angle",
        rel_tol: float = ANGLE_CONSTANTS.CLOSE_REL_TOLERANCE,
        abs_tol: float = ANGLE_CONSTANTS.CLOSE_ABS_TOLERANCE
    ) -> bool:
        """
        Compare two angles in radians within a tolerance

        Args:
            other: Angle to compare with
            rel_tol: Relative tolerance
            abs_tol: Absolute tolerance in radians

        Returns:
            True if the angles are close, False otherwise (always for NaN)

        Raises:
            TypeError: If other is not an Angle
        """
        if not isinstance(other, Angle):
            raise TypeError(f"is_close expects an Angle, got {type(other).__name__}")
        return math.isclose(
            float(self.in_radians()),
            float(other.in_radians()),
            rel_tol=rel_tol,
            abs_tol=abs_tol
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _combine(self, other: "Angle", ufunc: Callable[..., Any]) -> "Angle":
        if self.unit is other.unit:
            return Angle(FloatOps.apply(ufunc, self.value, other.value), self.unit)
        magnitude = FloatOps.apply(ufunc, self.in_radians(), other.in_radians())
        return Angle.from_radians(magnitude)

    def _scale(self, factor: Any, ufunc: Callable[..., Any]) -> "Angle":
        if isinstance(factor, Angle) or not isinstance(factor, numbers.Real):
            return NotImplemented  # type: ignore[return-value]
        return Angle(FloatOps.apply(ufunc, self.value, factor), self.unit)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, np.add)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, np.subtract)

    def __mul__(self, factor: Any) -> "Angle":
        return self._scale(factor, np.multiply)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Any) -> "Angle":
        return self._scale(divisor, np.divide)

    def __neg__(self) -> "Angle[T]":
        return Angle(FloatOps.apply(np.negative, self.value), self.unit)

    def __pos__(self) -> "Angle[T]":
        return self

    def __abs__(self) -> "Angle[T]":
        return self.abs()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_payload(self) -> AnglePayload:
        return AnglePayload.from_angle(self)

    @classmethod
    def from_payload(cls, payload: AnglePayload) -> "Angle":
        return cls(payload.magnitude(), AngleUnit(payload.unit))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format

        Returns:
            {"unit": "deg" | "rad", "value": float, "precision": "float32" | "float64"}
        """
        return self.to_payload().model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Angle":
        """
        Parse dictionary into an Angle

        Raises:
            AngleSerializationError: If the dictionary is not a valid angle
        """
        return cls.from_payload(AnglePayload.parse_dict(data))

    def to_json(self) -> str:
        return self.to_payload().model_dump_json()

    @classmethod
    def from_json(cls, text: str) -> "Angle":
        return cls.from_payload(AnglePayload.parse_json(text))

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{self.value}{self.unit.symbol}"


def min_dist(a: Angle, b: Angle) -> Angle:
    """Minimal unsigned distance between two angular positions"""
    return a.min_dist(b)


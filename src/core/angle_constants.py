"""
Angle Constants

Centralized location for the numeric constants of the angle type.
Turn fractions are kept in degrees, where each one is an exact integer.
"""
import math
from dataclasses import dataclass

from src.core.enums import AngleUnit


@dataclass(frozen=True)
class AngleConstants:
    """
    Immutable angle constants (Immutable Object Pattern)

    All measurements are in their natural units:
    - Degrees for the turn fractions used to build named angles
    - Radians for the radian range bounds
    """

    # Turn fractions in degrees
    FULL_TURN_DEGREES: float = 360.0
    HALF_TURN_DEGREES: float = 180.0
    QUARTER_TURN_DEGREES: float = 90.0
    EIGHTH_TURN_DEGREES: float = 45.0

    # Range bounds in radians
    FULL_TURN_RADIANS: float = 2.0 * math.pi
    HALF_TURN_RADIANS: float = math.pi

    # Default tolerances for Angle.is_close
    CLOSE_REL_TOLERANCE: float = 1e-9
    CLOSE_ABS_TOLERANCE: float = 1e-10

    @classmethod
    def full_turn(cls, unit: AngleUnit) -> float:
        """
        Get the size of a full turn

        Args:
            unit: Unit the size is expressed in

        Returns:
            360.0 for degrees, 2π for radians
        """
        if unit is AngleUnit.RADIANS:
            return cls.FULL_TURN_RADIANS
        return cls.FULL_TURN_DEGREES

    @classmethod
    def half_turn(cls, unit: AngleUnit) -> float:
        """Get the size of half a turn in the given unit"""
        if unit is AngleUnit.RADIANS:
            return cls.HALF_TURN_RADIANS
        return cls.HALF_TURN_DEGREES


# Singleton instance for easy access
ANGLE_CONSTANTS = AngleConstants()

"""
Inverse trigonometry and aggregate helpers returning Angle values.

Every result is a radian angle. asin and acos return None outside their
[-1, 1] domain instead of a NaN angle.
"""
import logging
from typing import Any, Optional, Sequence

import numpy as np

from src.components.angle.angle import Angle
from src.components.angle.float_ops import FloatOps

logger = logging.getLogger(__name__)


def asin(value: Any) -> Optional[Angle]:
    """
    Compute the arcsine of a number

    Returns:
        Angle in [-π/2, π/2] rad, or None if value is outside [-1, 1]
    """
    radians = FloatOps.apply(np.arcsin, value)
    if FloatOps.is_nan(radians):
        logger.debug(f"asin({value}) is outside the domain [-1, 1]")
        return None
    return Angle.from_radians(radians)


def acos(value: Any) -> Optional[Angle]:
    """
    Compute the arccosine of a number

    Returns:
        Angle in [0, π] rad, or None if value is outside [-1, 1]
    """
    radians = FloatOps.apply(np.arccos, value)
    if FloatOps.is_nan(radians):
        logger.debug(f"acos({value}) is outside the domain [-1, 1]")
        return None
    return Angle.from_radians(radians)


def atan(value: Any) -> Angle:
    """Compute the arctangent of a number, in [-π/2, π/2] rad"""
    return Angle.from_radians(FloatOps.apply(np.arctan, value))


def atan2(y: Any, x: Any) -> Angle:
    """Compute the four quadrant arctangent of y and x"""
    return Angle.from_radians(FloatOps.apply(np.arctan2, y, x))


def mean_angle(angles: Sequence[Angle]) -> Angle:
    """
    Compute the approximate circular mean of angles

    Each angle is placed on the unit circle, the cartesian coordinates are
    averaged and converted back with atan2. 20° and 350° average to 5°, not
    185°.

    Args:
        angles: Angles in any mix of units

    Returns:
        Normalized radian angle (NaN for an empty sequence)
    """
    if len(angles) == 0:
        logger.warning("mean_angle called with no angles, result is NaN")
        return Angle.from_radians(float("nan"))

    x = 0.0
    y = 0.0
    for angle in angles:
        sin, cos = angle.sin_cos()
        x = FloatOps.apply(np.add, x, cos)
        y = FloatOps.apply(np.add, y, sin)

    n = len(angles)
    mean = FloatOps.apply(np.arctan2, FloatOps.divide(y, n), FloatOps.divide(x, n))
    return Angle.from_radians(mean).normalize()

"""
Angle module.

Provides the unit-tagged Angle value type and the functions producing or
aggregating angles.
"""

from src.components.angle.float_ops import FloatOps
from src.components.angle.angle import Angle, min_dist
from src.components.angle.inverse_trig import asin, acos, atan, atan2, mean_angle

__all__ = [
    'FloatOps',
    'Angle',
    'min_dist',
    'asin',
    'acos',
    'atan',
    'atan2',
    'mean_angle',
]

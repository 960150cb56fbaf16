"""
Angle Payload Model

Wire representation of an angle for external serialization formats.
Carries the unit tag, the magnitude and the magnitude's precision exactly as
stored: no normalization or unit conversion happens on the way in or out.
"""
import logging
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError

from src.core import AngleUnit, FloatPrecision, AngleSerializationError, UnsupportedPrecisionError

logger = logging.getLogger(__name__)


class AnglePayload(BaseModel):
    """
    Serialized angle model for type safety and validation.

    NaN and infinities are valid magnitudes and are written to JSON as the
    NaN / Infinity constants.
    """
    unit: AngleUnit = Field(..., description="Angle unit: 'deg' or 'rad'")
    value: float = Field(..., description="Magnitude in the given unit")
    precision: FloatPrecision = Field(
        default=FloatPrecision.FLOAT64,
        description="Magnitude precision: 'float32' or 'float64'"
    )

    class Config:
        use_enum_values = True
        validate_default = True
        allow_inf_nan = True
        ser_json_inf_nan = "constants"
        json_schema_extra = {
            "example": {
                "unit": "deg",
                "value": 45.0,
                "precision": "float64"
            }
        }

    @classmethod
    def from_angle(cls, angle: Any) -> "AnglePayload":
        """
        Build a payload from an angle

        Args:
            angle: Angle to encode

        Returns:
            AnglePayload instance

        Raises:
            UnsupportedPrecisionError: If the magnitude is not a float32/float64 scalar
        """
        try:
            precision = FloatPrecision.from_value(angle.value)
        except ValueError:
            raise UnsupportedPrecisionError(type(angle.value).__name__)
        return cls(unit=angle.unit, value=float(angle.value), precision=precision)

    @classmethod
    def parse_dict(cls, data: Dict[str, Any]) -> "AnglePayload":
        """
        Parse dictionary into AnglePayload.

        Raises:
            AngleSerializationError: If the dictionary is not a valid angle
        """
        try:
            payload = cls.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Rejected angle payload {data!r}: {e.error_count()} error(s)")
            raise AngleSerializationError(str(e), payload=data) from e
        logger.debug(f"Decoded angle payload: {payload.value}{AngleUnit(payload.unit).symbol}")
        return payload

    @classmethod
    def parse_json(cls, text: str) -> "AnglePayload":
        """
        Parse a JSON document into AnglePayload.

        Raises:
            AngleSerializationError: If the text is not a valid angle document
        """
        try:
            payload = cls.model_validate_json(text)
        except ValidationError as e:
            logger.warning(f"Rejected angle JSON: {e.error_count()} error(s)")
            raise AngleSerializationError(str(e), payload=text) from e
        logger.debug(f"Decoded angle JSON: {payload.value}{AngleUnit(payload.unit).symbol}")
        return payload

    def magnitude(self) -> Any:
        """Get the magnitude restored to its original precision"""
        precision = FloatPrecision(self.precision)
        if precision is FloatPrecision.FLOAT32:
            return precision.dtype(self.value)
        return self.value

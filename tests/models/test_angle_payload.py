"""Unit tests for the angle serialization hook"""

import json
import math
import struct

import numpy as np
import pytest
from src.components.angle import Angle
from src.core import AngleUnit, AngleSerializationError, UnsupportedPrecisionError
from src.models.angle_payload import AnglePayload


def _bits(value) -> bytes:
    return struct.pack("<d", float(value))


class TestAnglePayload:
    """Tests for AnglePayload model"""

    def test_from_angle(self):
        """Test building a payload from an angle"""
        payload = AnglePayload.from_angle(Angle.from_degrees(45.0))
        assert payload.unit == "deg"
        assert payload.value == 45.0
        assert payload.precision == "float64"

    def test_precision_defaults_to_float64(self):
        """Test a payload without precision decodes as double precision"""
        payload = AnglePayload.parse_dict({"unit": "rad", "value": 1.0})
        assert payload.precision == "float64"
        assert type(payload.magnitude()) is float

    def test_float32_magnitude(self):
        """Test float32 precision restores a float32 magnitude"""
        payload = AnglePayload.parse_dict({"unit": "deg", "value": 0.5, "precision": "float32"})
        assert isinstance(payload.magnitude(), np.float32)

    def test_unsupported_precision(self):
        """Test float16 magnitudes are rejected when encoding"""
        with pytest.raises(UnsupportedPrecisionError) as exc_info:
            AnglePayload.from_angle(Angle.from_degrees(np.float16(1.0)))
        assert exc_info.value.type_name == "float16"
        assert isinstance(exc_info.value, AngleSerializationError)


class TestAngleDictRoundTrip:
    """Tests for Angle.to_dict / Angle.from_dict"""

    def test_to_dict(self):
        """Test dictionary layout"""
        assert Angle.from_radians(1.25).to_dict() == {
            "unit": "rad",
            "value": 1.25,
            "precision": "float64",
        }

    def test_round_trip_is_bit_exact(self):
        """Test variant and magnitude survive a round trip"""
        for angle in (
            Angle.from_degrees(0.1 + 0.2),
            Angle.from_radians(-7.5),
            Angle.from_degrees(1e300),
            Angle.from_radians(5e-324),
        ):
            decoded = Angle.from_dict(angle.to_dict())
            assert decoded.unit is angle.unit
            assert _bits(decoded.value) == _bits(angle.value)

    def test_no_normalization_or_conversion(self):
        """Test out-of-range values keep their unit and magnitude"""
        decoded = Angle.from_dict(Angle.from_degrees(-730.0).to_dict())
        assert decoded.unit is AngleUnit.DEGREES
        assert decoded.value == -730.0

    def test_negative_zero_round_trip(self):
        """Test the sign of zero is kept"""
        decoded = Angle.from_dict(Angle.from_degrees(-0.0).to_dict())
        assert decoded.is_negative()

    def test_non_finite_round_trip(self):
        """Test NaN and infinities round trip"""
        assert math.isnan(Angle.from_dict(Angle.from_degrees(float("nan")).to_dict()).value)
        assert Angle.from_dict(Angle.from_radians(float("-inf")).to_dict()).value == float("-inf")

    def test_float32_round_trip(self):
        """Test float32 magnitudes come back as the same float32"""
        angle = Angle.from_degrees(np.float32(0.1))
        decoded = Angle.from_dict(angle.to_dict())
        assert isinstance(decoded.value, np.float32)
        assert decoded.value == angle.value

    def test_invalid_unit(self):
        """Test unknown units are rejected"""
        with pytest.raises(AngleSerializationError) as exc_info:
            Angle.from_dict({"unit": "grad", "value": 1.0})
        assert exc_info.value.payload == {"unit": "grad", "value": 1.0}

    def test_missing_value(self):
        """Test payloads without a value are rejected"""
        with pytest.raises(AngleSerializationError):
            Angle.from_dict({"unit": "deg"})

    def test_non_numeric_value(self):
        """Test non-numeric magnitudes are rejected"""
        with pytest.raises(AngleSerializationError):
            Angle.from_dict({"unit": "deg", "value": "north"})


class TestAngleJsonRoundTrip:
    """Tests for Angle.to_json / Angle.from_json"""

    def test_to_json(self):
        """Test JSON layout"""
        data = json.loads(Angle.from_degrees(90.0).to_json())
        assert data == {"unit": "deg", "value": 90.0, "precision": "float64"}

    def test_round_trip(self):
        """Test a JSON round trip keeps variant and bits"""
        angle = Angle.from_radians(math.pi / 3)
        decoded = Angle.from_json(angle.to_json())
        assert decoded.unit is AngleUnit.RADIANS
        assert _bits(decoded.value) == _bits(angle.value)

    def test_float32_round_trip(self):
        """Test float32 magnitudes survive JSON"""
        angle = Angle.from_radians(np.float32(2.2))
        decoded = Angle.from_json(angle.to_json())
        assert isinstance(decoded.value, np.float32)
        assert decoded.value == angle.value

    def test_malformed_json(self):
        """Test malformed documents are rejected"""
        with pytest.raises(AngleSerializationError):
            Angle.from_json("{not json")

"""
Custom exceptions for the angle library.

Numeric operations on angles never raise: NaN and infinities propagate the
way IEEE-754 arithmetic defines. The only fallible boundary is decoding
angles from external data, which is what these exceptions describe.
"""

from typing import Any, Optional


class AngleException(Exception):
    """Base exception class for all angle library errors"""
    pass


class AngleSerializationError(AngleException):
    """
    Exception raised when an angle cannot be encoded or decoded.

    Raised for payloads with a missing or unknown unit, a non-numeric value
    or malformed JSON.
    """

    def __init__(self, details: str, payload: Optional[Any] = None):
        """
        Initialize AngleSerializationError.

        Args:
            details: Details about the failure
            payload: The offending payload (optional)
        """
        self.details = details
        self.payload = payload

        message = f"Angle serialization failed: {details}"
        super().__init__(message)


class UnsupportedPrecisionError(AngleSerializationError):
    """Exception raised when a magnitude is neither float32 nor float64"""

    def __init__(self, type_name: str):
        """
        Initialize UnsupportedPrecisionError.

        Args:
            type_name: Name of the unsupported magnitude type
        """
        self.type_name = type_name
        super().__init__(
            f"magnitude type '{type_name}' is not supported, "
            f"expected float32 or float64"
        )

from src.models.angle_payload import AnglePayload

__all__ = [
    "AnglePayload",
]

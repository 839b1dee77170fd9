"""Runtime helpers for the Stormpath Python client"""

from .errors import StormpathError, SerializationError, RequestConstructionError
from .codec import encode_json, decode_json

__all__ = [
    "StormpathError",
    "SerializationError",
    "RequestConstructionError",
    "encode_json",
    "decode_json"
]

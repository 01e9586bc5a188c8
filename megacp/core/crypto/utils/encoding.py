"""Encoding utilities."""
import base64
from typing import Union


class Base64Encoder:
    """Base64 URL-safe encoder/decoder used by the MEGA API."""
    
    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes to Base64 URL-safe without padding."""
        return base64.urlsafe_b64encode(data).decode('ascii').rstrip('=')

    @staticmethod
    def decode(data: Union[str, bytes]) -> bytes:
        """Decodes Base64 URL-safe (with or without padding)."""
        if isinstance(data, bytes):
            data = data.decode('ascii')
        data = data.replace('+', '-').replace('/', '_').rstrip('=')
        return base64.urlsafe_b64decode(data + '=' * (-len(data) % 4))

"""Shared utilities for the crypto module."""
from .encoding import Base64Encoder
from .key_utils import KeyManager

__all__ = [
    'Base64Encoder',
    'KeyManager',
]

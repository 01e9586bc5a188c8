"""Node attribute encryption."""
from .packer import AttributesPacker

__all__ = [
    'AttributesPacker',
]

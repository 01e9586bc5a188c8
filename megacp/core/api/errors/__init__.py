"""MEGA API errors and exceptions."""
from .api_errors import MegaAPIError, APIErrorCodes

__all__ = [
    'MegaAPIError',
    'APIErrorCodes',
]

"""MEGA API transport."""
from .errors import MegaAPIError, APIErrorCodes
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, RetryConfig
from .async_client import AsyncAPIClient

__all__ = [
    'AsyncAPIClient',
    
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'RetryConfig',
    
    # Errors
    'MegaAPIError',
    'APIErrorCodes',
]

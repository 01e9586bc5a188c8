"""
Custom exceptions for MEGA operations.

Copy failures form a closed family keyed by ``category`` so callers (the CLI,
scripts) can branch on a short machine-checkable tag:

- ``args``: conflicting or insufficient flags/arguments
- ``err``: destination can't be resolved or isn't writable
- ``nop``: nothing left to copy after filtering (benign)
- ``api``: the backend rejected the copy request
"""
from typing import Optional


class MegaException(Exception):
    """Base exception for all MEGA-related errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class MegaSessionError(MegaException):
    """Raised when no usable session is available."""
    pass


class MegaDecryptionError(MegaException):
    """Exception raised when decryption of a node key or attributes fails."""
    
    def __init__(
        self,
        message: str,
        node_handle: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        self.node_handle = node_handle
        super().__init__(message, error_code)


class CopyError(MegaException):
    """Base class for copy failures."""
    
    category = 'err'
    
    def __str__(self) -> str:
        return f"[{self.category}] {self.message}"


class CopyArgumentsError(CopyError):
    """Conflicting or insufficient flags or positional arguments."""
    
    category = 'args'


class CopyResolutionError(CopyError):
    """Destination can't be split into folder + name, or isn't a writable folder."""
    
    category = 'err'


class NothingToDoError(CopyError):
    """Every source was dropped while filtering; no request was sent."""
    
    category = 'nop'
    
    def __init__(self, message: str = "Nothing to do!") -> None:
        super().__init__(message)


class CopyBackendError(CopyError):
    """The copy request failed as a whole."""
    
    category = 'api'

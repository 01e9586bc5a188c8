"""
Session storage protocols.

Defines the interface session storage implementations follow.
"""
from typing import Protocol, Optional, runtime_checkable
from .models import SessionData


@runtime_checkable
class SessionStorage(Protocol):
    """
    Protocol for session storage implementations.
    
    Implementations can use SQLite, memory or any other backend.
    """
    
    def load(self) -> Optional[SessionData]:
        """
        Load session data from storage.
        
        Returns:
            SessionData if session exists, None otherwise
        """
        ...
    
    def save(self, data: SessionData) -> None:
        ...
    
    def delete(self) -> None:
        ...
    
    def exists(self) -> bool:
        ...
    
    def close(self) -> None:
        """Close storage connection and release resources."""
        ...

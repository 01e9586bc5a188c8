"""
Session data models.

Contains data classes for session information.
"""
from dataclasses import dataclass, field
from datetime import datetime
import json


@dataclass
class SessionData:
    """
    Data needed to act on behalf of a logged-in account.
    
    Attributes:
        email: User email address
        session_id: MEGA session ID (sid)
        user_id: MEGA user handle, owner id in node ``k`` fields
        master_key: Master encryption key (16 bytes)
        created_at: Session creation timestamp
        updated_at: Last update timestamp
    """
    email: str
    session_id: str
    user_id: str
    master_key: bytes
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    
    def to_dict(self) -> dict:
        return {
            'email': self.email,
            'session_id': self.session_id,
            'user_id': self.user_id,
            'master_key': self.master_key.hex(),
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'SessionData':
        return cls(
            email=data['email'],
            session_id=data['session_id'],
            user_id=data['user_id'],
            master_key=bytes.fromhex(data['master_key']),
            created_at=datetime.fromisoformat(data['created_at']) if data.get('created_at') else datetime.now(),
            updated_at=datetime.fromisoformat(data['updated_at']) if data.get('updated_at') else datetime.now(),
        )
    
    def to_json(self) -> str:
        return json.dumps(self.to_dict())
    
    @classmethod
    def from_json(cls, json_str: str) -> 'SessionData':
        return cls.from_dict(json.loads(json_str))
    
    def is_valid(self) -> bool:
        """
        Check if session data is usable.
        
        Returns:
            True if all required fields are present
        """
        return bool(
            self.session_id and
            self.user_id and
            self.master_key and
            len(self.master_key) == 16
        )
    
    def update_timestamp(self) -> None:
        """Update the updated_at timestamp to now."""
        self.updated_at = datetime.now()

"""Node key decryption."""
import hmac
from typing import Dict, Optional

from ..crypto import AESCrypto, Base64Encoder, KeyManager
from ..logging import get_logger

logger = get_logger(__name__)


class KeyDecryptor:
    """
    Decrypts wrapped node keys from the API's ``k`` field.
    
    The field holds one or more ``id:key`` pairs separated by ``/``. A pair
    whose id is the current user is wrapped with the master key; any other
    id names a share whose key must already be known.
    """
    
    def __init__(self, master_key: bytes, user_id: Optional[str] = None):
        self._master = AESCrypto(master_key)
        self._user_id = user_id
        self._encoder = Base64Encoder()
        self._share_keys: Dict[str, bytes] = {}
    
    @property
    def share_keys(self) -> Dict[str, bytes]:
        return self._share_keys
    
    def add_share_key(self, handle: str, share_key: bytes) -> None:
        self._share_keys[handle] = share_key
    
    def add_share(self, handle: str, ha: str, k: str) -> bool:
        """
        Verifies and stores an owned share key (an ``ok`` entry).
        
        ``ha`` must equal the handle doubled and encrypted with the master
        key, otherwise the entry is rejected.
        
        Returns:
            True if the key was stored
        """
        try:
            expected = self._master.encrypt_ecb((handle + handle).encode('utf-8'))
            if not hmac.compare_digest(self._encoder.decode(ha), expected):
                logger.warning(f"Auth hash does not match for share {handle}, skipping")
                return False
            
            self._share_keys[handle] = self._master.decrypt_ecb(self._encoder.decode(k))
        except ValueError as e:
            logger.warning(f"Invalid share key entry for {handle}: {e}")
            return False
        
        return True
    
    def decrypt_master_wrapped(self, wrapped: str) -> Optional[bytes]:
        """Decrypts a key wrapped directly with the master key (``sk`` fields)."""
        try:
            data = self._encoder.decode(wrapped)
        except ValueError:
            return None
        if len(data) != KeyManager.FOLDER_KEY_SIZE:
            return None
        return self._master.decrypt_ecb(data)
    
    def decrypt_node_key(self, key_str: str) -> Optional[bytes]:
        """
        Decrypts a node's ``k`` field.
        
        Returns:
            The raw node key, or None if no pair can be decrypted
        """
        if not key_str:
            return None
        
        for pair in key_str.split('/'):
            if ':' not in pair:
                continue
            
            owner, encrypted_b64 = pair.split(':', 1)
            
            if owner == self._user_id:
                cipher = self._master
            elif self._share_keys.get(owner):
                cipher = AESCrypto(self._share_keys[owner])
            else:
                continue
            
            try:
                encrypted = self._encoder.decode(encrypted_b64)
            except ValueError:
                continue
            
            if not KeyManager.is_valid_node_key(encrypted):
                continue
            
            return cipher.decrypt_ecb(encrypted)
        
        return None

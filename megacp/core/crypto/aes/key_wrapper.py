"""Node key wrapping under the account master key."""
from .aes_crypto import AESCrypto
from ..utils.encoding import Base64Encoder
from ..utils.key_utils import KeyManager


class KeyWrapper:
    """
    Wraps and unwraps raw node keys with AES-ECB.
    
    A wrapped key is what the API stores in a node's ``k`` field. Wrapping
    the same raw key under the master key lets a new node point at existing
    encrypted content without re-uploading it.
    
    Example:
        >>> wrapper = KeyWrapper(master_key)
        >>> k = wrapper.wrap(node.key_full)
        >>> wrapper.unwrap(k) == node.key_full
        True
    """
    
    def __init__(self, key: bytes):
        self._aes = AESCrypto(key)
        self._encoder = Base64Encoder()
    
    def wrap(self, raw_key: bytes) -> str:
        """Encrypts a raw node key and encodes it for transport."""
        if not KeyManager.is_valid_node_key(raw_key):
            raise ValueError(f"Invalid node key length: {len(raw_key)}")
        return self._encoder.encode(self._aes.encrypt_ecb(raw_key))
    
    def unwrap(self, wrapped: str) -> bytes:
        """Decodes and decrypts a wrapped node key."""
        data = self._encoder.decode(wrapped)
        if not KeyManager.is_valid_node_key(data):
            raise ValueError(f"Invalid wrapped key length: {len(data)}")
        return self._aes.decrypt_ecb(data)

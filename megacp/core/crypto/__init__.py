"""Crypto primitives for node keys and attributes."""
from .utils import Base64Encoder, KeyManager
from .aes import AESCrypto, AESStrategy, AESCBCStrategy, AESECBStrategy, KeyWrapper


def unmerge_key_mac(key: bytes) -> bytes:
    """Unmerges key and MAC."""
    return KeyManager.unmerge_key_mac(key)


def encrypt_key(data_key: bytes, master_key: bytes) -> str:
    """Wraps a node key with the master key."""
    return KeyWrapper(master_key).wrap(data_key)


def decrypt_key(encrypted_key: str, master_key: bytes) -> bytes:
    """Unwraps a node key with the master key."""
    return KeyWrapper(master_key).unwrap(encrypted_key)


__all__ = [
    'Base64Encoder',
    'KeyManager',
    'AESCrypto',
    'AESStrategy',
    'AESCBCStrategy',
    'AESECBStrategy',
    'KeyWrapper',
    'unmerge_key_mac',
    'encrypt_key',
    'decrypt_key',
]

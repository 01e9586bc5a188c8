"""
AES encryption module using Strategy Pattern.
"""
from .strategies import AESStrategy, AESCBCStrategy, AESECBStrategy
from .aes_crypto import AESCrypto
from .key_wrapper import KeyWrapper

__all__ = [
    'AESStrategy',
    'AESCBCStrategy',
    'AESECBStrategy',
    'AESCrypto',
    'KeyWrapper',
]

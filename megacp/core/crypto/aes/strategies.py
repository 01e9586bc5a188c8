"""AES encryption strategies using Strategy Pattern."""
from abc import ABC, abstractmethod
from Crypto.Cipher import AES
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend


class AESStrategy(ABC):
    """Abstract base class for AES encryption strategies."""
    
    @abstractmethod
    def encrypt(self, data: bytes, key: bytes) -> bytes:
        """Encrypts data using the strategy."""
        pass
    
    @abstractmethod
    def decrypt(self, data: bytes, key: bytes) -> bytes:
        """Decrypts data using the strategy."""
        pass


class AESCBCStrategy(AESStrategy):
    """AES-CBC with a zero IV, as used for node attributes."""
    
    def __init__(self, iv: bytes = None):
        self.iv = iv or (b'\0' * 16)
    
    def encrypt(self, data: bytes, key: bytes) -> bytes:
        cipher = AES.new(key, AES.MODE_CBC, self.iv)
        return cipher.encrypt(data)
    
    def decrypt(self, data: bytes, key: bytes) -> bytes:
        cipher = AES.new(key, AES.MODE_CBC, self.iv)
        return cipher.decrypt(data)


class AESECBStrategy(AESStrategy):
    """AES-ECB strategy, used to wrap node and share keys."""
    
    def _cipher(self, key: bytes) -> Cipher:
        return Cipher(
            algorithms.AES(key),
            modes.ECB(),
            backend=default_backend()
        )
    
    def encrypt(self, data: bytes, key: bytes) -> bytes:
        encryptor = self._cipher(key).encryptor()
        return encryptor.update(data) + encryptor.finalize()
    
    def decrypt(self, data: bytes, key: bytes) -> bytes:
        decryptor = self._cipher(key).decryptor()
        return decryptor.update(data) + decryptor.finalize()

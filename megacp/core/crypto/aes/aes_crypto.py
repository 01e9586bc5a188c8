"""AES crypto class using Strategy Pattern."""
from .strategies import AESStrategy, AESCBCStrategy, AESECBStrategy


class AESCrypto:
    """AES encryption bound to one key (usually the account master key)."""
    
    def __init__(self, key: bytes, strategy: AESStrategy = None):
        """Initializes AES crypto with a key and optional CBC strategy."""
        if not key:
            raise ValueError("Key cannot be empty")
        self.key = key
        self.strategy = strategy or AESCBCStrategy()
        self._ecb = AESECBStrategy()
    
    def encrypt_cbc(self, data: bytes) -> bytes:
        return self.strategy.encrypt(data, self.key)
    
    def decrypt_cbc(self, data: bytes) -> bytes:
        return self.strategy.decrypt(data, self.key)
    
    def encrypt_ecb(self, data: bytes) -> bytes:
        return self._ecb.encrypt(data, self.key)
    
    def decrypt_ecb(self, data: bytes) -> bytes:
        return self._ecb.decrypt(data, self.key)

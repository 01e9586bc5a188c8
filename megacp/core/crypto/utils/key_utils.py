"""Key management utilities."""


class KeyManager:
    """
    Helpers for MEGA node keys.
    
    Folder keys are 16 bytes. File keys travel as 32 bytes where the first
    half is the AES key XORed with the second half (nonce + MAC).
    """
    
    FOLDER_KEY_SIZE = 16
    FILE_KEY_SIZE = 32
    
    @staticmethod
    def unmerge_key_mac(merged_key: bytes) -> bytes:
        """Separates key and MAC from Mega's combined format."""
        new_key = bytearray(32)
        copy_len = min(len(merged_key), 32)
        new_key[:copy_len] = merged_key[:copy_len]
        
        for i in range(16):
            new_key[i] = new_key[i] ^ new_key[16 + i]
        
        return bytes(new_key)
    
    @classmethod
    def attribute_key(cls, full_key: bytes) -> bytes:
        """
        Gets the 16-byte AES key used for a node's attributes.
        
        For 32-byte file keys the two halves are XORed, folder keys are
        used as-is.
        """
        if len(full_key) >= cls.FILE_KEY_SIZE:
            return cls.unmerge_key_mac(full_key)[:16]
        return full_key[:16]
    
    @classmethod
    def is_valid_node_key(cls, key: bytes) -> bool:
        """Checks that a decrypted key has a length MEGA accepts."""
        return len(key) in (cls.FOLDER_KEY_SIZE, cls.FILE_KEY_SIZE)

"""
Attribute packing/unpacking for MEGA nodes.

Attributes are stored as:
- JSON object with "MEGA" prefix
- Null-padded to a 16-byte boundary
- AES-CBC encrypted (zero IV) with the node's attribute key
"""
from __future__ import annotations
import json
from typing import Dict, Any, Union

from ..crypto import AESCrypto, Base64Encoder, KeyManager


class AttributesPacker:
    """
    Pack and unpack node attributes.
    
    Format:
        MEGA{"n":"filename","lbl":2}
    
    The ``key`` accepted by ``pack``/``unpack`` is a node's full key: the
    attribute key is derived from it the same way for files and folders.
    """
    
    PREFIX = b'MEGA'
    
    @staticmethod
    def pack(attributes: Dict[str, Any], key: bytes) -> bytes:
        """
        Encrypt attributes with the node's key.
        
        Args:
            attributes: Attribute dict in MEGA's short-key format
            key: Node key (16-byte folder key or 32-byte file key)
            
        Returns:
            Encrypted attributes bytes
        """
        data = AttributesPacker.pack_raw(attributes)
        return AESCrypto(KeyManager.attribute_key(key)).encrypt_cbc(data)
    
    @staticmethod
    def unpack(encrypted: bytes, key: bytes) -> Dict[str, Any]:
        """
        Decrypt attributes with the node's key.
        
        Raises:
            ValueError: If the key is wrong or the payload is malformed
        """
        if not encrypted or len(encrypted) % 16:
            raise ValueError("Invalid attributes length")
        decrypted = AESCrypto(KeyManager.attribute_key(key)).decrypt_cbc(encrypted)
        attrs = AttributesPacker.unpack_raw(decrypted)
        if attrs is None:
            raise ValueError("Invalid attributes prefix")
        return attrs
    
    @staticmethod
    def pack_b64(attributes: Dict[str, Any], key: bytes) -> str:
        """Encrypt attributes and encode them for the ``a`` field."""
        return Base64Encoder().encode(AttributesPacker.pack(attributes, key))
    
    @staticmethod
    def unpack_b64(encrypted: Union[str, bytes], key: bytes) -> Dict[str, Any]:
        """Decode an ``a`` field and decrypt it."""
        return AttributesPacker.unpack(Base64Encoder().decode(encrypted), key)
    
    @staticmethod
    def pack_raw(attrs_dict: Dict[str, Any]) -> bytes:
        """Pack attributes without encryption."""
        json_str = json.dumps(attrs_dict, separators=(',', ':'), ensure_ascii=False)
        data = AttributesPacker.PREFIX + json_str.encode('utf-8')
        
        padding_len = (16 - (len(data) % 16)) % 16
        if padding_len == 0:
            padding_len = 16
        
        return data + (b'\x00' * padding_len)
    
    @staticmethod
    def unpack_raw(data: bytes) -> Dict[str, Any] | None:
        """Unpack attributes without decryption, None if not MEGA attributes."""
        if not data.startswith(AttributesPacker.PREFIX):
            return None
        
        json_data = data[len(AttributesPacker.PREFIX):].split(b'\x00', 1)[0]
        try:
            attrs = json.loads(json_data.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return None
        return attrs if isinstance(attrs, dict) else None

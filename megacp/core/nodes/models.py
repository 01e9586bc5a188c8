"""Node model for the remote filesystem tree."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Any, Optional


class NodeType(IntEnum):
    """
    Node types.
    
    Values 0-4 match the API's ``t`` field. CONTACT and NETWORK mirror the
    ``/Contacts`` layout; TOP is the virtual ``/`` root.
    """
    TOP = -1
    FILE = 0
    FOLDER = 1
    ROOT = 2
    INBOX = 3
    RUBBISH = 4
    CONTACT = 8
    NETWORK = 9
    
    @property
    def is_copyable(self) -> bool:
        """Only plain files and folders can be copied."""
        return self in (NodeType.FILE, NodeType.FOLDER)
    
    @property
    def is_writable(self) -> bool:
        """Whether nodes can be created under a node of this type."""
        return self not in (NodeType.FILE, NodeType.TOP, NodeType.NETWORK)


@dataclass(eq=False)
class Node:
    """
    A file or folder in the remote tree.
    
    Attributes:
        handle: Unique node handle
        type: Node type
        name: Decrypted name
        parent: Parent handle, None for the top node
        a: Encrypted attribute blob as received from the API
        key: Wrapped key as received (``owner:b64key`` pairs)
        key_full: Decrypted node key (32 bytes for files, 16 for folders)
        attrs: Decrypted attributes
        size: File size in bytes
        mtime: Creation timestamp from the API
    """
    handle: str
    type: NodeType
    name: str
    parent: Optional[str] = None
    a: Optional[str] = None
    key: Optional[str] = None
    key_full: Optional[bytes] = None
    attrs: Dict[str, Any] = field(default_factory=dict)
    size: int = 0
    mtime: int = 0
    
    @property
    def is_file(self) -> bool:
        return self.type == NodeType.FILE
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.handle == other.handle
    
    def __hash__(self) -> int:
        return hash(self.handle)
    
    def __repr__(self) -> str:
        return f"<Node {self.type.name} {self.name!r} ({self.handle})>"

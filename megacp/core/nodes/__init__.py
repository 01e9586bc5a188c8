"""Remote filesystem model: nodes, the node tree and its loader."""
from .models import Node, NodeType
from .filesystem import Filesystem, path_up, path_name
from .decryptor import KeyDecryptor
from .loader import FilesystemLoader

__all__ = [
    'Node',
    'NodeType',
    'Filesystem',
    'path_up',
    'path_name',
    'KeyDecryptor',
    'FilesystemLoader',
]

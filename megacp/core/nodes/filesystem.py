"""In-memory node tree for one session."""
from typing import Dict, Iterable, Iterator, List, Optional

from .models import Node, NodeType
from ..logging import get_logger

logger = get_logger(__name__)


def path_up(path: str) -> Optional[str]:
    """
    Gets the parent of a path.
    
    Returns None when the path has no parent component.
    
    Example:
        >>> path_up('/Root/dir/file')
        '/Root/dir'
        >>> path_up('/Root')
        '/'
        >>> path_up('/') is None
        True
    """
    parts = _split(path)
    if not parts:
        return None
    return '/' + '/'.join(parts[:-1])


def path_name(path: str) -> str:
    """Gets the last component of a path, empty for the root."""
    parts = _split(path)
    return parts[-1] if parts else ''


def _split(path: str) -> List[str]:
    return [p for p in path.split('/') if p]


class Filesystem:
    """
    Owns the nodes of one session.
    
    Nodes are looked up by handle, by path (``/Root/dir/file``) and by name
    under a parent. The tree is read-only for the copy pipeline: changes made
    on the server show up after the filesystem is reloaded.
    """
    
    def __init__(self, nodes: Iterable[Node] = ()):
        self._nodes: Dict[str, Node] = {}
        self._children: Dict[str, List[Node]] = {}
        self._top: Optional[Node] = None
        
        for node in nodes:
            self.add(node)
    
    @property
    def top(self) -> Optional[Node]:
        return self._top
    
    def add(self, node: Node) -> None:
        """Adds a node; its parent may be added later."""
        if node.handle in self._nodes:
            self._detach(self._nodes[node.handle])
        
        self._nodes[node.handle] = node
        
        if node.type == NodeType.TOP:
            self._top = node
        if node.parent is not None:
            self._children.setdefault(node.parent, []).append(node)
    
    def _detach(self, node: Node) -> None:
        siblings = self._children.get(node.parent, [])
        if node in siblings:
            siblings.remove(node)
    
    def get(self, handle: str) -> Optional[Node]:
        return self._nodes.get(handle)
    
    def __contains__(self, handle: str) -> bool:
        return handle in self._nodes
    
    def __len__(self) -> int:
        return len(self._nodes)
    
    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())
    
    def get_parent(self, node: Node) -> Optional[Node]:
        return self._nodes.get(node.parent) if node.parent else None
    
    def get_children(self, node: Node) -> List[Node]:
        return list(self._children.get(node.handle, []))
    
    def get_children_deep(self, node: Node) -> List[Node]:
        """
        Gets every descendant of a node, parents before their children.
        
        The node itself is not included.
        """
        result = []
        stack = list(reversed(self.get_children(node)))
        seen = {node.handle}
        
        while stack:
            child = stack.pop()
            if child.handle in seen:
                continue
            seen.add(child.handle)
            result.append(child)
            stack.extend(reversed(self.get_children(child)))
        
        return result
    
    def get_child_by_name(self, folder: Node, name: str) -> Optional[Node]:
        """Finds a direct child of ``folder`` by name."""
        for child in self._children.get(folder.handle, []):
            if child.name == name:
                return child
        return None
    
    def get_path(self, node: Node) -> str:
        """Builds a node's path from its parent chain."""
        parts = []
        current = node
        seen = set()
        
        while current is not None and current.type != NodeType.TOP:
            if current.handle in seen:
                raise ValueError(f"Circular parent link at {current.handle}")
            seen.add(current.handle)
            parts.append(current.name)
            current = self.get_parent(current)
        
        return '/' + '/'.join(reversed(parts))
    
    def get_node_by_path(self, path: str) -> Optional[Node]:
        """Resolves an absolute path, None if any component is missing."""
        if self._top is None or not path or not path.startswith('/'):
            return None
        
        current = self._top
        for part in _split(path):
            current = self.get_child_by_name(current, part)
            if current is None:
                return None
        
        return current
    
    def get_nodes_for_paths(self, paths: Iterable[str]) -> List[Node]:
        """
        Resolves several paths, keeping only existing nodes.
        
        Missing paths are logged and skipped, repeated nodes are returned once.
        """
        nodes = []
        seen = set()
        
        for path in paths:
            node = self.get_node_by_path(path)
            if node is None:
                logger.warning(f"Path not found: {path}")
                continue
            if node.handle in seen:
                continue
            seen.add(node.handle)
            nodes.append(node)
        
        return nodes

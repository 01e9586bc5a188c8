"""
Data models for the copy pipeline.

Uses dataclasses for the options, intermediate plan and result.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..nodes import Filesystem, Node
from .protocols import NodeApi


@dataclass
class CopyOptions:
    """
    Flags of a copy command.
    
    Attributes:
        recursive: Copy folders with their contents (``-r``)
        force: Overwrite same-name files at the destination (``-f``)
        target_folder: Explicit destination folder, all args are sources (``-t``)
        no_target_folder: Treat the destination as a path to copy to (``-T``)
    """
    recursive: bool = False
    force: bool = False
    target_folder: Optional[str] = None
    no_target_folder: bool = False


@dataclass
class CopyContext:
    """Everything a copy needs from the session, passed explicitly."""
    filesystem: Filesystem
    master_key: bytes
    api: NodeApi


@dataclass
class CopyDestination:
    """
    Where the sources go.
    
    ``name`` is set only when the single source is copied under a new name.
    """
    folder_path: str
    folder: Node
    source_paths: List[str]
    name: Optional[str] = None
    rename: bool = False
    
    def name_for(self, node: Node) -> str:
        """Name the copy of ``node`` will have."""
        return self.name if self.rename else node.name


@dataclass
class CopyPlan:
    """Accepted sources plus the destination files they replace."""
    destination: CopyDestination
    sources: List[Node] = field(default_factory=list)
    overwrite: List[Node] = field(default_factory=list)
    
    @property
    def folder(self) -> Node:
        return self.destination.folder
    
    @property
    def rename_to(self) -> Optional[str]:
        return self.destination.name if self.destination.rename else None


@dataclass(frozen=True)
class CopyItem:
    """
    One node of a copy request.
    
    ``parent`` is None for a top-level source, which the backend places under
    the destination folder. Descendants keep their original parent handle so
    the backend links them under the copy of that parent.
    """
    node: Node
    parent: Optional[str] = None
    
    @property
    def is_top_level(self) -> bool:
        return self.parent is None


class CopyStatus(str, Enum):
    """Outcome of a copy that didn't fail."""
    COPIED = 'copied'
    NOTHING_TO_DO = 'nop'


@dataclass
class CopyResult:
    """
    Result of a copy.
    
    Attributes:
        status: COPIED, or NOTHING_TO_DO when every source was skipped
        copied: Top-level sources that were copied
        deleted: Overwritten destination files that were removed
        cleanup_failed: True if removing overwritten files failed
        request: The ``a: p`` request that was sent
    """
    status: CopyStatus
    copied: List[Node] = field(default_factory=list)
    deleted: List[Node] = field(default_factory=list)
    cleanup_failed: bool = False
    request: Optional[Dict[str, Any]] = None
    
    @property
    def nothing_to_do(self) -> bool:
        return self.status == CopyStatus.NOTHING_TO_DO

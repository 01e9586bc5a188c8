"""
Source selection.

Drops sources that can't be copied to the resolved destination and records
destination files that a forced copy replaces.
"""
from typing import Iterable

from .models import CopyDestination, CopyPlan
from ..exceptions import NothingToDoError
from ..logging import get_logger
from ..nodes import Filesystem, Node, NodeType

logger = get_logger(__name__)


class SourceSelector:
    """
    Filters source nodes against the destination.
    
    Unusable sources are skipped with a warning. Only an empty result is an
    error, and a benign one (``NothingToDoError``).
    """
    
    def __init__(self, filesystem: Filesystem):
        self._fs = filesystem
    
    def select(
        self,
        destination: CopyDestination,
        sources: Iterable[Node],
        recursive: bool = False,
        force: bool = False
    ) -> CopyPlan:
        """
        Build the copy plan.
        
        Raises:
            NothingToDoError: If no source is left
        """
        plan = CopyPlan(destination=destination)
        for node in sources:
            if self._accept(node, plan, recursive, force):
                plan.sources.append(node)
        
        if not plan.sources:
            raise NothingToDoError()
        
        return plan
    
    def _accept(
        self,
        node: Node,
        plan: CopyPlan,
        recursive: bool,
        force: bool
    ) -> bool:
        path = self._fs.get_path(node)
        
        if not node.type.is_copyable:
            logger.warning(f"Special folder {path} can't be copied, skipping")
            return False
        
        if node.type == NodeType.FOLDER and not recursive:
            logger.warning(f"Folder {path} can't be copied in non-recursive mode, skipping")
            return False
        
        existing = self._fs.get_child_by_name(plan.folder, plan.destination.name_for(node))
        if existing is not None:
            if existing.handle == node.handle:
                logger.warning(f"Self-copy detected at {path}, skipping")
                return False
            
            existing_path = self._fs.get_path(existing)
            if existing.type != NodeType.FILE:
                logger.warning(f"Folder already exists at {existing_path}, skipping")
                return False
            if not force:
                logger.warning(f"File already exists at {existing_path}, skipping")
                return False
            
            if existing not in plan.overwrite:
                plan.overwrite.append(existing)
        
        return True

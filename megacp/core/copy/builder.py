"""
Copy request builder.

Builds the single ``a: p`` request that makes the backend create copies of
existing nodes. No file data is involved: each entry only carries the node's
attributes and its key re-wrapped under the account master key, so the copy
points at the same encrypted content.
"""
from typing import Any, Dict, List, Optional

from .flattener import flatten
from .models import CopyItem, CopyPlan
from ..attributes import AttributesPacker
from ..crypto import KeyWrapper
from ..exceptions import MegaDecryptionError
from ..logging import get_logger
from ..nodes import Filesystem, Node

logger = get_logger(__name__)


class CopyRequestBuilder:
    """
    Builds copy requests for one account.
    
    Example:
        >>> builder = CopyRequestBuilder(session.master_key)
        >>> request = builder.build(plan, fs, recursive=True)
        >>> request['a'], request['t']
        ('p', 'destHndl')
    """
    
    def __init__(self, master_key: bytes):
        self._wrapper = KeyWrapper(master_key)
    
    def build(self, plan: CopyPlan, filesystem: Filesystem, recursive: bool = False) -> Dict[str, Any]:
        """
        Build the request for a plan.
        
        Top-level sources are renamed when the plan says so; descendants
        keep their attributes untouched.
        """
        entries: List[Dict[str, Any]] = []
        
        for source in plan.sources:
            for item in flatten(filesystem, source, recursive):
                new_name = plan.rename_to if item.is_top_level else None
                entries.append(self.build_entry(item, new_name))
        
        logger.debug(f"Built copy request with {len(entries)} nodes for {plan.folder.handle}")
        
        return {
            'a': 'p',
            't': plan.folder.handle,
            'n': entries,
        }
    
    def build_entry(self, item: CopyItem, new_name: Optional[str] = None) -> Dict[str, Any]:
        """
        Build one node entry.
        
        Raises:
            MegaDecryptionError: If the node's key was never decrypted
        """
        node = item.node
        if not node.key_full:
            raise MegaDecryptionError(f"Key of {node.name} is not available", node_handle=node.handle)
        
        entry = {
            'h': node.handle,
            't': int(node.type),
            'a': self._attributes(node, new_name),
            'k': self._wrapper.wrap(node.key_full),
        }
        
        if item.parent is not None:
            entry['p'] = item.parent
        
        return entry
    
    @staticmethod
    def _attributes(node: Node, new_name: Optional[str]) -> str:
        if new_name is None and node.a:
            return node.a
        
        # Renamed nodes keep their other attributes (label, mtime, ...)
        attrs = dict(node.attrs)
        attrs['n'] = new_name or node.name
        return AttributesPacker.pack_b64(attrs, node.key_full)

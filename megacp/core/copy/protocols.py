"""
Protocol definitions for the copy pipeline.

The pipeline only needs two backend calls; ``AsyncAPIClient`` provides both.
"""
from typing import Any, Dict, List, Protocol


class NodeApi(Protocol):
    """Backend calls used by the copy executor."""
    
    async def put_nodes(self, target: str, nodes: List[Dict[str, Any]]) -> Any:
        """
        Create nodes under ``target`` in one atomic request.
        
        Raises:
            MegaAPIError: If the request is rejected
        """
        ...
    
    async def delete_nodes(self, handles: List[str]) -> Any:
        """
        Delete nodes in one batch.
        
        Raises:
            MegaAPIError: If the batch fails
        """
        ...

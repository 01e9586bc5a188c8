"""Sends copy requests and removes overwritten files."""
from typing import Any, Dict, List, Optional

from .protocols import NodeApi
from ..api import MegaAPIError, APIErrorCodes
from ..exceptions import CopyBackendError, MegaException
from ..logging import get_logger
from ..nodes import Node

logger = get_logger(__name__)


class CopyExecutor:
    """
    Runs the network side of a copy.
    
    The copy request is all-or-nothing, so any failure is reported as one
    ``CopyBackendError``. Cleanup of overwritten files runs only after the
    copy succeeded and its failures are logged, never raised.
    """
    
    def __init__(self, api: NodeApi):
        self._api = api
    
    async def execute(self, request: Dict[str, Any]) -> Any:
        """
        Send a copy request built by ``CopyRequestBuilder``.
        
        Raises:
            CopyBackendError: If the backend rejects the request
        """
        try:
            result = await self._api.put_nodes(request['t'], request['n'])
        except MegaAPIError as e:
            logger.error("Failed to copy files and folders")
            raise CopyBackendError(f"Failed to copy files and folders: {e.message}", e.code) from e
        
        error = self._result_error(result, len(request['n']))
        if error is not None:
            logger.error("Failed to copy files and folders")
            raise CopyBackendError(f"Failed to copy files and folders: {error}")
        
        return result
    
    @staticmethod
    def _result_error(result: Any, expected: int) -> Optional[str]:
        """Describes what is wrong with a copy response, None if it is complete."""
        if APIErrorCodes.is_error(result):
            return APIErrorCodes.get_message(result)
        
        created = result.get('f') if isinstance(result, dict) else None
        if not isinstance(created, list):
            return f"Unexpected response {result!r}"
        
        for item in created:
            if APIErrorCodes.is_error(item):
                return APIErrorCodes.get_message(item)
        
        if len(created) != expected:
            return f"{len(created)} of {expected} nodes were created"
        
        return None
    
    async def cleanup(self, nodes: List[Node]) -> bool:
        """
        Delete overwritten destination files in one batch.
        
        Returns:
            False if the batch failed
        """
        if not nodes:
            return True
        
        try:
            await self._api.delete_nodes([node.handle for node in nodes])
        except MegaException as e:
            logger.error(f"Failed to remove overwritten files: {e}")
            return False
        
        logger.debug(f"Removed {len(nodes)} overwritten files")
        return True

"""
Async MEGA API client.

Asynchronous client over aiohttp. Only the commands the copy pipeline needs
are exposed as convenience methods; anything else goes through ``request``.
"""
import json
import random
import asyncio
import logging
from typing import Dict, Optional, Any, List
import aiohttp

from .config import APIConfig
from .errors import MegaAPIError, APIErrorCodes
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous MEGA API client.
    
    Features:
    - Full async/await support
    - Configurable proxy, SSL, timeouts
    - Automatic retry with exponential backoff
    - Several commands in one POST (``request_batch``)
    
    Example:
        >>> async with AsyncAPIClient(APIConfig.default(), session_id=sid) as api:
        ...     files = await api.get_files()
    """
    
    def __init__(self, config: Optional[APIConfig] = None, session_id: Optional[str] = None):
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._counter_id = random.randint(0, 1_000_000_000)
        self._session_id = session_id
        self._closed = False
        
        self._logger = get_logger('megacp.api')
        # Let basicConfig() decide once the root logger has handlers
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def session_id(self) -> Optional[str]:
        return self._session_id
    
    @session_id.setter
    def session_id(self, value: Optional[str]):
        self._session_id = value
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
        return self._session
    
    async def close(self):
        """Close client and release resources."""
        self._closed = True
        
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        
        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None
    
    def _build_url(self) -> str:
        """Build request URL."""
        url = f"{self._config.gateway}cs?id={self._counter_id}"
        if self._session_id:
            url += f"&sid={self._session_id}"
        return url
    
    async def request(self, data: Dict[str, Any]) -> Any:
        """
        Send a single command.
        
        Args:
            data: Command payload, e.g. ``{'a': 'f', 'c': 1}``
            
        Returns:
            The command's result
            
        Raises:
            MegaAPIError: If the request or the command fails
        """
        results = await self._post([data])
        if not results:
            raise MegaAPIError(APIErrorCodes.EINTERNAL, "No response received")
        
        result = results[0]
        if APIErrorCodes.is_error(result):
            raise MegaAPIError(result)
        return result
    
    async def request_batch(self, commands: List[Dict[str, Any]]) -> List[Any]:
        """
        Send several commands in one POST.
        
        Per-command error codes are returned as-is; only request-level
        failures raise.
        
        Raises:
            MegaAPIError: If the request as a whole fails
        """
        if not commands:
            return []
        results = await self._post(commands)
        if len(results) < len(commands):
            results = results + [APIErrorCodes.EINTERNAL] * (len(commands) - len(results))
        return results
    
    async def _post(self, commands: List[Dict[str, Any]], retry_count: int = 0) -> List[Any]:
        """POST a command array, retrying on transient failures."""
        if self._closed:
            raise MegaAPIError(APIErrorCodes.EINTERNAL, "Client is closed")
        
        session = await self._ensure_session()
        self._counter_id += 1
        url = self._build_url()
        body = json.dumps(commands)
        
        self._logger.debug(f"Request ({len(commands)} commands) to {url}")
        self._logger.debug(f"Request data: {body[:300] if len(body) > 300 else body}")
        
        try:
            async with session.post(
                url,
                data=body,
                proxy=self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
            ) as response:
                if 'X-Hashcash' in response.headers:
                    raise MegaAPIError(
                        APIErrorCodes.EAGAIN,
                        "Server requested a hashcash proof of work, log in again"
                    )
                
                response_text = await response.text()
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error: {e}")
            
            if retry_count < self._config.retry.max_retries:
                await asyncio.sleep(self._config.retry.calculate_delay(retry_count))
                return await self._post(commands, retry_count + 1)
            
            raise MegaAPIError(APIErrorCodes.EINTERNAL, f"Network error: {e}") from e
        
        self._logger.debug(f"Response data: {response_text[:1000] if len(response_text) > 1000 else response_text}")
        data = self._parse_response(response_text)
        
        # A bare error code applies to the whole request
        if APIErrorCodes.is_error(data):
            if self._config.retry.should_retry(data, retry_count):
                self._logger.warning(f"Retrying after error {data}, attempt {retry_count + 1}")
                await asyncio.sleep(self._config.retry.calculate_delay(retry_count))
                return await self._post(commands, retry_count + 1)
            raise MegaAPIError(data)
        
        results = data if isinstance(data, list) else [data]
        
        for result in results:
            if APIErrorCodes.is_error(result) and self._config.retry.should_retry(result, retry_count):
                self._logger.warning(f"Retrying batch after error {result}, attempt {retry_count + 1}")
                await asyncio.sleep(self._config.retry.calculate_delay(retry_count))
                return await self._post(commands, retry_count + 1)
        
        return results
    
    @staticmethod
    def _parse_response(response_text: str) -> Any:
        """Parse API response."""
        try:
            return json.loads(response_text)
        except json.JSONDecodeError:
            raise MegaAPIError(APIErrorCodes.EINTERNAL, f"Invalid response: {response_text[:100]}")
    
    # Convenience methods
    
    async def get_files(self) -> Dict[str, Any]:
        """Get the full node list of the account."""
        return await self.request({'a': 'f', 'c': 1})
    
    async def put_nodes(self, target: str, nodes: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Create nodes under a target folder.
        
        Used both for new folders and for copies of existing nodes; the
        backend resolves ``p`` links between entries of the same request.
        
        Args:
            target: Parent folder handle
            nodes: Node entries (``h``, ``t``, ``a``, ``k`` and optional ``p``)
        """
        return await self.request({'a': 'p', 't': target, 'n': nodes})
    
    async def delete_nodes(self, handles: List[str]) -> List[Any]:
        """
        Delete nodes in one batch.
        
        Raises:
            MegaAPIError: If any deletion in the batch failed
        """
        results = await self.request_batch([{'a': 'd', 'n': h} for h in handles])
        
        for handle, result in zip(handles, results):
            if APIErrorCodes.is_error(result):
                raise MegaAPIError(result, f"Failed to delete {handle}: {APIErrorCodes.get_message(result)}")
        
        return results

"""An established MEGA session: credentials, transport and the node tree."""
from typing import Optional

from .models import SessionData
from .protocols import SessionStorage
from ..api import AsyncAPIClient, APIConfig
from ..copy.models import CopyContext
from ..exceptions import MegaSessionError
from ..logging import get_logger
from ..nodes import Filesystem, FilesystemLoader

logger = get_logger(__name__)


class Session:
    """
    Ties a stored session to an API client and its filesystem snapshot.
    
    Logging in is not handled here; the session must already exist in a
    ``SessionStorage``.
    
    Example:
        >>> async with Session.from_storage(SQLiteSession("account")) as session:
        ...     await session.load_filesystem()
        ...     service = CopyService(session.context())
    """
    
    def __init__(self, data: SessionData, api: Optional[AsyncAPIClient] = None,
                 config: Optional[APIConfig] = None):
        if not data.is_valid():
            raise MegaSessionError("Session data is incomplete, log in again")
        self._data = data
        self._api = api or AsyncAPIClient(config, session_id=data.session_id)
        self._filesystem: Optional[Filesystem] = None
    
    @classmethod
    def from_storage(cls, storage: SessionStorage, config: Optional[APIConfig] = None) -> 'Session':
        data = storage.load()
        if data is None:
            raise MegaSessionError("No saved session, log in first")
        return cls(data, config=config)
    
    @property
    def data(self) -> SessionData:
        return self._data
    
    @property
    def api(self) -> AsyncAPIClient:
        return self._api
    
    @property
    def master_key(self) -> bytes:
        return self._data.master_key
    
    @property
    def user_id(self) -> str:
        return self._data.user_id
    
    @property
    def filesystem(self) -> Filesystem:
        if self._filesystem is None:
            raise MegaSessionError("Filesystem not loaded, call load_filesystem() first")
        return self._filesystem
    
    async def load_filesystem(self) -> Filesystem:
        """Fetches the account's nodes and rebuilds the filesystem snapshot."""
        response = await self._api.get_files()
        self._filesystem = FilesystemLoader(self.master_key, self.user_id).load(response)
        logger.debug(f"Loaded filesystem for {self._data.email}")
        return self._filesystem
    
    def context(self) -> CopyContext:
        return CopyContext(
            filesystem=self.filesystem,
            master_key=self.master_key,
            api=self._api,
        )
    
    async def close(self) -> None:
        await self._api.close()
    
    async def __aenter__(self) -> 'Session':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

"""
megacp - Server-side copy of files and folders in a MEGA account.

Copies are made without downloading or re-uploading any data: the backend
creates new nodes that reuse the encrypted content, with node keys re-wrapped
under the account master key.

Example:
    >>> from megacp import Session, SQLiteSession, CopyService, CopyOptions
    >>> async with Session.from_storage(SQLiteSession("account")) as session:
    ...     await session.load_filesystem()
    ...     service = CopyService(session.context())
    ...     await service.copy(['/Root/file', '/Root/dest'], CopyOptions(force=True))
"""
import logging

from .core.api import APIConfig, ProxyConfig, SSLConfig, AsyncAPIClient, MegaAPIError
from .core.copy import (
    CopyOptions,
    CopyContext,
    CopyResult,
    CopyStatus,
    CopyService,
    copy_nodes,
)
from .core.exceptions import (
    MegaException,
    MegaSessionError,
    CopyError,
    CopyArgumentsError,
    CopyResolutionError,
    NothingToDoError,
    CopyBackendError,
)
from .core.nodes import Node, NodeType, Filesystem
from .core.session import SessionStorage, SessionData, SQLiteSession, MemorySession, Session

__version__ = "1.0.0"


def setup_logging(level=logging.INFO):
    """
    Configure logging for megacp modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = {'megacp', 'megacp.api'}
    # Module loggers may already carry their own level from get_logger()
    loggers.update(
        name for name, logger in list(logging.root.manager.loggerDict.items())
        if name.startswith('megacp.') and isinstance(logger, logging.Logger)
    )
    
    for logger_name in sorted(loggers):
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    # Copy
    'CopyOptions',
    'CopyContext',
    'CopyResult',
    'CopyStatus',
    'CopyService',
    'copy_nodes',
    
    # Session
    'Session',
    'SessionStorage',
    'SessionData',
    'SQLiteSession',
    'MemorySession',
    
    # Nodes
    'Node',
    'NodeType',
    'Filesystem',
    
    # Transport
    'AsyncAPIClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    
    # Errors
    'MegaException',
    'MegaSessionError',
    'MegaAPIError',
    'CopyError',
    'CopyArgumentsError',
    'CopyResolutionError',
    'NothingToDoError',
    'CopyBackendError',
    
    'setup_logging',
]

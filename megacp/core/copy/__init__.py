"""
Copy module: server-side copies of files and folders.

Nothing is downloaded or uploaded. The backend is asked to create new nodes
that reuse the sources' encrypted content with keys re-wrapped under the
account master key.
"""
from .models import (
    CopyOptions,
    CopyContext,
    CopyDestination,
    CopyPlan,
    CopyItem,
    CopyStatus,
    CopyResult,
)
from .protocols import NodeApi
from .resolver import DestinationResolver
from .selector import SourceSelector
from .flattener import flatten, flatten_plan
from .builder import CopyRequestBuilder
from .executor import CopyExecutor
from .service import CopyService, copy_nodes

__all__ = [
    # Models
    'CopyOptions',
    'CopyContext',
    'CopyDestination',
    'CopyPlan',
    'CopyItem',
    'CopyStatus',
    'CopyResult',
    
    # Protocols
    'NodeApi',
    
    # Stages
    'DestinationResolver',
    'SourceSelector',
    'flatten',
    'flatten_plan',
    'CopyRequestBuilder',
    'CopyExecutor',
    
    # Entry points
    'CopyService',
    'copy_nodes',
]

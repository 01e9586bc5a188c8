"""
Copy service.

Runs the whole copy of files and folders inside the account:

    resolve destination -> select sources -> build request -> send -> cleanup

Each stage may stop the copy by raising a ``CopyError``. Only sending and
cleanup talk to the backend.
"""
from typing import Optional, Sequence

from .builder import CopyRequestBuilder
from .executor import CopyExecutor
from .models import CopyContext, CopyOptions, CopyPlan, CopyResult, CopyStatus
from .resolver import DestinationResolver
from .selector import SourceSelector
from ..exceptions import NothingToDoError
from ..logging import get_logger, VERBOSE

logger = get_logger(__name__)


class CopyService:
    """
    Server-side copy of nodes.
    
    Example:
        >>> service = CopyService(session.context())
        >>> result = await service.copy(['/Root/file', '/Root/file-copy'])
        >>> result.status
        <CopyStatus.COPIED: 'copied'>
    """
    
    def __init__(self, context: CopyContext):
        self._context = context
        self._resolver = DestinationResolver(context.filesystem)
        self._selector = SourceSelector(context.filesystem)
        self._builder = CopyRequestBuilder(context.master_key)
        self._executor = CopyExecutor(context.api)
    
    @property
    def context(self) -> CopyContext:
        return self._context
    
    def plan(self, args: Sequence[str], options: Optional[CopyOptions] = None) -> CopyPlan:
        """
        Resolve and filter without touching the backend.
        
        Raises:
            CopyArgumentsError: Invalid flags or arguments
            CopyResolutionError: Destination can't be used
            NothingToDoError: No source left to copy
        """
        options = options or CopyOptions()
        fs = self._context.filesystem
        
        destination = self._resolver.resolve(args, options.target_folder, options.no_target_folder)
        sources = fs.get_nodes_for_paths(destination.source_paths)
        
        return self._selector.select(destination, sources, options.recursive, options.force)
    
    async def copy(self, args: Sequence[str], options: Optional[CopyOptions] = None) -> CopyResult:
        """
        Copy nodes.
        
        Returns:
            COPIED result, or NOTHING_TO_DO when every source was skipped
            
        Raises:
            CopyArgumentsError: Invalid flags or arguments
            CopyResolutionError: Destination can't be used
            CopyBackendError: The backend rejected the copy
        """
        options = options or CopyOptions()
        fs = self._context.filesystem
        
        try:
            plan = self.plan(args, options)
        except NothingToDoError as e:
            logger.info(e.message)
            return CopyResult(status=CopyStatus.NOTHING_TO_DO)
        
        request = self._builder.build(plan, fs, options.recursive)
        await self._executor.execute(request)
        
        folder_path = fs.get_path(plan.folder)
        for node in plan.sources:
            logger.log(VERBOSE, f"Copied {fs.get_path(node)} to {folder_path}/{plan.destination.name_for(node)}")
        
        cleaned = await self._executor.cleanup(plan.overwrite)
        
        return CopyResult(
            status=CopyStatus.COPIED,
            copied=list(plan.sources),
            deleted=list(plan.overwrite) if cleaned else [],
            cleanup_failed=not cleaned,
            request=request,
        )


async def copy_nodes(
    context: CopyContext,
    args: Sequence[str],
    options: Optional[CopyOptions] = None
) -> CopyResult:
    """Shortcut for ``CopyService(context).copy(args, options)``."""
    return await CopyService(context).copy(args, options)

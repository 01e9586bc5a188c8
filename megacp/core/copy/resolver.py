"""
Destination resolution.

Turns the positional arguments and ``-t``/``-T`` flags of a copy command
into a destination folder and an optional new name.
"""
from typing import List, Optional, Sequence, Tuple

from .models import CopyDestination
from ..exceptions import CopyArgumentsError, CopyResolutionError
from ..nodes import Filesystem, Node, NodeType, path_up, path_name


class DestinationResolver:
    """
    Resolves where a copy goes.
    
    Usages:
        [-T] <source> <destination>
        <sources>... <folder>
        -t <folder> <sources>...
    
    With exactly two arguments and no flag, an existing folder destination
    receives the source under its own name; anything else is read as
    ``<folder>/<new name>``.
    """
    
    def __init__(self, filesystem: Filesystem):
        self._fs = filesystem
    
    def resolve(
        self,
        args: Sequence[str],
        target_folder: Optional[str] = None,
        no_target_folder: bool = False
    ) -> CopyDestination:
        """
        Resolve the destination of a copy.
        
        Args:
            args: Positional arguments
            target_folder: Folder given with ``-t``
            no_target_folder: ``-T`` flag
            
        Raises:
            CopyArgumentsError: Flags or argument count are invalid
            CopyResolutionError: Destination is missing or not writable
        """
        source_paths, dest_path = self.split_arguments(args, target_folder, no_target_folder)
        rename = False
        name = None
        
        if target_folder:
            folder_path = dest_path
            folder = self._fs.get_node_by_path(dest_path)
        elif no_target_folder:
            folder_path, folder, name = self._split_destination(dest_path)
            rename = True
        elif len(args) == 2:
            dest_node = self._fs.get_node_by_path(dest_path)
            if dest_node is not None and not dest_node.is_file:
                folder_path, folder = dest_path, dest_node
            else:
                folder_path, folder, name = self._split_destination(dest_path)
                rename = True
        else:
            folder_path = dest_path
            folder = self._fs.get_node_by_path(dest_path)
        
        self._validate(folder_path, folder, dest_path, rename, name)
        
        return CopyDestination(
            folder_path=folder_path,
            folder=folder,
            source_paths=source_paths,
            name=name,
            rename=rename,
        )
    
    @staticmethod
    def split_arguments(
        args: Sequence[str],
        target_folder: Optional[str],
        no_target_folder: bool
    ) -> Tuple[List[str], str]:
        """
        Splits arguments into source paths and the destination path.
        
        Runs before any filesystem lookup.
        """
        if target_folder and no_target_folder:
            raise CopyArgumentsError("Options -t <folder> and -T are not compatible")
        
        if target_folder:
            if len(args) < 1:
                raise CopyArgumentsError("When -t <folder> is used you must pass <sources>...")
            return list(args), target_folder
        
        if no_target_folder:
            if len(args) != 2:
                raise CopyArgumentsError("Option -T requires exactly two arguments: <source> <destination>")
            return [args[0]], args[1]
        
        if len(args) < 1:
            raise CopyArgumentsError("You need to specify files and folders to copy")
        if len(args) < 2:
            raise CopyArgumentsError("You need to specify destination path")
        
        return list(args[:-1]), args[-1]
    
    def _split_destination(self, dest_path: str) -> Tuple[str, Optional[Node], str]:
        """Reads ``dest_path`` as ``<folder>/<name>``."""
        folder_path = path_up(dest_path)
        if not folder_path or folder_path == dest_path:
            raise CopyResolutionError(f"Invalid destination {dest_path}")
        
        return folder_path, self._fs.get_node_by_path(folder_path), path_name(dest_path)
    
    def _validate(
        self,
        folder_path: str,
        folder: Optional[Node],
        dest_path: str,
        rename: bool,
        name: Optional[str]
    ) -> None:
        if folder is None:
            raise CopyResolutionError(f"Destination folder not found {folder_path}")
        
        if folder.type == NodeType.FILE:
            raise CopyResolutionError(f"Destination path is not a folder {folder_path}")
        
        if not folder.type.is_writable:
            raise CopyResolutionError(f"Destination folder is not writable {self._fs.get_path(folder)}")
        
        if rename and not name:
            raise CopyResolutionError(f"Destination file name can't be determined for {dest_path}")

"""Tests for destination resolution."""
from unittest.mock import Mock

import pytest

from megacp.core.copy import DestinationResolver
from megacp.core.exceptions import CopyArgumentsError, CopyResolutionError


class TestSplitArguments:
    """Flag and argument count checks, done before any lookup."""
    
    def test_t_and_T_conflict(self):
        """Test -t and -T together are rejected first."""
        fs = Mock()
        
        with pytest.raises(CopyArgumentsError, match="not compatible") as exc:
            DestinationResolver(fs).resolve(['/Root/file.txt'], '/Root/dest', True)
        
        assert exc.value.category == 'args'
        fs.get_node_by_path.assert_not_called()
    
    def test_t_requires_sources(self):
        with pytest.raises(CopyArgumentsError, match="must pass <sources>"):
            DestinationResolver.split_arguments([], '/Root/dest', False)
    
    @pytest.mark.parametrize("args", [['/a'], ['/a', '/b', '/c']])
    def test_T_requires_two_arguments(self, args):
        with pytest.raises(CopyArgumentsError, match="exactly two arguments"):
            DestinationResolver.split_arguments(args, None, True)
    
    def test_no_arguments(self):
        with pytest.raises(CopyArgumentsError, match="specify files and folders"):
            DestinationResolver.split_arguments([], None, False)
    
    def test_missing_destination(self):
        with pytest.raises(CopyArgumentsError, match="specify destination path"):
            DestinationResolver.split_arguments(['/Root/file.txt'], None, False)
    
    def test_split_last_is_destination(self):
        sources, dest = DestinationResolver.split_arguments(['/a', '/b', '/c'], None, False)
        
        assert sources == ['/a', '/b']
        assert dest == '/c'
    
    def test_split_with_target_folder(self):
        sources, dest = DestinationResolver.split_arguments(['/a', '/b'], '/dest', False)
        
        assert sources == ['/a', '/b']
        assert dest == '/dest'


class TestResolve:
    """Test suite for DestinationResolver.resolve."""
    
    @pytest.fixture
    def resolver(self, filesystem):
        return DestinationResolver(filesystem)
    
    def test_two_args_existing_folder(self, resolver):
        """Test an existing folder receives the source under its own name."""
        dest = resolver.resolve(['/Root/file.txt', '/Root/dest'])
        
        assert dest.folder.handle == 'dest'
        assert dest.folder_path == '/Root/dest'
        assert dest.rename is False
        assert dest.source_paths == ['/Root/file.txt']
    
    def test_two_args_new_name(self, resolver):
        """Test a missing destination becomes folder + new name."""
        dest = resolver.resolve(['/Root/file.txt', '/Root/dest/copy.txt'])
        
        assert dest.folder.handle == 'dest'
        assert dest.rename is True
        assert dest.name == 'copy.txt'
    
    def test_two_args_existing_file(self, resolver):
        """Test an existing file destination is read as folder + name."""
        dest = resolver.resolve(['/Root/docs/a.txt', '/Root/dest/file.txt'])
        
        assert dest.folder.handle == 'dest'
        assert dest.name == 'file.txt'
        assert dest.rename is True
    
    def test_T_forces_rename_even_for_folder(self, resolver):
        """Test -T treats an existing folder as the new path."""
        dest = resolver.resolve(['/Root/file.txt', '/Root/dest'], no_target_folder=True)
        
        assert dest.folder.handle == 'root'
        assert dest.name == 'dest'
        assert dest.rename is True
    
    def test_target_folder(self, resolver):
        """Test -t puts every argument into the folder."""
        dest = resolver.resolve(['/Root/file.txt', '/Root/docs'], target_folder='/Root/dest')
        
        assert dest.folder.handle == 'dest'
        assert dest.source_paths == ['/Root/file.txt', '/Root/docs']
        assert dest.rename is False
    
    def test_many_sources_need_existing_folder(self, resolver):
        with pytest.raises(CopyResolutionError, match="Destination folder not found /Root/nope") as exc:
            resolver.resolve(['/Root/file.txt', '/Root/docs', '/Root/nope'])
        
        assert exc.value.category == 'err'
    
    def test_missing_parent_folder(self, resolver):
        with pytest.raises(CopyResolutionError, match="Destination folder not found /Root/nope"):
            resolver.resolve(['/Root/file.txt', '/Root/nope/copy.txt'])
    
    def test_destination_is_file(self, resolver):
        with pytest.raises(CopyResolutionError, match="not a folder /Root/file.txt"):
            resolver.resolve(['/Root/docs/a.txt'], target_folder='/Root/file.txt')
    
    def test_top_not_writable(self, resolver):
        with pytest.raises(CopyResolutionError, match="not writable /"):
            resolver.resolve(['/Root/file.txt', '/copy.txt'])
    
    def test_contacts_not_writable(self, resolver):
        with pytest.raises(CopyResolutionError, match="not writable /Contacts"):
            resolver.resolve(['/Root/file.txt'], target_folder='/Contacts')
    
    def test_invalid_destination(self, resolver):
        with pytest.raises(CopyResolutionError, match="Invalid destination /"):
            resolver.resolve(['/Root/file.txt', '/'], no_target_folder=True)

"""Tests for the in-memory node tree."""
import pytest

from megacp.core.nodes import Filesystem, Node, NodeType, path_up, path_name


class TestPathHelpers:
    """Tests for path_up/path_name."""
    
    @pytest.mark.parametrize("path,expected", [
        ('/Root/dir/file', '/Root/dir'),
        ('/Root/dir/', '/Root'),
        ('/Root', '/'),
        ('/', None),
        ('', None),
    ])
    def test_path_up(self, path, expected):
        assert path_up(path) == expected
    
    @pytest.mark.parametrize("path,expected", [
        ('/Root/dir/file', 'file'),
        ('/Root/dir/', 'dir'),
        ('/', ''),
    ])
    def test_path_name(self, path, expected):
        assert path_name(path) == expected


class TestFilesystem:
    """Test suite for Filesystem."""
    
    def test_lookup_by_path(self, filesystem):
        """Test resolving absolute paths."""
        node = filesystem.get_node_by_path('/Root/docs/sub/b.txt')
        
        assert node.handle == 'fileb'
        assert filesystem.get_node_by_path('/').type == NodeType.TOP
        assert filesystem.get_node_by_path('/Root/').handle == 'root'
    
    def test_missing_and_relative_paths(self, filesystem):
        """Test unknown or relative paths resolve to None."""
        assert filesystem.get_node_by_path('/Root/missing') is None
        assert filesystem.get_node_by_path('Root/file.txt') is None
    
    def test_get_path(self, filesystem):
        """Test building paths from the parent chain."""
        assert filesystem.get_path(filesystem.get('fileb')) == '/Root/docs/sub/b.txt'
        assert filesystem.get_path(filesystem.get('*NETWORK*')) == '/Contacts'
        assert filesystem.get_path(filesystem.top) == '/'
    
    def test_get_path_cycle_raises(self):
        """Test a parent cycle is reported."""
        fs = Filesystem([
            Node(handle='a', type=NodeType.FOLDER, name='a', parent='b'),
            Node(handle='b', type=NodeType.FOLDER, name='b', parent='a'),
        ])
        
        with pytest.raises(ValueError, match="Circular"):
            fs.get_path(fs.get('a'))
    
    def test_get_child_by_name(self, filesystem):
        """Test finding a direct child by name."""
        dest = filesystem.get('dest')
        
        assert filesystem.get_child_by_name(dest, 'file.txt').handle == 'oldfile'
        assert filesystem.get_child_by_name(dest, 'a.txt') is None
    
    def test_children_deep_parents_first(self, filesystem):
        """Test descendants come out once each, parents before children."""
        handles = [n.handle for n in filesystem.get_children_deep(filesystem.get('docs'))]
        
        assert sorted(handles) == ['filea', 'fileb', 'sub']
        assert handles.index('sub') < handles.index('fileb')
        assert 'docs' not in handles
    
    def test_children_deep_of_file(self, filesystem):
        """Test a file has no descendants."""
        assert filesystem.get_children_deep(filesystem.get('file1')) == []
    
    def test_nodes_for_paths_skips_missing_and_duplicates(self, filesystem, caplog):
        """Test missing paths are logged and duplicates dropped."""
        nodes = filesystem.get_nodes_for_paths([
            '/Root/file.txt', '/Root/nope', '/Root/file.txt', '/Root/docs'
        ])
        
        assert [n.handle for n in nodes] == ['file1', 'docs']
        assert "Path not found: /Root/nope" in caplog.text
    
    def test_readding_node_moves_it(self, filesystem, node_factory):
        """Test adding a node with a known handle replaces it."""
        moved = node_factory('file1', NodeType.FILE, 'file.txt', 'archive')
        filesystem.add(moved)
        
        assert filesystem.get_node_by_path('/Root/file.txt') is None
        assert filesystem.get_node_by_path('/Root/archive/file.txt') is moved
    
    def test_len_contains_iter(self, filesystem):
        assert len(filesystem) == 13
        assert 'docs' in filesystem
        assert {n.handle for n in filesystem} >= {'root', 'docs'}

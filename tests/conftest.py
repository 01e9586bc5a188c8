"""Pytest fixtures for megacp tests."""
from unittest.mock import AsyncMock

import pytest
from Crypto.Random import get_random_bytes

from megacp.core.attributes import AttributesPacker
from megacp.core.copy import CopyContext
from megacp.core.nodes import Filesystem, Node, NodeType


@pytest.fixture
def master_key():
    """Generates a 16-byte master key for testing."""
    return get_random_bytes(16)


@pytest.fixture
def node_key():
    """Generates a 32-byte file node key for testing."""
    return get_random_bytes(32)


@pytest.fixture
def folder_key():
    """Generates a 16-byte folder node key for testing."""
    return get_random_bytes(16)


@pytest.fixture
def node_factory():
    """Creates decrypted nodes with real keys and encrypted attributes."""
    def make(handle, node_type, name, parent=None, **attrs):
        if node_type in (NodeType.FILE, NodeType.FOLDER):
            key_full = get_random_bytes(32 if node_type == NodeType.FILE else 16)
            attrs = {'n': name, **attrs}
            return Node(
                handle=handle,
                type=node_type,
                name=name,
                parent=parent,
                a=AttributesPacker.pack_b64(attrs, key_full),
                key=f"owner:{handle}",
                key_full=key_full,
                attrs=attrs,
                size=100 if node_type == NodeType.FILE else 0,
            )
        return Node(handle=handle, type=node_type, name=name, parent=parent)
    return make


@pytest.fixture
def filesystem(node_factory):
    """
    Sample tree:
    
        /Root/file.txt
        /Root/docs/a.txt
        /Root/docs/sub/b.txt
        /Root/dest/file.txt
        /Root/archive/docs/
        /Rubbish
        /Contacts
    """
    make = node_factory
    return Filesystem([
        make('*TOP*', NodeType.TOP, ''),
        make('*NETWORK*', NodeType.NETWORK, 'Contacts', '*TOP*'),
        make('root', NodeType.ROOT, 'Root', '*TOP*'),
        make('rubbish', NodeType.RUBBISH, 'Rubbish', '*TOP*'),
        make('file1', NodeType.FILE, 'file.txt', 'root', lbl=2),
        make('docs', NodeType.FOLDER, 'docs', 'root'),
        make('filea', NodeType.FILE, 'a.txt', 'docs'),
        make('sub', NodeType.FOLDER, 'sub', 'docs'),
        make('fileb', NodeType.FILE, 'b.txt', 'sub'),
        make('dest', NodeType.FOLDER, 'dest', 'root'),
        make('oldfile', NodeType.FILE, 'file.txt', 'dest'),
        make('archive', NodeType.FOLDER, 'archive', 'root'),
        make('olddocs', NodeType.FOLDER, 'docs', 'archive'),
    ])


@pytest.fixture
def api():
    """Mock backend accepting every request."""
    mock = AsyncMock()
    mock.put_nodes.side_effect = lambda target, nodes: {
        'f': [{'h': f"new{i}", 'p': target} for i, _ in enumerate(nodes)]
    }
    mock.delete_nodes.return_value = [0]
    return mock


@pytest.fixture
def context(filesystem, master_key, api):
    """Copy context over the sample tree and mock backend."""
    return CopyContext(filesystem=filesystem, master_key=master_key, api=api)

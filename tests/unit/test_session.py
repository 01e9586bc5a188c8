"""
Unit tests for session management.

Tests SessionData, SQLiteSession, MemorySession and Session.
"""
import sqlite3
import tempfile
from contextlib import closing
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from megacp.core.exceptions import MegaSessionError
from megacp.core.nodes import NodeType
from megacp.core.session import (
    SessionStorage,
    SessionData,
    SQLiteSession,
    MemorySession,
    Session,
)


@pytest.fixture
def session_data(master_key):
    return SessionData(
        email="test@example.com",
        session_id="sid123",
        user_id="uid456",
        master_key=master_key,
    )


class TestSessionData:
    """Tests for SessionData model."""
    
    def test_session_data_to_dict(self):
        """Test converting to dictionary."""
        data = SessionData(
            email="test@example.com",
            session_id="sid123",
            user_id="uid456",
            master_key=b'\x01\x02\x03' + b'\x00' * 13
        )
        
        result = data.to_dict()
        
        assert result['email'] == "test@example.com"
        assert result['master_key'] == "01020300000000000000000000000000"
        assert 'created_at' in result
    
    def test_session_data_from_dict(self):
        """Test creating from dictionary."""
        data = SessionData.from_dict({
            'email': 'test@example.com',
            'session_id': 'sid123',
            'user_id': 'uid456',
            'master_key': '00' * 16,
            'created_at': '2024-01-01T12:00:00',
            'updated_at': '2024-01-01T12:00:00'
        })
        
        assert data.master_key == b'\x00' * 16
        assert data.created_at == datetime(2024, 1, 1, 12, 0, 0)
    
    def test_json_roundtrip(self, session_data):
        assert SessionData.from_json(session_data.to_json()).to_dict() == session_data.to_dict()
    
    def test_is_valid(self, session_data):
        assert session_data.is_valid()
        
        session_data.master_key = b'\x00' * 8
        assert not session_data.is_valid()


class TestMemorySession:
    """Tests for MemorySession storage."""
    
    def test_save_and_load(self, session_data):
        storage = MemorySession()
        assert not storage.exists()
        
        storage.save(session_data)
        
        assert storage.load() is session_data
        assert isinstance(storage, SessionStorage)
    
    def test_delete(self, session_data):
        storage = MemorySession(session_data)
        storage.delete()
        
        assert storage.load() is None


class TestSQLiteSession:
    """Tests for SQLiteSession storage."""
    
    @pytest.fixture
    def temp_dir(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)
    
    def test_file_name(self, temp_dir):
        storage = SQLiteSession("account", base_path=temp_dir)
        try:
            assert storage.path == temp_dir / "account.session"
            assert storage.path.exists()
        finally:
            storage.close()
    
    def test_save_and_load(self, temp_dir, session_data):
        with SQLiteSession("account", base_path=temp_dir) as storage:
            storage.save(session_data)
        
        with SQLiteSession(str(temp_dir / "account.session")) as storage:
            loaded = storage.load()
        
        assert loaded.email == session_data.email
        assert loaded.master_key == session_data.master_key
        assert loaded.user_id == "uid456"
    
    def test_empty_load(self, temp_dir):
        with SQLiteSession("empty", base_path=temp_dir) as storage:
            assert storage.load() is None
            assert not storage.exists()
    
    def test_load_wider_schema(self, temp_dir, master_key):
        """Test a session file with extra columns still loads."""
        path = temp_dir / "full.session"
        with closing(sqlite3.connect(str(path))) as conn, conn:
            conn.execute(
                "CREATE TABLE session (id INTEGER PRIMARY KEY, email TEXT NOT NULL, "
                "session_id TEXT NOT NULL, user_id TEXT NOT NULL, user_name TEXT, "
                "master_key BLOB NOT NULL, private_key BLOB, created_at TEXT NOT NULL, "
                "updated_at TEXT NOT NULL)"
            )
            conn.execute(
                "INSERT INTO session (email, session_id, user_id, user_name, master_key, "
                "created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?, ?)",
                ("a@example.com", "sid", "uid", "A", master_key,
                 "2024-01-01T12:00:00", "2024-01-01T12:00:00")
            )
        
        loaded = SQLiteSession(path).load()
        
        assert loaded.session_id == "sid"
        assert loaded.master_key == master_key
    
    def test_delete(self, temp_dir, session_data):
        with SQLiteSession("account", base_path=temp_dir) as storage:
            storage.save(session_data)
            storage.delete()
            
            assert not storage.exists()


class TestSession:
    """Tests for Session."""
    
    def test_invalid_data_rejected(self, session_data):
        session_data.session_id = ""
        
        with pytest.raises(MegaSessionError):
            Session(session_data, api=AsyncMock())
    
    def test_from_empty_storage(self):
        with pytest.raises(MegaSessionError, match="No saved session"):
            Session.from_storage(MemorySession())
    
    def test_filesystem_requires_load(self, session_data):
        with pytest.raises(MegaSessionError, match="not loaded"):
            Session(session_data, api=AsyncMock()).filesystem
    
    @pytest.mark.asyncio
    async def test_load_filesystem_and_context(self, session_data):
        api = AsyncMock()
        api.get_files.return_value = {'f': [{'h': 'rootHndl', 't': 2, 'p': '', 'a': '', 'k': ''}]}
        
        async with Session(session_data, api=api) as session:
            fs = await session.load_filesystem()
            context = session.context()
        
        assert fs.get_node_by_path('/Root').type == NodeType.ROOT
        assert context.filesystem is fs
        assert context.master_key == session_data.master_key
        assert context.api is api
        api.close.assert_awaited_once()

"""
SQLite session storage.

Reads and writes the ``session`` table of a ``<name>.session`` file. Only the
columns a copy needs are touched, so files written by a client that stores
more (RSA keys, caches) load as well.
"""
import sqlite3
from contextlib import closing
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .models import SessionData
from .protocols import SessionStorage

_COLUMNS = ('email', 'session_id', 'user_id', 'master_key', 'created_at', 'updated_at')

_CREATE_TABLE = '''
    CREATE TABLE IF NOT EXISTS session (
        id INTEGER PRIMARY KEY,
        email TEXT NOT NULL,
        session_id TEXT NOT NULL,
        user_id TEXT NOT NULL,
        master_key BLOB NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
'''


class SQLiteSession(SessionStorage):
    """
    SQLite-backed session storage.

    A connection is opened per operation; ``close()`` has nothing to release
    and exists for the ``SessionStorage`` protocol.

    Example:
        >>> storage = SQLiteSession("my_account")   # my_account.session
        >>> storage.save(session_data)
        >>> storage.load().email
        'me@example.com'
    """

    EXTENSION = '.session'

    def __init__(self, session_name: Union[str, Path], base_path: Optional[Path] = None):
        """
        Args:
            session_name: Name without extension, or a full path
            base_path: Directory for named sessions
        """
        name = str(session_name)
        if isinstance(session_name, Path) or name.endswith(self.EXTENSION):
            self._path = Path(session_name)
        else:
            self._path = (base_path or Path()) / f"{name}{self.EXTENSION}"

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._execute(_CREATE_TABLE)

    @property
    def path(self) -> Path:
        return self._path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._path))
        conn.row_factory = sqlite3.Row
        return conn

    def _execute(self, *statements) -> None:
        """Runs statements (SQL or ``(sql, params)``) in one transaction."""
        with closing(self._connect()) as conn, conn:
            for statement in statements:
                if isinstance(statement, tuple):
                    conn.execute(*statement)
                else:
                    conn.execute(statement)

    def load(self) -> Optional[SessionData]:
        with closing(self._connect()) as conn:
            row = conn.execute(
                f"SELECT {', '.join(_COLUMNS)} FROM session ORDER BY id LIMIT 1"
            ).fetchone()

        if row is None:
            return None

        return SessionData(
            email=row['email'],
            session_id=row['session_id'],
            user_id=row['user_id'],
            master_key=bytes(row['master_key']),
            created_at=datetime.fromisoformat(row['created_at']),
            updated_at=datetime.fromisoformat(row['updated_at']),
        )

    def save(self, data: SessionData) -> None:
        """Replaces the stored session."""
        data.update_timestamp()
        values = (
            data.email,
            data.session_id,
            data.user_id,
            data.master_key,
            data.created_at.isoformat(),
            data.updated_at.isoformat(),
        )
        insert = (
            f"INSERT INTO session ({', '.join(_COLUMNS)}) VALUES ({', '.join('?' * len(_COLUMNS))})",
            values,
        )
        self._execute('DELETE FROM session', insert)

    def delete(self) -> None:
        self._execute('DELETE FROM session')

    def exists(self) -> bool:
        with closing(self._connect()) as conn:
            return conn.execute('SELECT 1 FROM session LIMIT 1').fetchone() is not None

    def close(self) -> None:
        pass

    def __enter__(self) -> 'SQLiteSession':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

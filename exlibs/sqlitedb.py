"""SQLite access: statements, transactions and a registry of named databases."""

from __future__ import annotations

import json
import os
import re
import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from exlibs.base import Singleton

_PARAMETER_PREFIXES = ":@$"
_DEFAULT_TABLE_DDL = "CREATE TABLE TBL_DEFAULT( id TEXT NOT NULL, rev TEXT NOT NULL );"
_DEFAULT_TABLE_UPSERT = "INSERT OR REPLACE INTO TBL_DEFAULT(id, rev) VALUES( ?, ? )"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class Statement:
    """A prepared SQL statement with its bound values and result rows."""

    def __init__(self, sql: str) -> None:
        self.sql = sql
        self.bindings: dict[str, str] = {}
        self._cursor: sqlite3.Cursor | None = None
        self._columns: tuple[str, ...] = ()
        self._row: tuple[Any, ...] | None = None

    @property
    def columns(self) -> tuple[str, ...]:
        """Names of the result columns; empty before execution."""
        return self._columns

    @property
    def column_count(self) -> int:
        """Number of result columns."""
        return len(self._columns)

    def _attach(self, cursor: sqlite3.Cursor) -> None:
        self._cursor = cursor
        self._columns = tuple(d[0] for d in cursor.description or ())
        self._row = None

    def next(self) -> bool:
        """Advance to the next result row; False when there is none."""
        if self._cursor is None:
            return False
        self._row = self._cursor.fetchone()
        return self._row is not None

    def value(self, column_name: str) -> str:
        """Text of the named column in the current row.

        The name is matched without regard to case. A NULL value, an
        unknown column or the absence of a current row gives "".
        """
        if self._row is None:
            return ""
        wanted = column_name.casefold()
        for name, cell in zip(self._columns, self._row):
            if name.casefold() == wanted:
                return _as_text(cell)
        return ""

    def __iter__(self) -> Iterator[Statement]:
        while self.next():
            yield self


class Transaction:
    """An explicit transaction, begun on creation.

    Used as a context manager it commits on normal exit and rolls back
    when the block raises, unless it was already finished by hand.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        if connection is None:
            raise ValueError("a database connection is required")
        self._connection = connection
        self.begin()

    def begin(self) -> None:
        """Start a transaction."""
        self._connection.execute("BEGIN TRANSACTION")

    def commit(self) -> None:
        """Commit the current transaction."""
        self._connection.execute("COMMIT")

    def rollback(self) -> None:
        """Discard the current transaction."""
        self._connection.execute("ROLLBACK")

    def __enter__(self) -> Transaction:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._connection.in_transaction:
            return
        if exc_type is None:
            self.commit()
        else:
            self.rollback()


class SQLiteDB:
    """One open database connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _require_connection(self) -> sqlite3.Connection:
        if self.connection is None:
            raise ValueError("no database connection")
        return self.connection

    def prepare(self, query: str) -> Statement:
        """Create a statement for *query*."""
        self._require_connection()
        if not query.strip():
            raise ValueError("query must not be empty")
        return Statement(query)

    def bind_value(self, statement: Statement, name: str, value: Any) -> None:
        """Bind *value*, as text, to the named parameter (e.g. ':id').

        Raises ValueError for a name without a ':', '@' or '$' prefix and
        KeyError when the statement has no such parameter.
        """
        self._require_connection()
        if len(name) < 2 or name[0] not in _PARAMETER_PREFIXES:
            raise ValueError(f"invalid parameter name {name!r}")
        if re.search(re.escape(name) + r"(?![\w$])", statement.sql) is None:
            raise KeyError(name)
        statement.bindings[name[1:]] = _as_text(value)

    def execute(self, statement: Statement) -> Statement:
        """Run *statement*; its rows are then read with :meth:`Statement.next`."""
        connection = self._require_connection()
        parameters: dict[str, str] | tuple = statement.bindings or ()
        cursor = connection.execute(statement.sql, parameters)
        statement._attach(cursor)
        return statement

    def run(self, query: str) -> Statement:
        """Prepare and execute *query* in one step."""
        return self.execute(self.prepare(query))


@dataclass
class DBInfo:
    """Description of a named database and how to open it."""

    name: str
    file_path: str
    json_path: str = ""
    use_wal_mode: bool = False
    db: SQLiteDB | None = None


class SQLiteManager(Singleton):
    """Registry of open databases addressed by name."""

    def __init__(self) -> None:
        self._databases: dict[str, DBInfo] = {}

    def init_db(self, db_info: DBInfo) -> SQLiteDB:
        """Open and register the database described by *db_info*.

        A name that is already registered returns its database unchanged.
        When *json_path* names a file holding a schema for this database
        and the database file did not exist before, the schema's
        ``Create`` statements 1..Rev are run and the revision is recorded
        in ``TBL_DEFAULT``.
        """
        if not db_info.name or not db_info.file_path:
            raise ValueError("database name and file path are required")

        existing = self._databases.get(db_info.name)
        if existing is not None and existing.db is not None:
            return existing.db

        file_existed = os.path.exists(db_info.file_path)
        connection = sqlite3.connect(db_info.file_path, isolation_level=None)
        db = SQLiteDB(connection)
        db_info.db = db
        self._databases[db_info.name] = db_info

        if db_info.use_wal_mode:
            db.run("PRAGMA journal_mode=WAL;")

        schema = self._load_schema(db_info)
        if schema is None or file_existed:
            return db

        with Transaction(connection):
            db.run('PRAGMA encoding = "UTF-16le";')
            db.run(_DEFAULT_TABLE_DDL)
            create = schema["Create"]
            revision = int(create["Rev"])
            for index in range(1, revision + 1):
                db.run(str(create[str(index)]))
            connection.execute(_DEFAULT_TABLE_UPSERT, (db_info.name, str(revision)))
        return db

    @staticmethod
    def _load_schema(db_info: DBInfo) -> dict | None:
        if not db_info.json_path or not os.path.exists(db_info.json_path):
            return None
        with open(db_info.json_path, encoding="utf-8") as handle:
            document = json.load(handle)
        if not isinstance(document, dict):
            raise ValueError(f"{db_info.json_path} does not hold a JSON object")
        return document.get(db_info.name)

    def open(self, db_name: str, file_path: str) -> SQLiteDB:
        """Open and register *file_path* under *db_name*."""
        return self.init_db(DBInfo(name=db_name, file_path=file_path))

    def get_db(self, db_name: str) -> SQLiteDB | None:
        """Return the registered database, or None if there is none."""
        info = self._databases.get(db_name)
        return info.db if info is not None else None

    def close(self, db_name: str) -> None:
        """Close the named database and forget it; KeyError if unknown."""
        info = self._databases.pop(db_name)
        if info.db is not None and info.db.connection is not None:
            info.db.connection.close()

    def __contains__(self, db_name: object) -> bool:
        return db_name in self._databases


def get_manager() -> SQLiteManager:
    """Return the process-wide database manager."""
    return SQLiteManager.get_instance()
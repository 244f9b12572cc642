"""
SQLite-backed document store and simple migration system.

Every collection is a table holding one JSON document per row.  The
secondary indexes each query pattern relies on (services by category,
analytics by timestamp, ...) are expression indexes over
``json_extract(data, '$.field')``, so equality filters passed to
``get_documents`` are answered from an index rather than a scan.

Migrations are stored in the ``migrations`` table and applied in order
by ``init_db`` when the application starts.
"""

import json
import logging
import os
import sqlite3
import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .config import settings


logger = logging.getLogger(__name__)

COLLECTIONS = (
    "services",
    "projects",
    "contacts",
    "testimonials",
    "blog_posts",
    "subscribers",
    "analytics",
)

DAY_MS = 24 * 60 * 60 * 1000

Document = Dict[str, Any]


def now_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # agency_site_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection with dict-like rows."""
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def _collection_table(name: str) -> str:
    # Table names cannot be bound as parameters; only known names are
    # ever interpolated into SQL.
    if name not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {name}")
    return name


def _index(table: str, index_name: str, field: str) -> str:
    return (
        f"CREATE INDEX IF NOT EXISTS idx_{table}_{index_name} "
        f"ON {table}(json_extract(data, '$.{field}'));"
    )


def _collection_ddl() -> str:
    indexes = {
        "services": [("by_category", "category"), ("by_active", "is_active"), ("by_sort_order", "sort_order")],
        "projects": [
            ("by_category", "category"),
            ("by_featured", "featured"),
            ("by_status", "status"),
            ("by_public", "is_public"),
            ("by_sort_order", "sort_order"),
        ],
        "contacts": [
            ("by_email", "email"),
            ("by_status", "status"),
            ("by_priority", "priority"),
            ("by_read", "is_read"),
            ("by_created", "created_at"),
        ],
        "blog_posts": [
            ("by_slug", "slug"),
            ("by_published", "published"),
            ("by_featured", "featured"),
            ("by_category", "category"),
            ("by_published_at", "published_at"),
        ],
        "testimonials": [
            ("by_featured", "featured"),
            ("by_approved", "approved"),
            ("by_rating", "rating"),
            ("by_sort_order", "sort_order"),
        ],
        "subscribers": [("by_email", "email"), ("by_status", "status"), ("by_subscribed_at", "subscribed_at")],
        "analytics": [("by_event", "event"), ("by_timestamp", "timestamp"), ("by_path", "path")],
    }
    statements: List[str] = []
    for table in COLLECTIONS:
        statements.append(
            f"CREATE TABLE IF NOT EXISTS {table} ("
            "id TEXT PRIMARY KEY, "
            "data TEXT NOT NULL"
            ");"
        )
        for index_name, field in indexes[table]:
            statements.append(_index(table, index_name, field))
    return "\n".join(statements)


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer migrations.  Append
    new migrations with an incremented version number.
    """
    migrations: list[tuple[int, str]] = [
        # Migration 1: one document table per collection plus the
        # secondary indexes used by the query layer.
        (1, _collection_ddl()),
    ]

    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in migrations:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version


def _row_to_document(row: sqlite3.Row) -> Document:
    document = json.loads(row["data"])
    document["id"] = row["id"]
    return document


def _serialize(data: Document) -> str:
    payload = {k: v for k, v in data.items() if k != "id"}
    return json.dumps(payload, separators=(",", ":"))


def _filter_param(value: Any) -> Any:
    # json_extract returns JSON booleans as 0/1.
    if isinstance(value, bool):
        return int(value)
    return value


def create_document(collection: str, data: Document) -> str:
    """Insert a single document and return its generated id."""
    table = _collection_table(collection)
    doc_id = uuid.uuid4().hex
    conn = get_connection()
    try:
        conn.execute(
            f"INSERT INTO {table} (id, data) VALUES (?, ?)",
            (doc_id, _serialize(data)),
        )
        conn.commit()
        return doc_id
    finally:
        conn.close()


def create_documents(collection: str, documents: Iterable[Document]) -> List[str]:
    """Insert many documents in one transaction; ids are returned in input order."""
    table = _collection_table(collection)
    rows = [(uuid.uuid4().hex, _serialize(doc)) for doc in documents]
    conn = get_connection()
    try:
        conn.executemany(f"INSERT INTO {table} (id, data) VALUES (?, ?)", rows)
        conn.commit()
        return [doc_id for doc_id, _ in rows]
    finally:
        conn.close()


def get_document(collection: str, doc_id: str) -> Optional[Document]:
    """Return a single document by id, or ``None`` if it does not exist."""
    table = _collection_table(collection)
    conn = get_connection()
    try:
        row = conn.execute(f"SELECT id, data FROM {table} WHERE id = ?", (doc_id,)).fetchone()
        return _row_to_document(row) if row else None
    finally:
        conn.close()


def get_documents(
    collection: str,
    filters: Optional[Dict[str, Any]] = None,
    predicate: Optional[Callable[[Document], bool]] = None,
    limit: Optional[int] = None,
) -> List[Document]:
    """Return documents of a collection in insertion order.

    ``filters`` maps top-level field names to required values and is
    evaluated in SQL (``None`` matches a missing field).  ``predicate``
    is applied afterwards in Python for anything an equality filter
    cannot express.  ``limit`` truncates the final result.
    """
    table = _collection_table(collection)
    where_clauses: list[str] = []
    params: list[Any] = []
    for field, value in (filters or {}).items():
        if not field.replace("_", "").isalnum():
            raise ValueError(f"Invalid filter field: {field}")
        if value is None:
            where_clauses.append(f"json_extract(data, '$.{field}') IS NULL")
        else:
            where_clauses.append(f"json_extract(data, '$.{field}') = ?")
            params.append(_filter_param(value))
    where_sql = " WHERE " + " AND ".join(where_clauses) if where_clauses else ""

    conn = get_connection()
    try:
        rows = conn.execute(
            f"SELECT id, data FROM {table}{where_sql} ORDER BY rowid ASC", tuple(params)
        ).fetchall()
    finally:
        conn.close()

    documents = [_row_to_document(row) for row in rows]
    if predicate is not None:
        documents = [doc for doc in documents if predicate(doc)]
    if limit is not None:
        documents = documents[:limit]
    return documents


def update_document(collection: str, doc_id: str, changes: Document) -> Optional[Document]:
    """Shallow-merge ``changes`` into a stored document.

    Returns the updated document, or ``None`` if the id is unknown.
    """
    table = _collection_table(collection)
    conn = get_connection()
    try:
        row = conn.execute(f"SELECT id, data FROM {table} WHERE id = ?", (doc_id,)).fetchone()
        if not row:
            return None
        document = _row_to_document(row)
        document.update({k: v for k, v in changes.items() if k != "id"})
        conn.execute(f"UPDATE {table} SET data = ? WHERE id = ?", (_serialize(document), doc_id))
        conn.commit()
        return document
    finally:
        conn.close()


def delete_document(collection: str, doc_id: str) -> bool:
    """Delete a document by id.  Returns ``True`` if a row was removed."""
    table = _collection_table(collection)
    conn = get_connection()
    try:
        cursor = conn.execute(f"DELETE FROM {table} WHERE id = ?", (doc_id,))
        conn.commit()
        return cursor.rowcount > 0
    finally:
        conn.close()


def delete_documents(collection: str, ids: Optional[Iterable[str]] = None) -> int:
    """Delete the given ids, or every document when ``ids`` is omitted.

    Returns the number of deleted rows.
    """
    table = _collection_table(collection)
    if ids is not None:
        ids = list(ids)
        if not ids:
            return 0
    conn = get_connection()
    try:
        if ids is None:
            cursor = conn.execute(f"DELETE FROM {table}")
            deleted = cursor.rowcount
        else:
            cursor = conn.executemany(f"DELETE FROM {table} WHERE id = ?", [(i,) for i in ids])
            deleted = cursor.rowcount
        conn.commit()
        return deleted
    finally:
        conn.close()


def count_documents(collection: str) -> int:
    """Return the number of documents in a collection."""
    table = _collection_table(collection)
    conn = get_connection()
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()

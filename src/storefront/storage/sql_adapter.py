"""Durable key-value store on a single SQL table.

Defaults to a local SQLite file, so the storefront keeps its catalog,
orders and cart across restarts without any server to run.
"""

from sqlalchemy import Column, MetaData, String, Table, Text, create_engine, delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from storefront.storage.port import KeyValueStore, StoreUnavailable

metadata = MetaData()

kv_store = Table(
    "kv_store",
    metadata,
    Column("key", String(255), primary_key=True),
    Column("value", Text, nullable=False),
)


class SqlStore(KeyValueStore):
    """Key-value store backed by the ``kv_store`` table."""

    def __init__(self, uri: str, engine: Engine | None = None) -> None:
        self.uri = uri
        try:
            self._engine = engine or create_engine(uri)
            metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            raise StoreUnavailable(f"Cannot open store at {uri}: {exc}") from exc

    def get(self, key: str) -> str | None:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(select(kv_store.c.value).where(kv_store.c.key == key)).first()
        except SQLAlchemyError as exc:
            raise StoreUnavailable(str(exc)) from exc
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(update(kv_store).where(kv_store.c.key == key).values(value=value))
                if result.rowcount == 0:
                    conn.execute(insert(kv_store).values(key=key, value=value))
        except SQLAlchemyError as exc:
            raise StoreUnavailable(str(exc)) from exc

    def remove(self, key: str) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(delete(kv_store).where(kv_store.c.key == key))
        except SQLAlchemyError as exc:
            raise StoreUnavailable(str(exc)) from exc

    def dispose(self) -> None:
        self._engine.dispose()

"""SQL-backed key-value store — implements KeyValueStore over one table.

Each call runs in its own short session and commits immediately. There is
deliberately no row locking: the store offers plain get/put/delete only.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, func
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from contador.adapters.persistence.models import KeyValueModel
from contador.application.ports.kv_store import KeyValueStore
from contador.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class SqlKeyValueStore(KeyValueStore):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get(self, key: str) -> str | None:
        try:
            async with self._sessions() as session:
                m = await session.get(KeyValueModel, key)
                return m.value if m else None
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"get '{key}' failed") from e

    async def put(self, key: str, value: str) -> None:
        try:
            async with self._sessions() as session:
                stmt = insert(KeyValueModel).values(key=key, value=value)
                # Upsert: concurrent first writes both succeed, last one wins
                await session.execute(
                    stmt.on_conflict_do_update(
                        index_elements=[KeyValueModel.key],
                        set_={"value": stmt.excluded.value, "updated_at": func.now()},
                    )
                )
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"put '{key}' failed") from e

    async def delete(self, key: str) -> None:
        try:
            async with self._sessions() as session:
                await session.execute(delete(KeyValueModel).where(KeyValueModel.key == key))
                await session.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"delete '{key}' failed") from e

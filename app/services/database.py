import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from pydantic import BaseModel
from sqlalchemy import Column, Float, Integer, MetaData, Table, Text, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.exceptions.custom import StoreError

logger = logging.getLogger(__name__)

metadata = MetaData()

hotel_table = Table(
    "Hotel",
    metadata,
    Column("HotelID", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("location", Text, nullable=False),
    Column("rating", Float, nullable=False),
    Column("contact", Text, nullable=False),
    sqlite_autoincrement=True,
)

room_table = Table(
    "Room",
    metadata,
    Column("RoomID", Integer, primary_key=True, autoincrement=True),
    Column("RoomNumber", Text, nullable=False),
    Column("Type", Text, nullable=False),
    Column("Price", Float, nullable=False),
    Column("Status", Text, nullable=False),
    sqlite_autoincrement=True,
)


class ExecuteResult(BaseModel):
    rows_affected: int
    generated_id: int | None = None


class Database:
    """Gateway to the relational store.

    Every statement is text with named ``:param`` placeholders and a separate
    parameter mapping; values are always bound by the driver. Each call checks
    a connection out of the engine's pool and returns it when done.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @classmethod
    @asynccontextmanager
    async def connect(cls, url: str, echo: bool = False) -> AsyncIterator["Database"]:
        engine = create_async_engine(url, echo=echo)
        logger.info("Opened database %s", engine.url.render_as_string(hide_password=True))
        try:
            yield cls(engine)
        finally:
            await engine.dispose()
            logger.info("Closed database")

    async def create_schema(self) -> None:
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
        except SQLAlchemyError as exc:
            logger.error("Schema creation failed: %s", exc)
            raise StoreError(str(exc)) from exc

    async def query_one(
        self, sql: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(text(sql), params or {})
                row = result.mappings().first()
        except SQLAlchemyError as exc:
            logger.error("Query failed: %s", exc)
            raise StoreError(str(exc)) from exc
        return dict(row) if row is not None else None

    async def query_all(
        self, sql: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(text(sql), params or {})
                rows = result.mappings().all()
        except SQLAlchemyError as exc:
            logger.error("Query failed: %s", exc)
            raise StoreError(str(exc)) from exc
        return [dict(row) for row in rows]

    async def execute(
        self, sql: str, params: dict[str, Any] | None = None
    ) -> ExecuteResult:
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(text(sql), params or {})
                outcome = ExecuteResult(
                    rows_affected=result.rowcount,
                    generated_id=result.lastrowid,
                )
        except SQLAlchemyError as exc:
            logger.error("Statement failed: %s", exc)
            raise StoreError(str(exc)) from exc
        return outcome

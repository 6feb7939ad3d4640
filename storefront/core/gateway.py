import logging
from contextlib import asynccontextmanager
from typing import List, NamedTuple, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from storefront.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

Row = List[Optional[str]]


class QueryResult(NamedTuple):
    columns: List[str]
    rows: List[Row]


def _render(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


class DataGateway:
    """
    The only component that talks to the database.

    Wraps one long-lived async connection. Outside of ``unit_of_work`` every
    statement is committed on its own; inside it, statements are committed or
    rolled back together when the scope ends.
    """

    def __init__(self, connection: AsyncConnection):
        self.connection = connection
        self._in_unit = False

    @property
    def dialect_name(self) -> str:
        return self.connection.dialect.name

    async def _execute(self, statement):
        try:
            return await self.connection.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Statement failed: %s", e)
            if not self._in_unit:
                await self.connection.rollback()
            raise DatabaseError(str(getattr(e, "orig", None) or e)) from e

    async def _finish(self) -> None:
        if self._in_unit:
            return
        try:
            await self.connection.commit()
        except SQLAlchemyError as e:
            logger.error("Commit failed: %s", e)
            await self.connection.rollback()
            raise DatabaseError(str(e)) from e

    async def execute_write(self, statement) -> None:
        """Run an INSERT/UPDATE/DELETE statement."""
        await self._execute(statement)
        await self._finish()

    async def execute_query_count(self, query) -> int:
        """Run a query and return how many rows it produced."""
        result = await self._execute(query)
        count = len(result.fetchall())
        await self._finish()
        return count

    async def execute_query_rows(self, query) -> List[Row]:
        """Run a query and return its rows with every value rendered as text."""
        return (await self.execute_query_table(query)).rows

    async def execute_query_table(self, query) -> QueryResult:
        result = await self._execute(query)
        columns = list(result.keys())
        rows = [[_render(value) for value in row] for row in result.fetchall()]
        await self._finish()
        return QueryResult(columns, rows)

    async def current_sequence_value(self, sequence_name: str) -> int:
        """
        Returns the last key generated on this connection.

        Args:
            sequence_name: Postgres sequence name, e.g. ``orders_ordernumber_seq``

        Returns:
            int: The current value, or -1 if nothing was generated yet
        """
        if self.dialect_name == "sqlite":
            # SQLite has no sequences, the rowid of the last insert plays that role
            query = text("SELECT last_insert_rowid()")
        else:
            query = text(
                "SELECT currval(CAST(CAST(:name AS TEXT) AS regclass))"
            ).bindparams(name=sequence_name)
        try:
            rows = await self.execute_query_rows(query)
        except DatabaseError:
            logger.info("Sequence %s not used in this session yet", sequence_name)
            return -1
        if not rows or rows[0][0] is None:
            return -1
        value = int(rows[0][0])
        return value if value > 0 else -1

    @asynccontextmanager
    async def unit_of_work(self):
        """Group several statements into one all-or-nothing transaction."""
        if self._in_unit:
            yield self
            return

        self._in_unit = True
        try:
            yield self
        except BaseException:
            self._in_unit = False
            await self.connection.rollback()
            logger.warning("Unit of work rolled back")
            raise
        self._in_unit = False
        await self._finish()

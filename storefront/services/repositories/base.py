"""Base repository with shared Supabase client and CRUD over one table."""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import httpx
from postgrest.exceptions import APIError
from pydantic import BaseModel
from supabase._async.client import AsyncClient

from storefront.errors import FetchFailure, WriteFailure
from storefront.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Errors raised by postgrest-py or the underlying transport
BACKEND_ERRORS = (APIError, httpx.HTTPError)

# Postgres "invalid input syntax", e.g. free text compared against a uuid column
INVALID_INPUT_CODE = "22P02"


def _error_message(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)


class BaseRepository(Generic[ModelT]):
    """Base class for all repositories.

    Subclasses name the table, the pydantic model built from each row and the
    default ordering. All methods await the async Supabase client.
    """

    table: str = ""
    model: Type[ModelT]
    columns: str = "*"
    order_by: Optional[str] = "created_at"
    order_desc: bool = True

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def _fetch(self, query) -> List[Dict[str, Any]]:
        try:
            result = await query.execute()
        except BACKEND_ERRORS as e:
            logger.error("Failed to read %s: %s", self.table, _error_message(e))
            raise FetchFailure(raw_error=e) from e
        return result.data or []

    async def _write(self, query, action: str) -> List[Dict[str, Any]]:
        try:
            result = await query.execute()
        except BACKEND_ERRORS as e:
            logger.error("Failed to %s %s: %s", action, self.table, _error_message(e))
            raise WriteFailure(raw_error=e) from e
        return result.data or []

    def _select(self, filters: Optional[Dict[str, Any]] = None):
        query = self.client.table(self.table).select(self.columns)
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        return query

    async def _lookup(self, query) -> Optional[ModelT]:
        """First row of a single-record lookup; a malformed key matches nothing."""
        try:
            rows = await self._fetch(query)
        except FetchFailure as e:
            if getattr(e.raw_error, "code", None) == INVALID_INPUT_CODE:
                return None
            raise
        return self.model(**rows[0]) if rows else None

    async def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        desc: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        """List records matching equality filters, sorted by order_by."""
        query = self._select(filters)
        column = order_by or self.order_by
        if column:
            query = query.order(column, desc=self.order_desc if desc is None else desc)
        if limit:
            query = query.limit(limit)
        rows = await self._fetch(query)
        return [self.model(**row) for row in rows]

    async def get(self, record_id: str) -> Optional[ModelT]:
        """Get record by ID."""
        return await self._lookup(self._select({"id": record_id}))

    async def find_one(self, filters: Dict[str, Any]) -> Optional[ModelT]:
        return await self._lookup(self._select(filters).limit(1))

    async def create(self, data: Dict[str, Any]) -> ModelT:
        """Insert one record."""
        rows = await self._write(self.client.table(self.table).insert(data), "insert into")
        if not rows:
            logger.error("Insert into %s returned no row", self.table)
            raise WriteFailure()
        return self.model(**rows[0])

    async def update(self, record_id: str, data: Dict[str, Any]) -> Optional[ModelT]:
        """Update a partial field set of one record. Returns None if it does not exist."""
        rows = await self._write(
            self.client.table(self.table).update(data).eq("id", record_id), "update"
        )
        return self.model(**rows[0]) if rows else None

    async def delete(self, record_id: str) -> bool:
        """Delete one record. Returns False if nothing matched."""
        rows = await self._write(
            self.client.table(self.table).delete().eq("id", record_id), "delete from"
        )
        return len(rows) > 0

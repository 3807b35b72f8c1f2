"""
SQLite implementation of quotation storage.

Products and responses are stored as JSON columns on the list row.
Supplier submissions run inside a BEGIN IMMEDIATE transaction so the
link check-and-set and the single-key merge into ``responses`` see and
write the latest committed state.
"""

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

import aiosqlite

from cotacao.config import get_logger
from cotacao.core.entities import (
    LinkStatus,
    ListStatus,
    Product,
    QuotationList,
    ResponseLink,
)
from cotacao.core.entities.quotation import utcnow
from cotacao.core.exceptions import (
    ConcurrentModificationError,
    LinkAlreadyRespondedError,
    LinkNotFoundError,
    ListFinalizedError,
    QuotationListNotFoundError,
    StorageUnavailableError,
)
from cotacao.core.interfaces import IQuotationStore
from cotacao.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


@asynccontextmanager
async def storage_errors(operation: str) -> AsyncIterator[None]:
    """Translate driver failures into StorageUnavailableError."""
    try:
        yield
    except aiosqlite.Error as e:
        logger.error("storage_operation_failed", operation=operation, error=str(e))
        raise StorageUnavailableError(operation, str(e)) from e


class SQLiteQuotationStore(IQuotationStore):
    """SQLite implementation of quotation list and response link storage."""

    async def create_list(self, quotation_list: QuotationList) -> QuotationList:
        """Persist a new quotation list."""
        async with storage_errors("create_list"), get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO quotation_lists (
                    id, name, products_json, responses_json,
                    status, version, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    quotation_list.id,
                    quotation_list.name,
                    self._dump_products(quotation_list),
                    json.dumps(quotation_list.responses, ensure_ascii=False),
                    quotation_list.status.value,
                    quotation_list.version,
                    quotation_list.created_at.isoformat(),
                    quotation_list.updated_at.isoformat(),
                ),
            )
        logger.info(
            "quotation_list_stored",
            list_id=quotation_list.id,
            products=len(quotation_list.products),
        )
        return quotation_list

    async def get_list(self, list_id: str) -> QuotationList:
        """Load a list by ID."""
        async with storage_errors("get_list"), get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM quotation_lists WHERE id = ?", (list_id,)
            )
            row = await cursor.fetchone()
        if row is None:
            raise QuotationListNotFoundError(list_id)
        return self._row_to_list(row)

    async def save_list(self, quotation_list: QuotationList) -> QuotationList:
        """Save a loaded list if nobody changed it since it was read."""
        updated_at = utcnow()
        async with storage_errors("save_list"), get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE quotation_lists SET
                    name = ?,
                    products_json = ?,
                    responses_json = ?,
                    status = ?,
                    version = version + 1,
                    updated_at = ?
                WHERE id = ? AND version = ?
                """,
                (
                    quotation_list.name,
                    self._dump_products(quotation_list),
                    json.dumps(quotation_list.responses, ensure_ascii=False),
                    quotation_list.status.value,
                    updated_at.isoformat(),
                    quotation_list.id,
                    quotation_list.version,
                ),
            )
            if cursor.rowcount == 0:
                exists = await conn.execute(
                    "SELECT 1 FROM quotation_lists WHERE id = ?", (quotation_list.id,)
                )
                if await exists.fetchone() is None:
                    raise QuotationListNotFoundError(quotation_list.id)
                raise ConcurrentModificationError(quotation_list.id, quotation_list.version)

        logger.info(
            "quotation_list_saved",
            list_id=quotation_list.id,
            status=quotation_list.status.value,
            version=quotation_list.version + 1,
        )
        return quotation_list.model_copy(
            update={"version": quotation_list.version + 1, "updated_at": updated_at}
        )

    async def list_lists(
        self,
        status: ListStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[QuotationList]:
        """List quotation lists, newest first."""
        query = "SELECT * FROM quotation_lists"
        params: list = []
        if status is not None:
            query += " WHERE status = ?"
            params.append(status.value)
        query += " ORDER BY created_at DESC LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        async with storage_errors("list_lists"), get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
        return [self._row_to_list(row) for row in rows]

    async def list_ids_with_links(self) -> set[str]:
        """IDs of every list that has at least one issued link."""
        async with storage_errors("list_ids_with_links"), get_connection() as conn:
            cursor = await conn.execute("SELECT DISTINCT list_id FROM response_links")
            rows = await cursor.fetchall()
        return {row["list_id"] for row in rows}

    async def save_link(self, link: ResponseLink) -> ResponseLink:
        """Insert a link, or update it while it is still pending."""
        async with storage_errors("save_link"), get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO response_links (
                    id, list_id, supplier_name, token, status, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    status = excluded.status,
                    updated_at = excluded.updated_at
                WHERE response_links.status = 'pending'
                """,
                (
                    link.id,
                    link.list_id,
                    link.supplier_name,
                    link.token,
                    link.status.value,
                    link.created_at.isoformat(),
                    link.updated_at.isoformat(),
                ),
            )
        logger.info("response_link_saved", link_id=link.id, status=link.status.value)
        return link

    async def get_link_by_token(self, token: str) -> ResponseLink | None:
        """Get a link by exact token match."""
        async with storage_errors("get_link_by_token"), get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM response_links WHERE token = ?", (token,)
            )
            row = await cursor.fetchone()
        return self._row_to_link(row) if row is not None else None

    async def list_links(self, list_id: str) -> list[ResponseLink]:
        """Links issued for a list, oldest first."""
        async with storage_errors("list_links"), get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM response_links
                WHERE list_id = ?
                ORDER BY created_at, id
                """,
                (list_id,),
            )
            rows = await cursor.fetchall()
        return [self._row_to_link(row) for row in rows]

    async def record_submission(
        self,
        link: ResponseLink,
        entries: dict[str, str],
    ) -> tuple[QuotationList, ResponseLink]:
        """Merge a supplier response and consume its link in one transaction."""
        now = utcnow()
        async with storage_errors("record_submission"), get_transaction(immediate=True) as conn:
            cursor = await conn.execute(
                "SELECT * FROM response_links WHERE id = ?", (link.id,)
            )
            link_row = await cursor.fetchone()
            if link_row is None:
                raise LinkNotFoundError(link.token)
            current_link = self._row_to_link(link_row)
            if current_link.is_responded:
                raise LinkAlreadyRespondedError(current_link.id, current_link.supplier_name)

            cursor = await conn.execute(
                "SELECT * FROM quotation_lists WHERE id = ?", (current_link.list_id,)
            )
            list_row = await cursor.fetchone()
            if list_row is None:
                raise QuotationListNotFoundError(current_link.list_id)
            current_list = self._row_to_list(list_row)
            if current_list.is_finalized:
                raise ListFinalizedError(current_list.id)

            responses = dict(current_list.responses)
            responses[current_link.supplier_name] = dict(entries)

            await conn.execute(
                """
                UPDATE quotation_lists SET
                    responses_json = ?,
                    version = version + 1,
                    updated_at = ?
                WHERE id = ?
                """,
                (json.dumps(responses, ensure_ascii=False), now.isoformat(), current_list.id),
            )
            await conn.execute(
                """
                UPDATE response_links SET status = ?, updated_at = ?
                WHERE id = ? AND status = ?
                """,
                (
                    LinkStatus.RESPONDED.value,
                    now.isoformat(),
                    current_link.id,
                    LinkStatus.PENDING.value,
                ),
            )

        updated_list = current_list.model_copy(
            update={
                "responses": responses,
                "version": current_list.version + 1,
                "updated_at": now,
            }
        )
        updated_link = current_link.model_copy(
            update={"status": LinkStatus.RESPONDED, "updated_at": now}
        )
        logger.info(
            "submission_recorded",
            list_id=updated_list.id,
            link_id=updated_link.id,
            supplier=updated_link.supplier_name,
            entries=len(entries),
        )
        return updated_list, updated_link

    @staticmethod
    def _dump_products(quotation_list: QuotationList) -> str:
        return json.dumps(
            [p.model_dump() for p in quotation_list.products],
            ensure_ascii=False,
        )

    @staticmethod
    def _parse_datetime(value: str | None) -> datetime:
        if value:
            try:
                return datetime.fromisoformat(value)
            except (ValueError, TypeError):
                pass
        return utcnow()

    @classmethod
    def _row_to_list(cls, row: aiosqlite.Row) -> QuotationList:
        """Convert a database row to a QuotationList entity."""
        products = [Product(**p) for p in json.loads(row["products_json"] or "[]")]
        responses = json.loads(row["responses_json"] or "{}")
        return QuotationList(
            id=row["id"],
            name=row["name"],
            products=products,
            responses=responses if isinstance(responses, dict) else {},
            status=ListStatus(row["status"]),
            version=row["version"],
            created_at=cls._parse_datetime(row["created_at"]),
            updated_at=cls._parse_datetime(row["updated_at"]),
        )

    @classmethod
    def _row_to_link(cls, row: aiosqlite.Row) -> ResponseLink:
        """Convert a database row to a ResponseLink entity."""
        return ResponseLink(
            id=row["id"],
            list_id=row["list_id"],
            supplier_name=row["supplier_name"],
            token=row["token"],
            status=LinkStatus(row["status"]),
            created_at=cls._parse_datetime(row["created_at"]),
            updated_at=cls._parse_datetime(row["updated_at"]),
        )

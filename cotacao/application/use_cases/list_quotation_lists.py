"""List Quotation Lists Use Case: browsing lists, open quotes and links."""

from cotacao.application.dto.responses import QuotationListListResponse
from cotacao.application.use_cases.converters import to_summary_response
from cotacao.config import get_logger
from cotacao.core.entities import ListStatus, QuotationList, ResponseLink
from cotacao.core.interfaces import IQuotationStore

logger = get_logger(__name__)


class ListQuotationListsUseCase:
    """Read-only queries over stored lists."""

    def __init__(self, store: IQuotationStore | None = None):
        self._store = store

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    async def execute(
        self,
        status: ListStatus | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[QuotationList]:
        """All lists, newest first, optionally filtered by status."""
        store = await self._get_store()
        return await store.list_lists(status=status, limit=limit, offset=offset)

    async def get(self, list_id: str) -> QuotationList:
        store = await self._get_store()
        return await store.get_list(list_id)

    async def open_quotes(self) -> list[QuotationList]:
        """Open lists with at least one issued link or one response."""
        store = await self._get_store()

        open_lists = await store.list_lists(status=ListStatus.OPEN, limit=-1)
        with_links = await store.list_ids_with_links()
        quotes = [ql for ql in open_lists if ql.id in with_links or ql.responses]

        logger.debug("open_quotes_listed", total=len(quotes))
        return quotes

    async def links(self, list_id: str) -> list[ResponseLink]:
        """Links of an existing list, oldest first."""
        store = await self._get_store()
        await store.get_list(list_id)
        return await store.list_links(list_id)

    def to_response(self, lists: list[QuotationList]) -> QuotationListListResponse:
        return QuotationListListResponse(
            items=[to_summary_response(ql) for ql in lists],
            total=len(lists),
        )

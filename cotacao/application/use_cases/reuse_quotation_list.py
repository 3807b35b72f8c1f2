"""Reuse Quotation List Use Case."""

from cotacao.application.dto.responses import QuotationListResponse
from cotacao.application.use_cases.converters import to_list_response
from cotacao.config import get_logger
from cotacao.core.entities import QuotationList
from cotacao.core.interfaces import IQuotationStore
from cotacao.core.services import reopen_as_template

logger = get_logger(__name__)


class ReuseQuotationListUseCase:
    """Start a new quotation round with the same products."""

    def __init__(self, store: IQuotationStore | None = None):
        self._store = store

    async def _get_store(self) -> IQuotationStore:
        if self._store is None:
            from cotacao.infrastructure.storage.sqlite import get_quotation_store

            self._store = await get_quotation_store()
        return self._store

    async def execute(self, list_id: str, name: str | None = None) -> QuotationList:
        """Create the new list. The source list is left untouched."""
        store = await self._get_store()

        source = await store.get_list(list_id)
        reused = await store.create_list(reopen_as_template(source, name=name))

        logger.info("reuse_list_complete", source_list_id=source.id, list_id=reused.id)
        return reused

    def to_response(self, quotation_list: QuotationList) -> QuotationListResponse:
        return to_list_response(quotation_list)
